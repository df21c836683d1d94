"""FastAPI dependency injection."""

from fastapi import HTTPException

from dealcalc.models.strategies import StrategyType


def get_strategy(strategy: str) -> StrategyType:
    try:
        return StrategyType(strategy)
    except ValueError:
        valid = ", ".join(s.value for s in StrategyType)
        raise HTTPException(status_code=422, detail=f"Unknown strategy {strategy!r} (expected one of: {valid})")
