"""Calculator routes: defaults, metrics and single-field edits per strategy.

Stateless: every request carries the records it needs and gets back new ones.
"""

from dataclasses import replace

from fastapi import APIRouter, Depends, HTTPException

from dealcalc.api.deps import get_strategy
from dealcalc.api.schemas import (
    DefaultsResponse,
    EditRequest,
    EditResponse,
    MetricsRequest,
    MetricsResponse,
)
from dealcalc.engine.records import build_inputs, build_units, non_finite_paths, record_to_dict
from dealcalc.engine.session import apply_input, compute_metrics, record_for, units_for
from dealcalc.models.session import RECORD_ATTRS, UNIT_ATTRS, SessionState
from dealcalc.models.strategies import StrategyType

router = APIRouter(prefix="/api/v1/calculators", tags=["calculators"])


def _session_for(strategy: StrategyType, inputs: dict, units: list | None = None) -> SessionState:
    """A session holding the request's records for one strategy."""
    changes = {RECORD_ATTRS[strategy]: build_inputs(strategy, inputs)}
    if strategy in UNIT_ATTRS:
        changes[UNIT_ATTRS[strategy]] = build_units(strategy, units)
    return replace(SessionState(), active=strategy, **changes)


@router.get("/{strategy}/defaults", response_model=DefaultsResponse)
async def get_defaults(strategy: StrategyType = Depends(get_strategy)):
    return DefaultsResponse(
        strategy=strategy.value,
        inputs=record_to_dict(build_inputs(strategy)),
        units=record_to_dict(list(build_units(strategy))),
    )


@router.post("/{strategy}/metrics", response_model=MetricsResponse)
async def calculate_metrics(req: MetricsRequest, strategy: StrategyType = Depends(get_strategy)):
    try:
        session = _session_for(strategy, req.inputs, req.units)
    except (ValueError, TypeError) as e:
        raise HTTPException(status_code=422, detail=str(e))

    metrics = compute_metrics(session, strategy)
    return MetricsResponse(
        strategy=strategy.value,
        metrics=record_to_dict(metrics),
        non_finite=non_finite_paths(metrics),
    )


@router.post("/{strategy}/edit", response_model=EditResponse)
async def edit_input(req: EditRequest, strategy: StrategyType = Depends(get_strategy)):
    try:
        session = apply_input(_session_for(strategy, req.inputs, req.units), strategy, req.field, req.value)
    except (ValueError, TypeError) as e:
        raise HTTPException(status_code=422, detail=str(e))

    return EditResponse(
        strategy=strategy.value,
        inputs=record_to_dict(record_for(session, strategy)),
        units=record_to_dict(list(units_for(session, strategy))),
    )
