"""CLI for running a calculator from the shell.

Usage:
    python -m dealcalc.cli ltr
    python -m dealcalc.cli str --set adr=275 --set occupancy_pct=68
    python -m dealcalc.cli dscr --set property_type=STR --set interest_rate_pct=7
    python -m dealcalc.cli ltr --push-from str --json
"""

import argparse
import json
import sys
from decimal import Decimal

from dealcalc.engine.records import non_finite_paths, record_to_dict
from dealcalc.engine.session import apply_input, compute_metrics, push_data, switch_strategy
from dealcalc.models.session import SessionState
from dealcalc.models.strategies import StrategyType

STRATEGIES = [s.value for s in StrategyType]


def parse_assignment(text: str) -> tuple[str, str]:
    field_name, sep, raw = text.partition("=")
    if not sep or not field_name:
        raise argparse.ArgumentTypeError(f"expected FIELD=VALUE, got {text!r}")
    return field_name.strip(), raw.strip()


def flatten(data, prefix: str = "") -> dict[str, object]:
    rows: dict[str, object] = {}
    if isinstance(data, dict):
        for key, value in data.items():
            rows.update(flatten(value, f"{prefix}{key}."))
    elif isinstance(data, list):
        for i, value in enumerate(data):
            rows.update(flatten(value, f"{prefix}{i}."))
    else:
        rows[prefix.rstrip(".")] = data
    return rows


def format_value(value) -> str:
    if isinstance(value, Decimal):
        return f"{value:,.2f}" if value.is_finite() else "n/a"
    if value is None:
        return "n/a"
    return str(value)


def print_metrics(strategy: StrategyType, metrics) -> None:
    print(f"\n{'=' * 60}")
    print(f"  {strategy.value.upper()} metrics")
    print(f"{'=' * 60}")
    for key, value in flatten(record_to_dict(metrics)).items():
        print(f"  {key:<44} {format_value(value):>12}")
    print()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Rental property underwriting calculator")
    parser.add_argument("strategy", choices=STRATEGIES, help="Calculator to run")
    parser.add_argument(
        "--set", dest="assignments", action="append", type=parse_assignment, default=[],
        metavar="FIELD=VALUE", help="Edit an input field (repeatable, applied in order)",
    )
    parser.add_argument("--push-from", choices=STRATEGIES, help="Push shared deal data from another calculator first")
    parser.add_argument("--json", action="store_true", help="Print metrics as JSON")

    args = parser.parse_args(argv)
    strategy = StrategyType(args.strategy)

    session = switch_strategy(SessionState(), strategy)
    if args.push_from:
        session = push_data(session, args.push_from, strategy)
    try:
        for field_name, value in args.assignments:
            session = apply_input(session, strategy, field_name, value)
    except ValueError as e:
        parser.error(str(e))

    metrics = compute_metrics(session, strategy)
    if args.json:
        payload = {"strategy": strategy.value, "metrics": record_to_dict(metrics), "non_finite": non_finite_paths(metrics)}
        print(json.dumps(payload, default=str, indent=2))
    else:
        print_metrics(strategy, metrics)
    return 0


if __name__ == "__main__":
    sys.exit(main())
