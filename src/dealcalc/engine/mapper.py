"""Push deal data from one calculator into another.

A source record (plus its unit collection, where it has one) is flattened into a
CanonicalDeal: purchase, financing and carrying-cost fields under shared names,
with rent / ADR / occupancy derived the way the source strategy earns income.
The canonical values are then renamed onto whatever fields the destination has.
"""

import logging
from dataclasses import asdict, dataclass, fields, replace
from decimal import Decimal
from typing import Any

from dealcalc.config import settings
from dealcalc.engine.cashflow import str_monthly_revenue
from dealcalc.engine.dscr import with_default_stress_rate
from dealcalc.models.inputs import DscrInputs
from dealcalc.models.session import RECORD_ATTRS, UNIT_ATTRS, SessionState
from dealcalc.models.strategies import StrategyType

logger = logging.getLogger(__name__)


@dataclass
class CanonicalDeal:
    """Strategy-neutral view of a deal. None = the source has no such field."""
    purchase_price: Decimal | None = None
    down_payment_pct: Decimal | None = None
    down_payment_amt: Decimal | None = None
    closing_costs: Decimal | None = None
    renovation_cost: Decimal | None = None
    interest_rate_pct: Decimal | None = None
    term_years: Decimal | None = None
    annual_tax: Decimal | None = None
    tax_rate_pct: Decimal | None = None
    insurance_monthly: Decimal | None = None
    hoa_monthly: Decimal | None = None

    # Operating costs
    utilities_monthly: Decimal | None = None
    management_pct: Decimal | None = None
    maintenance_pct: Decimal | None = None
    capex_pct: Decimal | None = None

    # Income
    rent: Decimal | None = None  # Monthly
    adr: Decimal | None = None
    occupancy_pct: Decimal | None = None


CANONICAL_FIELDS = tuple(f.name for f in fields(CanonicalDeal))

# DSCR keeps income and investor costs under its own names
DSCR_FIELD_NAMES: dict[str, str] = {
    "utilities_monthly": "inv_utilities_monthly",
    "management_pct": "inv_management_pct",
    "maintenance_pct": "inv_maintenance_pct",
    "capex_pct": "inv_capex_pct",
    "rent": "ltr_rent",
    "adr": "str_adr",
    "occupancy_pct": "str_occ",
}

# Strategies that can neither send nor receive a push
NOT_TRANSFERABLE = frozenset({StrategyType.BUILD})


def _unit_rent_total(units: tuple) -> Decimal:
    return sum((u.rent for u in units), Decimal("0"))


def extract_canonical(source: StrategyType | str, session: SessionState) -> CanonicalDeal:
    source = StrategyType(source)
    if source in NOT_TRANSFERABLE:
        logger.debug("%s is not a transfer source", source.value)
        return CanonicalDeal()

    record = getattr(session, RECORD_ATTRS[source])

    if source is StrategyType.DSCR:
        values = {
            canonical: getattr(record, DSCR_FIELD_NAMES.get(canonical, canonical))
            for canonical in CANONICAL_FIELDS
        }
        return CanonicalDeal(**values)

    values = {name: getattr(record, name) for name in CANONICAL_FIELDS if hasattr(record, name)}
    if source is StrategyType.STR:
        values["rent"] = str_monthly_revenue(record.adr, record.occupancy_pct)
    elif source in UNIT_ATTRS:
        values["rent"] = _unit_rent_total(getattr(session, UNIT_ATTRS[source]))
    return CanonicalDeal(**values)


def _should_push(value: Decimal | None) -> bool:
    if value is None:
        return False
    if settings.transfer_skip_zero_values and value == 0:
        return False
    return True


def map_data(
    source: StrategyType | str, session: SessionState, destination: StrategyType | str
) -> dict[str, Decimal]:
    """Partial destination record: only the fields that should overwrite."""
    destination = StrategyType(destination)
    if destination in NOT_TRANSFERABLE:
        logger.debug("%s is not a transfer destination", destination.value)
        return {}

    deal = extract_canonical(source, session)
    target_fields = {f.name for f in fields(getattr(session, RECORD_ATTRS[destination]))}
    renames = DSCR_FIELD_NAMES if destination is StrategyType.DSCR else {}

    partial: dict[str, Decimal] = {}
    skipped: list[str] = []
    for canonical, value in asdict(deal).items():
        target = renames.get(canonical, canonical)
        if target not in target_fields:
            continue
        if _should_push(value):
            partial[target] = value
        else:
            skipped.append(target)

    logger.debug(
        "Transfer %s -> %s: pushing %s, keeping %s",
        StrategyType(source).value,
        destination.value,
        sorted(partial),
        sorted(skipped),
    )
    return partial


def apply_mapped(record: Any, partial: dict[str, Any]) -> Any:
    """Merge a mapped partial into a destination record.

    On a DSCR record a pushed note rate re-derives the stress rate, the same as
    a hand edit to the rate would.
    """
    if not partial:
        return record
    updated = replace(record, **partial)
    if (
        isinstance(record, DscrInputs)
        and settings.dscr_reset_stress_on_rate_edit
        and updated.interest_rate_pct != record.interest_rate_pct
    ):
        updated = with_default_stress_rate(updated)
    return updated
