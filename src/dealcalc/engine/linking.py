"""Field-linking reducer: keeps price / down payment / tax pairs consistent
under single-field edits.

Each transition is pure, (record, field, value) -> record. The edited field is
the source of truth; its linked partner is recomputed once and nothing cascades
further, so two linked fields can never chase each other.
"""

import logging
from dataclasses import replace
from decimal import Decimal
from enum import Enum
from typing import Any, TypeVar

from dealcalc.engine.parsing import coerce_number
from dealcalc.models.fields import FieldRole, field_for_role, field_roles, has_down_payment, has_tax_link

logger = logging.getLogger(__name__)

R = TypeVar("R")

ZERO = Decimal("0")
HUNDRED = Decimal("100")


def _base_value(record: Any) -> Decimal:
    name = field_for_role(record, FieldRole.BASE_PRICE)
    return getattr(record, name) if name else ZERO


def _share_of_base(amount: Decimal, base: Decimal) -> Decimal:
    """amount as % of base, 0 when there is no base to divide by."""
    return amount / base * HUNDRED if base > 0 else ZERO


def apply_edit(record: R, field_name: str, raw_value: Any) -> R:
    """Set one numeric field from raw input and re-derive its linked partner."""
    roles = field_roles(record)
    role = roles.get(field_name)
    if role is None or not isinstance(getattr(record, field_name), Decimal):
        logger.debug("Ignoring edit to %s on %s", field_name, type(record).__name__)
        return record

    value = coerce_number(raw_value)
    changes: dict[str, Decimal] = {field_name: value}
    base = _base_value(record)

    if has_down_payment(record):
        down_pct = field_for_role(record, FieldRole.DOWN_PCT)
        down_amt = field_for_role(record, FieldRole.DOWN_AMT)
        if role is FieldRole.BASE_PRICE:
            changes[down_amt] = value * getattr(record, down_pct) / HUNDRED
        elif role is FieldRole.DOWN_PCT:
            changes[down_amt] = base * value / HUNDRED
        elif role is FieldRole.DOWN_AMT:
            changes[down_pct] = _share_of_base(value, base)

    if has_tax_link(record):
        tax_amt = field_for_role(record, FieldRole.TAX_AMT)
        tax_rate = field_for_role(record, FieldRole.TAX_RATE)
        if role is FieldRole.BASE_PRICE:
            changes[tax_amt] = value * getattr(record, tax_rate) / HUNDRED
        elif role is FieldRole.TAX_AMT:
            changes[tax_rate] = _share_of_base(value, base)
        elif role is FieldRole.TAX_RATE:
            changes[tax_amt] = base * value / HUNDRED

    return replace(record, **changes)


def set_flag(record: R, field_name: str, checked: bool) -> R:
    """Checkbox edit: set a boolean field, no propagation."""
    if not isinstance(getattr(record, field_name, None), bool):
        logger.debug("Ignoring flag %s on %s", field_name, type(record).__name__)
        return record
    return replace(record, **{field_name: bool(checked)})


def set_option(record: R, field_name: str, value: Any) -> R:
    """Choice edit on an enum field. Raises ValueError for an unknown choice."""
    current = getattr(record, field_name, None)
    if not isinstance(current, Enum):
        raise ValueError(f"{type(record).__name__} has no choice field {field_name!r}")
    return replace(record, **{field_name: type(current)(value)})
