"""Field roles for input records.

Roles are attached to dataclass field metadata when a schema is declared, so the
linking reducer never has to guess from a field's name what an edit means.
"""

from dataclasses import field, fields
from enum import Enum
from typing import Any

ROLE_KEY = "role"


class FieldRole(Enum):
    BASE_PRICE = "base_price"  # Purchase price / ARV
    DOWN_PCT = "down_pct"
    DOWN_AMT = "down_amt"
    TAX_AMT = "tax_amt"  # Annual $
    TAX_RATE = "tax_rate"  # % of base price
    PLAIN = "plain"


def linked(role: FieldRole, default: Any) -> Any:
    """Declare a dataclass field that takes part in a linked pair."""
    return field(default=default, metadata={ROLE_KEY: role})


def field_roles(record: Any) -> dict[str, FieldRole]:
    """Map every field name on a dataclass record to its role."""
    return {f.name: f.metadata.get(ROLE_KEY, FieldRole.PLAIN) for f in fields(record)}


def field_for_role(record: Any, role: FieldRole) -> str | None:
    """Name of the field carrying `role`, or None if the record has none."""
    for name, field_role in field_roles(record).items():
        if field_role is role:
            return name
    return None


def has_down_payment(record: Any) -> bool:
    return (
        field_for_role(record, FieldRole.DOWN_PCT) is not None
        and field_for_role(record, FieldRole.DOWN_AMT) is not None
    )


def has_tax_link(record: Any) -> bool:
    return (
        field_for_role(record, FieldRole.TAX_AMT) is not None
        and field_for_role(record, FieldRole.TAX_RATE) is not None
    )
