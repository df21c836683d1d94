"""Pydantic schemas for API request/response models.

Records travel as plain JSON objects keyed by field name. Numbers may arrive as
JSON numbers or strings; Decimal results are serialized as strings, so the
"Infinity" / "-Infinity" sentinels survive the round trip.
"""

from typing import Any

from pydantic import BaseModel, Field


# ---- Request schemas ----

class MetricsRequest(BaseModel):
    inputs: dict[str, Any] = Field(default_factory=dict, description="Field overrides; omitted fields use defaults")
    units: list[dict[str, Any]] | None = Field(None, description="Unit collection; omitted uses the default units")


class EditRequest(BaseModel):
    inputs: dict[str, Any] = Field(default_factory=dict)
    units: list[dict[str, Any]] | None = Field(None, description="Unit collection the edit may resize or rewrite")
    field: str
    value: Any = None


class TransferRequest(BaseModel):
    source: str
    destination: str
    source_inputs: dict[str, Any] = Field(default_factory=dict)
    source_units: list[dict[str, Any]] | None = None
    destination_inputs: dict[str, Any] = Field(default_factory=dict)


# ---- Response schemas ----

class DefaultsResponse(BaseModel):
    strategy: str
    inputs: dict[str, Any]
    units: list[dict[str, Any]] = []


class MetricsResponse(BaseModel):
    strategy: str
    metrics: dict[str, Any]
    non_finite: list[str] = []  # Metric paths to render as a dash


class EditResponse(BaseModel):
    strategy: str
    inputs: dict[str, Any]
    units: list[dict[str, Any]] = []


class TransferResponse(BaseModel):
    destination: str
    inputs: dict[str, Any]
    pushed: list[str]
