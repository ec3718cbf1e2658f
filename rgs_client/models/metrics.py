"""Metrics request and response models."""

from decimal import Decimal
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class MetricRange(BaseModel):
    """Allowed bounds for a single questionnaire metric.

    Bounds arrive as decimal strings (``"60"``) and are sent back the same way.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    key: str
    name: str | None = None
    parent_key: str | None = None
    min_value: Decimal | None = None
    max_value: Decimal | None = None

    @model_validator(mode="after")
    def check_bounds(self) -> Self:
        """Reject ranges whose lower bound exceeds the upper one."""
        if self.min_value is not None and self.max_value is not None and self.min_value > self.max_value:
            raise ValueError(f"min_value {self.min_value} is greater than max_value {self.max_value} for '{self.key}'")
        return self


class MetricsDTO(BaseModel):
    """Questionnaire answers for a patient.

    The payload is forwarded to the API as is; only the patient id is lifted
    out of it to build the URL.
    """

    external_id: int
    metrics: dict[str, Any]

    def to_wire(self) -> dict[str, Any]:
        """Return the request body."""
        return dict(self.metrics)


class MetricsRangeDTO(BaseModel):
    """New metric bounds for a patient."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    external_id: int = Field(exclude=True)
    ranges: list[MetricRange] = Field(min_length=1)

    def to_wire(self) -> dict[str, Any]:
        """Return the request body with camelCase keys."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
