"""Patient value objects for the RGS patients API.

A ``Patient`` is filled in field by field, then projected to its wire form
with ``to_wire()``. Projection always runs full validation first and either
returns the complete field map or raises ``RgsValidationError`` listing every
problem at once.
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Self

import httpx
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_serializer, model_validator
from pydantic.alias_generators import to_camel

from rgs_client.enums import Category, TimeZoneOffset
from rgs_client.exceptions import RgsValidationError
from rgs_client.models.metrics import MetricRange

_OFFSET_PATTERN = re.compile(r"^([+-])(\d{1,2}):?([0-5]\d)$")


class MetaData(BaseModel):
    """Partner contract data attached to a patient."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    product_id: int
    contract_id: int

    def __init__(self, product_id: int | None = None, contract_id: int | None = None, /, **data: Any) -> None:
        if product_id is not None:
            data["product_id"] = product_id
        if contract_id is not None:
            data["contract_id"] = contract_id
        super().__init__(**data)


class TimeZone(BaseModel):
    """Patient UTC offset in minutes.

    Requests carry the offset as a number of minutes (``120``); responses
    carry it as text (``"+02:00"``). Both are accepted, the number is sent.
    """

    model_config = ConfigDict(frozen=True)

    offset: int

    def __init__(self, offset: int | float | str | None = None, /, **data: Any) -> None:
        if offset is not None:
            data["offset"] = offset
        super().__init__(**data)

    @model_validator(mode="before")
    @classmethod
    def wrap_scalar(cls, data: Any) -> Any:
        """Allow a bare offset wherever a TimeZone is expected."""
        if isinstance(data, int | float | str):
            return {"offset": data}
        return data

    @field_validator("offset", mode="before")
    @classmethod
    def parse_offset(cls, value: Any) -> Any:
        """Convert ``+HH:MM`` text to minutes."""
        if isinstance(value, str):
            match = _OFFSET_PATTERN.match(value.strip())
            if match:
                sign, hours, minutes = match.groups()
                total = int(hours) * 60 + int(minutes)
                return -total if sign == "-" else total
        return value

    @model_serializer
    def serialize(self) -> int:
        return self.offset

    @property
    def zone(self) -> TimeZoneOffset | None:
        """Named zone for this offset, if it is a supported one."""
        return TimeZoneOffset.lookup(self.offset)

    def as_text(self) -> str:
        """Return the offset in ``+HH:MM`` form."""
        sign = "-" if self.offset < 0 else "+"
        hours, minutes = divmod(abs(self.offset), 60)
        return f"{sign}{hours:02d}:{minutes:02d}"


@dataclass
class ValidationResult:
    """Outcome of a single validation pass."""

    is_valid: bool
    errors: dict[str, str] = field(default_factory=dict)

    def __bool__(self) -> bool:
        return self.is_valid


class Patient(BaseModel):
    """Patient registered in the RGS monitoring service.

    Assignments are type-checked (``external_id`` must be an integer, names
    must be strings), but required fields and the category are only checked by
    ``validate()``. Instances are not safe for concurrent mutation.

    See https://chronicmonitor.docs.apiary.io/#reference/patients/apiv1patient/post
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, validate_assignment=True)

    OPTIONAL_FIELDS: ClassVar[frozenset[str]] = frozenset({"patronymic", "robot_type"})

    category_key: str | None = None
    first_name: str | None = None
    patronymic: str | None = None
    phone: str | None = None
    external_id: int | None = None
    metadata: MetaData | None = None
    timezone: TimeZone | None = None
    active: bool = True
    monitoring_enabled: bool = True
    robot_type: str | None = None

    @field_validator("category_key", mode="before")
    @classmethod
    def unwrap_category(cls, value: Any) -> Any:
        if isinstance(value, Enum):
            return value.value
        return value

    @classmethod
    def required_fields(cls) -> list[str]:
        """Attribute names that must be set before serialization."""
        return [name for name in cls.model_fields if name not in cls.OPTIONAL_FIELDS]

    @classmethod
    def from_wire(cls, payload: Mapping[str, Any]) -> Self:
        """Build a patient from its wire form.

        Required fields other than the status flags must be present in
        ``payload``; missing keys are reported together in a single
        ``RgsValidationError``.
        """
        expected = [to_camel(name) for name in cls.required_fields() if name not in ("active", "monitoring_enabled")]
        missing = {key: f"Field {key} is missing." for key in expected if key not in payload}
        if missing:
            raise RgsValidationError(missing, "Patient payload is incomplete")
        return cls.model_validate(payload)

    def activate(self) -> None:
        """Mark the patient active in the monitoring service."""
        self.active = True

    def deactivate(self) -> None:
        """Mark the patient inactive in the monitoring service."""
        self.active = False

    def enable_monitoring(self) -> None:
        """Turn on push and robot-call monitoring for the patient."""
        self.monitoring_enabled = True

    def disable_monitoring(self) -> None:
        """Turn off push and robot-call monitoring for the patient."""
        self.monitoring_enabled = False

    def validate(self) -> ValidationResult:  # type: ignore[override]
        """Check every rule and collect all failures.

        Errors are keyed by wire field name. Nothing is stored on the
        instance, so repeated calls on an unchanged patient return equal
        results.
        """
        errors: dict[str, str] = {}
        for name in self.required_fields():
            if getattr(self, name) is None:
                errors[to_camel(name)] = f"Field {to_camel(name)} must not be empty."

        if Category.lookup(self.category_key) is None:
            errors["categoryKey"] = "Invalid patient category."

        return ValidationResult(is_valid=not errors, errors=errors)

    def get_errors(self) -> dict[str, str]:
        """Validation errors for the current state; empty when the patient is valid."""
        return self.validate().errors

    def to_wire(self) -> dict[str, Any]:
        """Return the request body for this patient.

        Raises:
            RgsValidationError: If any field fails validation
        """
        result = self.validate()
        if not result:
            raise RgsValidationError(result.errors)
        return self.model_dump(mode="json", by_alias=True, exclude=self._absent_optional_fields())

    def to_json(self) -> str:
        """Return the request body as JSON text."""
        result = self.validate()
        if not result:
            raise RgsValidationError(result.errors)
        return self.model_dump_json(by_alias=True, exclude=self._absent_optional_fields())

    def _absent_optional_fields(self) -> set[str]:
        return {name for name in self.OPTIONAL_FIELDS if getattr(self, name) is None}


class PatientCategory(BaseModel):
    """Category block as returned by the API."""

    model_config = ConfigDict(extra="ignore")

    key: str
    name: str | None = None


class PatientRecord(BaseModel):
    """Patient as returned by the API."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    id: int | None = None
    external_id: int
    first_name: str
    patronymic: str | None = None
    phone: str
    active: bool
    monitoring_enabled: bool
    metadata: MetaData | None = None
    timezone: TimeZone | None = None
    category: PatientCategory | None = None
    metrics_ranges: list[MetricRange] = Field(default_factory=list)

    @classmethod
    def from_response(cls, response: httpx.Response) -> Self:
        """Decode a patient response body."""
        return cls.model_validate(response.json())
