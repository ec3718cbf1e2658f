"""Reference registries of the codes accepted by the RGS API."""

from enum import Enum, IntEnum
from typing import Any, Self


class LookupMixin:
    """Adds a non-raising lookup by raw code to an Enum."""

    @classmethod
    def lookup(cls, code: Any) -> Self | None:
        """Return the member for a raw code, or None when the code is unknown."""
        if code is None:
            return None
        try:
            return cls(code)  # type: ignore[call-arg]
        except ValueError:
            return None


class Category(LookupMixin, str, Enum):
    """Patient monitoring category (``categoryKey``)."""

    DIABETIC = "diabetic"
    HYPERTENSION = "hypertension"
    COVID = "covid"
    PREGNANCY = "pregnancy"


class MetricType(LookupMixin, str, Enum):
    """Period that questionnaire metrics are aggregated over."""

    DAY = "day"
    WEEK = "week"
    MONTH = "month"


class InitiatorType(LookupMixin, IntEnum):
    """Initiator of a telemedicine consultation.

    EGISZ IEMK classifier, OID 1.2.643.2.69.1.1.1.129.
    """

    DEPARTMENT = 1
    INSTITUTION = 2
    PHYSICIAN = 3
    ATTENDING_PHYSICIAN = 4
    PATIENT = 5
    PAYER = 6
    REGISTRAR = 7
    DEPARTMENT_OF_RESIDENCE = 8
    RESIDENT = 9
    INTERN = 10


class TimeZoneOffset(LookupMixin, IntEnum):
    """Supported UTC offsets, in minutes."""

    KALININGRAD = 120
    MOSCOW = 180
    SAMARA = 240
    YEKATERINBURG = 300
    OMSK = 360
    KRASNOYARSK = 420
    IRKUTSK = 480
    YAKUTSK = 540
    VLADIVOSTOK = 600
    MAGADAN = 660
    KAMCHATKA = 720
