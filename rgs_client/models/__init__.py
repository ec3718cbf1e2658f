"""Domain models for the RGS API."""

from rgs_client.models.metrics import MetricRange, MetricsDTO, MetricsRangeDTO
from rgs_client.models.patient import MetaData, Patient, PatientCategory, PatientRecord, TimeZone, ValidationResult

__all__ = [
    "MetaData",
    "MetricRange",
    "MetricsDTO",
    "MetricsRangeDTO",
    "Patient",
    "PatientCategory",
    "PatientRecord",
    "TimeZone",
    "ValidationResult",
]
