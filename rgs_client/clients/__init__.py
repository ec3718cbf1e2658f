"""HTTP clients for the RGS API."""

from rgs_client.clients.base import BaseRgsClient, RgsApiConfig
from rgs_client.clients.metrics import MetricsRgsClient
from rgs_client.clients.patients import PatientRgsClient

__all__ = ["BaseRgsClient", "MetricsRgsClient", "PatientRgsClient", "RgsApiConfig"]
