"""Client for the RGS patients API."""

import httpx

from rgs_client.clients.base import BaseRgsClient
from rgs_client.models.patient import Patient


class PatientRgsClient(BaseRgsClient):
    """Patient registration and status calls.

    Patient bodies are validated before anything is sent; an invalid patient
    raises ``RgsValidationError`` and no request is made.
    """

    def create_patient(self, patient: Patient) -> httpx.Response:
        """Register a new patient."""
        request = self.build_request("POST", "/api/v1/patient", patient.to_json())
        return self.send(request)

    def update_patient(self, patient: Patient) -> httpx.Response:
        """Replace the stored data of an existing patient."""
        body = patient.to_json()
        request = self.build_request("PUT", f"/api/v1/patient/{patient.external_id}", body)
        return self.send(request)

    def get_patient(self, external_id: int) -> httpx.Response:
        """Fetch a patient by partner id."""
        request = self.build_request("GET", f"/api/v1/patient/{external_id}")
        return self.send(request)

    def activate(self, external_id: int) -> httpx.Response:
        """Enable the patient in the monitoring service."""
        request = self.build_request("PUT", f"/api/v1/patient/{external_id}/activate")
        return self.send(request)

    def inactivate(self, external_id: int) -> httpx.Response:
        """Disable the patient in the monitoring service."""
        request = self.build_request("PUT", f"/api/v1/patient/{external_id}/inactivate")
        return self.send(request)
