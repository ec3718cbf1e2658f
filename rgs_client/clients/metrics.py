"""Client for the RGS questionnaire metrics API.

See https://chronicmonitor.docs.apiary.io/#reference/patient/apiv1patientpatientidmetricslast/get
"""

import json
import warnings
from datetime import datetime

import httpx

from rgs_client.clients.base import BaseRgsClient
from rgs_client.enums import MetricType
from rgs_client.models.metrics import MetricsDTO, MetricsRangeDTO


class MetricsRgsClient(BaseRgsClient):
    """Metrics calls. DTO bodies are forwarded without extra validation."""

    def get_metrics(
        self,
        external_id: int,
        from_: datetime | None = None,
        type_: MetricType | str = MetricType.WEEK,
    ) -> httpx.Response:
        """Get questionnaire data for a patient, aggregated by day, week or month.

        Args:
            external_id: Partner id of the patient
            from_: Start of the period
            type_: Aggregation period

        Raises:
            ValueError: If ``type_`` is not a known metric type
        """
        metric_type = MetricType.lookup(type_)
        if metric_type is None:
            raise ValueError(f"Unknown metric type: {type_}")

        params = {"type": metric_type.value}
        if from_ is not None:
            params["from"] = from_.isoformat(timespec="seconds")

        request = self.build_request("GET", f"/api/v1/patient/{external_id}/metrics", params=params)
        return self.send(request)

    def create_metrics(self, metrics: MetricsDTO) -> httpx.Response:
        """Add questionnaire data."""
        body = json.dumps(metrics.to_wire(), ensure_ascii=False)
        request = self.build_request("POST", f"/api/v1/patient/{metrics.external_id}/metrics", body)
        return self.send(request)

    def update_metrics(self, metrics: MetricsDTO) -> httpx.Response:
        """Overwrite questionnaire data at the given time.

        Removed on the RGS side on 2020-05-12; kept for partners still calling it.
        """
        warnings.warn("update_metrics was removed from the RGS API", DeprecationWarning, stacklevel=2)
        body = json.dumps(metrics.to_wire(), ensure_ascii=False)
        request = self.build_request("PUT", f"/api/v1/patient/{metrics.external_id}/metrics", body)
        return self.send(request)

    def get_metrics_last(self, external_id: int) -> httpx.Response:
        """Get the latest questionnaire answers of a patient."""
        request = self.build_request("GET", f"/api/v1/patient/{external_id}/metrics/last")
        return self.send(request)

    def update_metrics_ranges(self, ranges: MetricsRangeDTO) -> httpx.Response:
        """Change the allowed bounds of the given metrics."""
        body = json.dumps(ranges.to_wire(), ensure_ascii=False)
        request = self.build_request("PUT", f"/api/v1/patient/{ranges.external_id}/metrics/ranges", body)
        return self.send(request)
