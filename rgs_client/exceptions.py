"""Errors raised by the RGS client."""

import httpx


class RgsError(Exception):
    """Base error for everything the RGS client raises."""

    def __init__(self, message: str, *, status_code: int | None = None, response: httpx.Response | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.response = response


class BadRequestRgsError(RgsError):
    """The RGS API rejected the request with a 4xx status."""


class RgsValidationError(RgsError):
    """A domain object failed validation and cannot be serialized.

    ``errors`` maps each offending wire field to a readable message.
    """

    def __init__(self, errors: dict[str, str], message: str = "Patient has validation errors"):
        super().__init__(f"{message}: {', '.join(sorted(errors))}")
        self.errors: dict[str, str] = dict(errors)
