from __future__ import annotations


class FlowError(Exception):
    """Base error for AI flows. `message` is static and safe to show to end users."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class FlowInputError(FlowError):
    status_code = 400


class FlowOutputError(FlowError):
    status_code = 502


class FlowUnavailableError(FlowError):
    status_code = 503
