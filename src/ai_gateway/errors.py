# src/ai_gateway/errors.py


class GatewayError(Exception):
    """Base error surfaced to callers of the review core."""

    status_code: int = 500


class InvalidRequestError(GatewayError):
    status_code = 400


class DiffTooLargeError(InvalidRequestError):
    status_code = 413


class ProviderNotFoundError(GatewayError):
    status_code = 400

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"provider '{name}' not found")


class ProviderTransportError(GatewayError):
    """Network failure, non-success vendor status or vendor error payload."""

    status_code = 502


class ProviderTimeoutError(ProviderTransportError):
    status_code = 504


class EmptyResponseError(GatewayError):
    status_code = 502
