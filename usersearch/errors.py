"""Errors raised by the user search client."""


class SearchClientError(Exception):
    pass


class SearchValidationError(SearchClientError):
    """Request rejected locally, before anything is sent."""

    def __init__(self, field: str, value) -> None:
        super().__init__(f"{field} must be >= 0, got {value}")
        self.field = field
        self.value = value


class BadAccessTokenError(SearchClientError):
    def __init__(self) -> None:
        super().__init__("bad access token")


class OrderFieldError(SearchClientError):
    def __init__(self, order_field: str = "") -> None:
        super().__init__(f"order field {order_field!r} invalid")
        self.order_field = order_field


class BadRequestError(SearchClientError):
    def __init__(self, message: str) -> None:
        super().__init__(f"unknown bad request error: {message}")
        self.message = message


class UnknownError(SearchClientError):
    pass


class TransportError(UnknownError):
    pass


class UnexpectedStatusError(UnknownError):
    def __init__(self, status_code: int) -> None:
        super().__init__(f"unknown error, status code {status_code}")
        self.status_code = status_code


class ResponseDecodeError(UnknownError):
    pass
