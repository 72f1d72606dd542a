class BookingApiError(RuntimeError):
    """Base error for the booking backend adapter."""
    pass


class BookingApiConfigError(BookingApiError):
    """Raised when the backend adapter cannot be configured (missing base URL)."""
    pass
