class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(self, message: str, status_code: int) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class ForbiddenError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 403)


class NotFoundError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 404)


class AuthenticationError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 401)


class BookingNotAllowedError(ForbiddenError):
    """
    Business-rule rejection of a booking request.

    Full room, duplicate booking, wrong owner and same-room reassignment all
    surface with this one kind (HTTP 403).
    """

    def __init__(self, message: str = 'Booking not allowed') -> None:
        super().__init__(message)


class TicketIneligibleError(BookingNotAllowedError):
    """Raised when the user's enrollment/ticket does not entitle them to a hotel room."""

    def __init__(self, message: str = 'Ticket does not include hotel') -> None:
        super().__init__(message)
