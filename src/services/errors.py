"""Domain errors and the HTTP status each one is reported with."""

from fastapi import status


class ReferralAppError(Exception):
    """Base class for failures that are safe to report to the client."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "Internal server error"

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class InvalidInputError(ReferralAppError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid input"


class DuplicateEmailError(ReferralAppError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "User already exists"


class DuplicateReferralCodeError(ReferralAppError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Referral code already taken"


class InvalidCredentialsError(ReferralAppError):
    """Raised for both unknown emails and wrong passwords."""

    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid credentials"


class UnauthorizedError(ReferralAppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Access token required"


class InvalidTokenError(UnauthorizedError):
    """A token was presented but cannot be accepted."""

    status_code = status.HTTP_403_FORBIDDEN
    message = "Invalid token"


class MalformedTokenError(InvalidTokenError):
    message = "Malformed token"


class InvalidSignatureError(InvalidTokenError):
    message = "Invalid token"


class TokenExpiredError(InvalidTokenError):
    message = "Token expired"


class NotFoundError(ReferralAppError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "User not found"
