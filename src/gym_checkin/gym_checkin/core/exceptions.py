from __future__ import annotations


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when admin credentials are invalid."""


class StoreError(Exception):
    """Raised when the record store fails; always terminal for the request."""

    code = "STORE_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class CheckInError(DomainError):
    """Base for the named check-in failures.

    Every subclass carries a stable ``code`` so callers can render a distinct
    message per failure kind.
    """

    code = "CHECKIN_ERROR"
    default_message = "Check-in failed"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message


class NoIdentifierFound(CheckInError):
    code = "NO_IDENTIFIER_FOUND"
    default_message = "No member address found in the scanned code"


class UnregisteredMember(CheckInError):
    code = "UNREGISTERED_MEMBER"
    default_message = "This address is not registered as a member"

    def __init__(self, identifier: str):
        super().__init__(f"No member is registered for {identifier}")
        self.identifier = identifier


class AlreadyCheckedInToday(CheckInError):
    code = "ALREADY_CHECKED_IN_TODAY"
    default_message = "Already checked in today"


class NoSessionsRemaining(CheckInError):
    code = "NO_SESSIONS_REMAINING"
    default_message = "No PT sessions remaining"


class UnknownMembershipKind(CheckInError):
    code = "UNKNOWN_MEMBERSHIP_KIND"
    default_message = "Unknown membership type"

    def __init__(self, membership_type: object):
        super().__init__(f"Unknown membership type: {membership_type!r}")
        self.membership_type = membership_type


class ScannerError(RuntimeError):
    """Raised when the scanning hardware or decoder fails."""
