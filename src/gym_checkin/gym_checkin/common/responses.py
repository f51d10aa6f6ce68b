from __future__ import annotations

from flask import jsonify

from ..core.exceptions import (
    AlreadyCheckedInToday,
    AuthenticationError,
    CheckInError,
    DomainError,
    NoIdentifierFound,
    NoSessionsRemaining,
    StoreError,
    UnknownMembershipKind,
    UnregisteredMember,
    ValidationError,
)

_STATUS_BY_ERROR = (
    (NoIdentifierFound, 400),
    (UnregisteredMember, 404),
    (AlreadyCheckedInToday, 409),
    (NoSessionsRemaining, 409),
    (UnknownMembershipKind, 422),
    (AuthenticationError, 401),
    (ValidationError, 400),
    (StoreError, 503),
)


def status_for(error: Exception) -> int:
    for error_type, status in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return status
    return 500


def error_json(error: Exception):
    """JSON body + status for a domain/store failure."""
    if isinstance(error, (CheckInError, StoreError)):
        code = error.code
        message = error.message
    elif isinstance(error, DomainError):
        code = type(error).__name__
        message = str(error)
    else:
        code = "INTERNAL_ERROR"
        message = "Unexpected server error"
    return jsonify({"success": False, "error": code, "message": message}), status_for(error)
