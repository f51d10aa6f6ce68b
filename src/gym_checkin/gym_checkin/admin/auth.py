from __future__ import annotations

from typing import Optional

from werkzeug.security import check_password_hash

from ..core.exceptions import AuthenticationError


class AdminAuthService:
    """Use case: admin login against a single configured password hash."""

    def __init__(self, password_hash: Optional[str]):
        self._password_hash = password_hash or ""

    def authenticate(self, password: str) -> None:
        if not self._password_hash or not password:
            raise AuthenticationError("Wrong admin password")

        try:
            ok = check_password_hash(self._password_hash, password)
        except ValueError:
            # e.g. a placeholder or corrupted hash in the environment
            ok = False

        if not ok:
            raise AuthenticationError("Wrong admin password")
