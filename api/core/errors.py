"""
Error kinds surfaced by the API.

Only two kinds exist: caller mistakes (`ValidationError`, 400) and store
failures (`StorageError`, 500). The `message` is what the caller sees.
"""

from __future__ import annotations


class SchoolApiError(Exception):
    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_response(self) -> dict[str, str]:
        return {"error": self.message}


class ValidationError(SchoolApiError):
    status_code = 400


class StorageError(SchoolApiError):
    status_code = 500
