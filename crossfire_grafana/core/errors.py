"""
Application errors for clean API error handling.

Use FirestoreError when the document store is misconfigured, unreachable, or
answers with something other than a usable 200 so the API can return 500 with
the upstream message.
"""


class FirestoreError(Exception):
    """Raised when a Firestore REST call fails (config, transport, status, or body)."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class CredentialsError(FirestoreError):
    """Raised when Application Default Credentials cannot be found or refreshed."""
