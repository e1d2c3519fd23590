"""
Application-layer exceptions.

These exceptions are raised inside the session engine and the use cases and
converted to result objects at the use-case boundary. Each carries a stable
`code` so callers can branch on the failure kind without isinstance checks.
"""


class SessionError(Exception):
    """Base class for live workout session errors."""

    code = "session_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class SessionValidationError(SessionError):
    """Operation attempted with no current exercise or on an empty plan."""

    code = "validation"


class ExerciseNotFoundError(SessionError):
    """Catalog lookup returned nothing for a requested identity."""

    code = "not_found"


class PersistenceError(SessionError):
    """A catalog, history or storage collaborator failed or raised.

    The underlying collaborator message is preserved verbatim in `message`.
    """

    code = "persistence"
