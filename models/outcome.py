from dataclasses import dataclass

from .error_kind import ErrorKind
from .incident import Incident


@dataclass(frozen=True)
class Outcome:
    """Result of a core operation that can fail without raising.

    A failed add carries no incident. A failed write carries the incident that
    was stored in memory but could not be persisted.
    """

    incident: Incident | None = None
    error: ErrorKind | None = None
    message: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
