from typing import Any

from models import Incident, Outcome


class IncidentLog:
    def read_all(self, limit: int | None = None) -> list[dict[str, Any]]:
        raise NotImplementedError  # pragma: no cover

    def append(self, incident: Incident) -> Outcome:
        raise NotImplementedError  # pragma: no cover
