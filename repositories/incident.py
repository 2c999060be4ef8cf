from collections.abc import Iterable
from typing import Any

from models import Incident, Outcome


class IncidentRepository:
    capacity: int

    def load(self, records: Iterable[dict[str, Any]]) -> int:
        raise NotImplementedError  # pragma: no cover

    def add(self, area: str, incident_type: str, time: str) -> Outcome:
        raise NotImplementedError  # pragma: no cover

    def list_all(self) -> list[Incident]:
        raise NotImplementedError  # pragma: no cover

    def filter_by_area(self, substring: str) -> list[Incident]:
        raise NotImplementedError  # pragma: no cover

    def filter_by_type(self, substring: str) -> list[Incident]:
        raise NotImplementedError  # pragma: no cover

    def count(self) -> int:
        raise NotImplementedError  # pragma: no cover

    def is_full(self) -> bool:
        raise NotImplementedError  # pragma: no cover
