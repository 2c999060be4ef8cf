import logging
from collections.abc import Iterable
from typing import Any

import dacite

from models import ErrorKind, Incident, Outcome, is_valid_report
from models.incident_report import DEFAULT_MAX_LENGTH
from repositories import IncidentRepository

CAPACITY_MESSAGE = 'Maximum number of incidents reached.'


class MemoryIncidentRepository(IncidentRepository):
    def __init__(self, capacity: int, max_length: int = DEFAULT_MAX_LENGTH) -> None:
        self.capacity = capacity
        self.max_length = max_length
        self.incidents: list[Incident] = []
        self.logger = logging.getLogger(self.__class__.__name__)

    def record_to_incident(self, record: dict[str, Any]) -> Incident | None:
        try:
            incident = dacite.from_dict(data_class=Incident, data=record, config=dacite.Config(strict=True))
        except dacite.DaciteError as err:
            self.logger.debug('Skipping malformed record %r: %s', record, err)
            return None

        if incident.id < 1:
            self.logger.debug('Skipping record with non-positive id %r', record)
            return None

        if not is_valid_report(incident.area, incident.type, incident.time, self.max_length):
            self.logger.debug('Skipping record with invalid fields %r', record)
            return None

        return incident

    def load(self, records: Iterable[dict[str, Any]]) -> int:
        incidents: list[Incident] = []

        for record in records:
            if len(incidents) >= self.capacity:
                break

            incident = self.record_to_incident(record)
            if incident is not None:
                incidents.append(incident)

        self.incidents = incidents
        return len(incidents)

    def next_id(self) -> int:
        return max((incident.id for incident in self.incidents), default=0) + 1

    def add(self, area: str, incident_type: str, time: str) -> Outcome:
        if self.is_full():
            self.logger.warning('Rejected incident in %s: store holds %d incidents', area, self.capacity)
            return Outcome(error=ErrorKind.CAPACITY_EXCEEDED, message=CAPACITY_MESSAGE)

        incident = Incident(id=self.next_id(), area=area, type=incident_type, time=time)
        self.incidents.append(incident)

        return Outcome(incident=incident)

    def list_all(self) -> list[Incident]:
        return list(self.incidents)

    def filter_by_area(self, substring: str) -> list[Incident]:
        needle = substring.lower()
        return [incident for incident in self.incidents if needle in incident.area.lower()]

    def filter_by_type(self, substring: str) -> list[Incident]:
        needle = substring.lower()
        return [incident for incident in self.incidents if needle in incident.type.lower()]

    def count(self) -> int:
        return len(self.incidents)

    def is_full(self) -> bool:
        return len(self.incidents) >= self.capacity
