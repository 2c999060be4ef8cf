import logging

import marshmallow

from models import ErrorKind, Outcome, incident_report_schema
from models.incident_report import DEFAULT_MAX_LENGTH, first_error
from repositories import IncidentLog, IncidentRepository

logger = logging.getLogger(__name__)


def load_incidents(incident_repo: IncidentRepository, incident_log: IncidentLog) -> int:
    records = incident_log.read_all(limit=incident_repo.capacity)
    loaded = incident_repo.load(records)
    logger.info('Loaded %d incidents', loaded)
    return loaded


def report_incident(  # noqa: PLR0913
    area: str,
    incident_type: str,
    time: str,
    incident_repo: IncidentRepository,
    incident_log: IncidentLog,
    max_length: int = DEFAULT_MAX_LENGTH,
) -> Outcome:
    """Store a new incident and append it to the log, in that order.

    When the log write fails the incident stays in the store for the rest of
    the session and the returned outcome carries both the incident and the
    I/O error.
    """
    schema = incident_report_schema(max_length)
    try:
        schema.load({'area': area, 'type': incident_type, 'time': time})
    except marshmallow.ValidationError as err:
        return Outcome(error=ErrorKind.INVALID_INPUT, message=first_error(err))

    outcome = incident_repo.add(area, incident_type, time)
    if not outcome.ok or outcome.incident is None:
        return outcome

    logger.info('Incident %d reported in %s', outcome.incident.id, area)
    return incident_log.append(outcome.incident)
