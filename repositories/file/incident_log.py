import logging
import os
import re
from dataclasses import asdict
from pathlib import Path
from typing import Any

from models import ErrorKind, Incident, Outcome, is_valid_report
from models.incident_report import DEFAULT_MAX_LENGTH
from repositories import IncidentLog

FIELD_SEPARATOR = '|'
FIELD_NAMES = ('id', 'area', 'type', 'time')
ID_PATTERN = re.compile(r'^0*[1-9][0-9]*\Z')

WRITE_ERROR_MESSAGE = 'Could not open file for writing.'


def format_record(incident: Incident) -> str:
    # Values are written as-is, a '|' inside area or type corrupts the line
    return FIELD_SEPARATOR.join(str(value) for value in asdict(incident).values())


def parse_record(line: str, max_length: int = DEFAULT_MAX_LENGTH) -> dict[str, Any] | None:
    """Parse one log line (without its terminator) into a raw incident record.

    Returns None unless the line holds exactly four fields, the first one is a
    positive base-10 integer and the other three would pass the report schema.
    Only records the store accepts are returned, so a caller's limit counts
    loadable lines.
    """
    values = line.split(FIELD_SEPARATOR)
    if len(values) != len(FIELD_NAMES) or not all(values):
        return None

    raw_id, area, incident_type, time = values
    if ID_PATTERN.match(raw_id) is None:
        return None

    try:
        incident_id = int(raw_id)
    except ValueError:
        # More digits than the interpreter converts
        return None

    if not is_valid_report(area, incident_type, time, max_length):
        return None

    return {'id': incident_id, 'area': area, 'type': incident_type, 'time': time}


class FileIncidentLog(IncidentLog):
    def __init__(self, path: str | os.PathLike[str], max_length: int = DEFAULT_MAX_LENGTH) -> None:
        self.path = Path(path)
        self.max_length = max_length
        self.logger = logging.getLogger(self.__class__.__name__)

    def read_all(self, limit: int | None = None) -> list[dict[str, Any]]:
        records: list[dict[str, Any]] = []

        try:
            with self.path.open(encoding='utf-8', errors='replace') as log_file:
                for line in log_file:
                    if limit is not None and len(records) >= limit:
                        break

                    record = parse_record(line.removesuffix('\n'), self.max_length)
                    if record is None:
                        self.logger.debug('Skipping malformed line in %s: %r', self.path, line)
                        continue

                    records.append(record)
        except FileNotFoundError:
            return []
        except OSError as err:
            self.logger.error('Could not read incidents from %s: %s', self.path, err)

        return records

    def append(self, incident: Incident) -> Outcome:
        try:
            with self.path.open('a', encoding='utf-8') as log_file:
                log_file.write(format_record(incident) + '\n')
        except OSError as err:
            self.logger.error('Could not write incident %d to %s: %s', incident.id, self.path, err)
            return Outcome(incident=incident, error=ErrorKind.IO_ERROR, message=WRITE_ERROR_MESSAGE)

        return Outcome(incident=incident)
