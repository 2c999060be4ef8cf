from .error_kind import ErrorKind
from .incident import Incident
from .incident_report import incident_report_schema, is_valid_report
from .outcome import Outcome

__all__ = ['Incident', 'ErrorKind', 'Outcome', 'incident_report_schema', 'is_valid_report']
