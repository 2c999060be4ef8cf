from .incident import IncidentRepository
from .incident_log import IncidentLog

__all__ = ['IncidentRepository', 'IncidentLog']
