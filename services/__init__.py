from .incident import load_incidents, report_incident

__all__ = ['load_incidents', 'report_incident']
