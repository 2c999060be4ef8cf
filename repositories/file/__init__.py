from .incident_log import FileIncidentLog, format_record, parse_record

__all__ = ['FileIncidentLog', 'format_record', 'parse_record']
