from .incident import MemoryIncidentRepository

__all__ = ['MemoryIncidentRepository']
