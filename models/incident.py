from dataclasses import dataclass


@dataclass(frozen=True)
class Incident:
    id: int
    area: str
    type: str
    time: str
