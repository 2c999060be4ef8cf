from dependency_injector import providers
from dependency_injector.containers import DeclarativeContainer, WiringConfiguration

from console import Console
from repositories.file import FileIncidentLog
from repositories.memory import MemoryIncidentRepository


class Container(DeclarativeContainer):
    wiring_config = WiringConfiguration(packages=['menus'])
    config = providers.Configuration()

    console = providers.Singleton(Console, color=config.console.color)

    incident_repo = providers.Singleton(
        MemoryIncidentRepository, capacity=config.store.capacity, max_length=config.store.max_length
    )
    incident_log = providers.Singleton(FileIncidentLog, path=config.log.path, max_length=config.store.max_length)
