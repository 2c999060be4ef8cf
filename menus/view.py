from dependency_injector.wiring import Provide, inject

from console import Console
from containers import Container
from repositories import IncidentRepository

from .main import menu as main_menu
from .util import (
    NO_INCIDENTS_MESSAGE,
    Menu,
    MenuAction,
    menu_option,
    plural,
    prompt_field,
    render_incidents,
    text_field,
)

menu = Menu('VIEW INCIDENTS')


class ViewMenuAction(MenuAction):
    pause_prompt = '\nPress Enter to return to view menu...'


@menu_option(main_menu, 2)
class ViewIncidents(MenuAction):
    pauses = False

    @inject
    def label(self, incident_repo: IncidentRepository = Provide[Container.incident_repo]) -> str:
        return f'View incidents ({plural(incident_repo.count(), "incident")} reported so far)'

    def run(self, console: Console) -> bool:
        menu.run(console)
        return True


@menu_option(menu, 1)
class ViewAllIncidents(ViewMenuAction):
    title = 'ALL INCIDENTS'

    @inject
    def label(self, incident_repo: IncidentRepository = Provide[Container.incident_repo]) -> str:
        return f'View all incidents ({plural(incident_repo.count(), "incident")})'

    @inject
    def run(self, console: Console, incident_repo: IncidentRepository = Provide[Container.incident_repo]) -> bool:
        incidents = incident_repo.list_all()

        if not incidents:
            console.write(NO_INCIDENTS_MESSAGE)
            return True

        render_incidents(console, incidents)
        return True


@menu_option(menu, 2)
class FilterByArea(ViewMenuAction):
    title = 'FILTER BY AREA'

    def label(self) -> str:
        return 'Filter incidents by area'

    @inject
    def run(
        self,
        console: Console,
        incident_repo: IncidentRepository = Provide[Container.incident_repo],
        max_length: int = Provide[Container.config.store.max_length],
    ) -> bool:
        if incident_repo.count() == 0:
            console.write(NO_INCIDENTS_MESSAGE)
            return True

        search = prompt_field(console, 'Enter area to filter by', text_field(max_length))
        incidents = incident_repo.filter_by_area(search)

        console.write(f'\nIncidents in area containing: {search}')
        render_incidents(console, incidents)
        if not incidents:
            console.write('No incidents found in this area.')

        return True


@menu_option(menu, 3)
class FilterByType(ViewMenuAction):
    title = 'FILTER BY INCIDENT TYPE'

    def label(self) -> str:
        return 'Filter incidents by incident type'

    @inject
    def run(
        self,
        console: Console,
        incident_repo: IncidentRepository = Provide[Container.incident_repo],
        max_length: int = Provide[Container.config.store.max_length],
    ) -> bool:
        if incident_repo.count() == 0:
            console.write(NO_INCIDENTS_MESSAGE)
            return True

        search = prompt_field(console, 'Enter incident type to filter by', text_field(max_length))
        incidents = incident_repo.filter_by_type(search)

        console.write(f'\nIncidents of type containing: {search}')
        render_incidents(console, incidents)
        if not incidents:
            console.write('No incidents found of this type.')

        return True


@menu_option(menu, 4)
class BackToMainMenu(MenuAction):
    def label(self) -> str:
        return 'Back to main menu'

    def run(self, console: Console) -> bool:
        return False
