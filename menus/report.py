from dependency_injector.wiring import Provide, inject

from console import Console
from containers import Container
from repositories import IncidentLog, IncidentRepository
from services import report_incident

from .main import menu as main_menu
from .util import MenuAction, menu_option, prompt_field, text_field, time_field


@menu_option(main_menu, 1)
class ReportIncident(MenuAction):
    title = 'REPORT NEW INCIDENT'

    def label(self) -> str:
        return 'Report a new incident'

    @inject
    def run(
        self,
        console: Console,
        incident_repo: IncidentRepository = Provide[Container.incident_repo],
        incident_log: IncidentLog = Provide[Container.incident_log],
        max_length: int = Provide[Container.config.store.max_length],
    ) -> bool:
        if incident_repo.is_full():
            console.error('Error: Maximum number of incidents reached.')
            return True

        area = prompt_field(
            console, 'Enter the area where the incident occurred (e.g., Street name)', text_field(max_length)
        )
        incident_type = prompt_field(
            console, 'Enter the type of incident (e.g., pothole, non-functional streetlight)', text_field(max_length)
        )
        time = prompt_field(
            console, 'Enter the time when the incident occurred (HH:MM format, 24-hour clock)', time_field()
        )

        outcome = report_incident(area, incident_type, time, incident_repo, incident_log, max_length)

        if not outcome.ok:
            console.error(f'Error: {outcome.message}')

        # The incident is kept in memory even when writing it to the log failed
        if outcome.incident is not None:
            console.success(f'\nIncident reported successfully with ID: {outcome.incident.id}')

        return True
