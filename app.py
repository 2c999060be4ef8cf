import logging
import os

from console import Console
from containers import Container
from menus import MenuMain
from menus.main import FAREWELL_MESSAGE
from menus.util import Menu
from models.incident_report import DEFAULT_MAX_LENGTH
from services import load_incidents

DEFAULT_INCIDENTS_FILE = 'incidents.txt'
DEFAULT_MAX_INCIDENTS = 100

LOG_FORMAT = '%(asctime)s %(levelname)s %(name)s: %(message)s'


class ConsoleApp:
    def __init__(self, container: Container, menu: Menu) -> None:
        self.container = container
        self.menu = menu

    def run(self) -> None:
        load_incidents(self.container.incident_repo(), self.container.incident_log())

        console: Console = self.container.console()
        try:
            self.menu.run(console)
        except (EOFError, KeyboardInterrupt):
            console.write()
            console.write(FAREWELL_MESSAGE)


def setup_logging() -> None:
    if 'LOG_FILE' in os.environ:
        logging.basicConfig(
            filename=os.environ['LOG_FILE'],
            level=os.getenv('LOG_LEVEL', 'INFO').upper(),
            format=LOG_FORMAT,
        )
    else:
        # Keep log records off the terminal the menus are drawn on
        logging.getLogger().addHandler(logging.NullHandler())


def create_app() -> ConsoleApp:
    setup_logging()

    container = Container()

    container.config.log.path.from_env('INCIDENTS_FILE', DEFAULT_INCIDENTS_FILE)
    container.config.store.capacity.from_env('MAX_INCIDENTS', DEFAULT_MAX_INCIDENTS, as_=int)
    container.config.store.max_length.from_env('MAX_FIELD_LENGTH', DEFAULT_MAX_LENGTH, as_=int)
    container.config.console.color.from_value('NO_COLOR' not in os.environ)

    return ConsoleApp(container, MenuMain)


def main() -> None:  # pragma: no cover
    create_app().run()


if __name__ == '__main__':  # pragma: no cover
    main()
