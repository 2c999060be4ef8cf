from console import Console

from .util import Menu, MenuAction, menu_option

FAREWELL_MESSAGE = 'Thank you for using the Incident Reporting System!'

menu = Menu('INCIDENT REPORTING SYSTEM')


@menu_option(menu, 3)
class Exit(MenuAction):
    def label(self) -> str:
        return 'Exit'

    def run(self, console: Console) -> bool:
        console.write(FAREWELL_MESSAGE)
        return False
