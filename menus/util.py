from collections.abc import Callable, Iterable
from typing import ClassVar

import marshmallow
from marshmallow import fields

from console import Console
from models import Incident
from models.incident_report import first_error, text_validators, time_validators

TABLE_ROW = '{:<5} | {:<30} | {:<30} | {:<20}'
TABLE_RULE = '-' * 81

NO_INCIDENTS_MESSAGE = 'No incidents have been reported yet.'


class MenuAction:
    title: ClassVar[str | None] = None
    pauses: ClassVar[bool] = True
    pause_prompt: ClassVar[str] = '\nPress Enter to continue...'

    def label(self) -> str:
        raise NotImplementedError  # pragma: no cover

    def run(self, console: Console) -> bool:
        """Run the action, returning False to leave the menu it belongs to."""
        raise NotImplementedError  # pragma: no cover


class Menu:
    def __init__(self, title: str) -> None:
        self.title = title
        self.actions: dict[int, MenuAction] = {}

    def render(self, console: Console) -> None:
        console.clear()
        console.header(self.title)
        for number, action in sorted(self.actions.items()):
            console.write(f'{number}. {action.label()}')
        console.write()

    def choose(self, console: Console) -> MenuAction | None:
        choice = console.read('Enter your choice: ')

        try:
            number = int(choice)
        except ValueError:
            console.write('Invalid input. Please enter a number.')
            console.pause()
            return None

        if number not in self.actions:
            console.write('Invalid choice. Please try again.')
            console.pause()
            return None

        return self.actions[number]

    def run(self, console: Console) -> None:
        while True:
            self.render(console)
            action = self.choose(console)
            if action is None:
                continue

            console.clear()
            if action.title is not None:
                console.header(action.title)

            if not action.run(console):
                return

            if action.pauses:
                console.pause(action.pause_prompt)


def menu_option(menu: Menu, number: int) -> Callable[[type[MenuAction]], type[MenuAction]]:
    def decorator(cls: type[MenuAction]) -> type[MenuAction]:
        menu.actions[number] = cls()
        return cls

    return decorator


def plural(count: int, noun: str) -> str:
    return f'{count} {noun}{"" if count == 1 else "s"}'


def text_field(max_length: int) -> fields.Field:
    return fields.String(validate=text_validators(max_length))


def time_field() -> fields.Field:
    return fields.String(validate=time_validators())


def prompt_field(console: Console, prompt: str, field: fields.Field) -> str:
    while True:
        value = console.read(f'{prompt}: ')
        try:
            return str(field.deserialize(value))
        except marshmallow.ValidationError as err:
            console.error(first_error(err))


def render_incidents(console: Console, incidents: Iterable[Incident]) -> None:
    console.write(TABLE_ROW.format('ID', 'Area', 'Incident Type', 'Time Occurred'))
    console.write(TABLE_RULE)
    for incident in incidents:
        console.write(TABLE_ROW.format(incident.id, incident.area, incident.type, incident.time))
