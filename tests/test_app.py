import os
import tempfile
from pathlib import Path
from typing import cast
from unittest.mock import Mock, patch

from faker import Faker
from unittest_parametrize import ParametrizedTestCase, parametrize

from app import create_app
from menus.main import FAREWELL_MESSAGE
from models import Incident

from .menus.util import mock_console, written


class TestApp(ParametrizedTestCase):
    def setUp(self) -> None:
        self.faker = Faker()

        tmp_dir = tempfile.TemporaryDirectory()
        self.addCleanup(tmp_dir.cleanup)
        self.path = Path(tmp_dir.name) / 'incidents.txt'

        env = patch.dict(os.environ, {'INCIDENTS_FILE': str(self.path), 'MAX_INCIDENTS': '3'})
        env.start()
        self.addCleanup(env.stop)

        self.app = create_app()

    def tearDown(self) -> None:
        self.app.container.unwire()

    def run_app(self, *answers: str | type[BaseException]) -> Mock:
        console = mock_console(*answers)
        with self.app.container.console.override(console):
            self.app.run()
        return cast(Mock, console)

    def test_config_from_env(self) -> None:
        config = self.app.container.config

        self.assertEqual(config.log.path(), str(self.path))
        self.assertEqual(config.store.capacity(), 3)
        self.assertEqual(config.store.max_length(), 49)

    def test_config_defaults(self) -> None:
        self.app.container.unwire()
        with patch.dict(os.environ):
            for name in ('INCIDENTS_FILE', 'MAX_INCIDENTS', 'MAX_FIELD_LENGTH', 'NO_COLOR'):
                os.environ.pop(name, None)
            self.app = create_app()

        config = self.app.container.config
        self.assertEqual(config.log.path(), 'incidents.txt')
        self.assertEqual(config.store.capacity(), 100)
        self.assertEqual(config.store.max_length(), 49)
        self.assertTrue(config.console.color())

    def test_no_color(self) -> None:
        self.app.container.unwire()
        with patch.dict(os.environ, {'NO_COLOR': '1'}):
            self.app = create_app()

        self.assertFalse(self.app.container.console().color)

    def test_run_loads_log_and_exits(self) -> None:
        self.path.write_text('1|5th Ave|Pothole|14:30\nbroken line\n2|Elm St|Streetlight|09:05\n', encoding='utf-8')

        console = self.run_app('3')

        self.assertEqual(
            self.app.container.incident_repo().list_all(),
            [
                Incident(id=1, area='5th Ave', type='Pothole', time='14:30'),
                Incident(id=2, area='Elm St', type='Streetlight', time='09:05'),
            ],
        )
        self.assertIn('2. View incidents (2 incidents reported so far)', written(console))
        self.assertEqual(written(console)[-1], FAREWELL_MESSAGE)

    def test_run_load_stops_at_capacity(self) -> None:
        self.path.write_text(''.join(f'{i}|Area {i}|Type {i}|10:00\n' for i in range(1, 6)), encoding='utf-8')

        self.run_app('3')

        self.assertEqual(self.app.container.incident_repo().count(), 3)

    @parametrize(
        'error',
        [
            (EOFError,),
            (KeyboardInterrupt,),
        ],
    )
    def test_run_end_of_input(self, error: type[BaseException]) -> None:
        console = self.run_app(error)

        self.assertEqual(written(console)[-1], FAREWELL_MESSAGE)

    def test_report_then_view(self) -> None:
        console = self.run_app(
            '1', 'Elm St', 'Streetlight', '09:05',
            '2', '3', 'light', '4',
            '3',
        )  # fmt: skip

        self.assertEqual(self.path.read_text(encoding='utf-8'), '1|Elm St|Streetlight|09:05\n')
        lines = written(console)
        self.assertIn('\nIncidents of type containing: light', lines)
        self.assertIn('2. View incidents (1 incident reported so far)', lines)
        cast(Mock, console.pause).assert_any_call('\nPress Enter to return to view menu...')

    def test_report_when_full(self) -> None:
        self.path.write_text(''.join(f'{i}|Area {i}|Type {i}|10:00\n' for i in range(1, 4)), encoding='utf-8')

        console = self.run_app('1', '3')

        cast(Mock, console.error).assert_called_once_with('Error: Maximum number of incidents reached.')
        self.assertEqual(len(self.path.read_text(encoding='utf-8').splitlines()), 3)
