from typing import cast
from unittest.mock import Mock

from console import Console


def mock_console(*answers: str | type[BaseException]) -> Console:
    console = Mock(Console)
    cast(Mock, console.read).side_effect = list(answers)
    return console


def written(console: Console) -> list[str]:
    return [call.args[0] if call.args else '' for call in cast(Mock, console.write).call_args_list]


def errors(console: Console) -> list[str]:
    return [call.args[0] for call in cast(Mock, console.error).call_args_list]
