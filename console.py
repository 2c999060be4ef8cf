import sys
from collections.abc import Callable
from enum import StrEnum
from typing import TextIO


class Color(StrEnum):
    RED = '\x1b[31m'
    GREEN = '\x1b[32m'
    YELLOW = '\x1b[33m'
    CYAN = '\x1b[36m'
    RESET = '\x1b[0m'


CLEAR_SCREEN = '\x1b[2J\x1b[H'
HEADER_RULE = '=' * 46


class Console:
    """Line-oriented terminal I/O used by the menus."""

    def __init__(
        self,
        color: bool = True,
        read_line: Callable[[str], str] = input,
        output: TextIO | None = None,
    ) -> None:
        self.color = color
        self.read_line = read_line
        self.output = output if output is not None else sys.stdout

    def paint(self, text: str, color: Color) -> str:
        if not self.color:
            return text
        return f'{color}{text}{Color.RESET}'

    def read(self, prompt: str) -> str:
        # EOFError and KeyboardInterrupt propagate, they end the session
        return self.read_line(prompt)

    def write(self, text: str = '', color: Color | None = None) -> None:
        if color is not None:
            text = self.paint(text, color)
        print(text, file=self.output)

    def error(self, text: str) -> None:
        self.write(text, Color.RED)

    def success(self, text: str) -> None:
        self.write(text, Color.GREEN)

    def header(self, title: str) -> None:
        self.write(HEADER_RULE, Color.CYAN)
        self.write(f'           {title}           ', Color.YELLOW)
        self.write(HEADER_RULE + '\n', Color.CYAN)

    def clear(self) -> None:
        if self.output.isatty():
            self.output.write(CLEAR_SCREEN)
            self.output.flush()

    def pause(self, prompt: str = 'Press Enter to continue...') -> None:
        self.read(prompt)
