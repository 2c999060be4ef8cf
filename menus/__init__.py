# ruff: noqa: N812

from . import report, view
from .main import menu as MenuMain
from .view import menu as MenuView

__all__ = ['MenuMain', 'MenuView', 'report', 'view']
