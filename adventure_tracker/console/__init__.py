"""Console menu, validated prompts and report rendering."""

from .menu import MenuOption, TrackerMenu
from .prompts import get_choice, get_valid_double, get_valid_int, get_valid_string, get_yes_no
from .report import (
    ReportError,
    ReportWriter,
    describe_character,
    describe_session,
    render_report,
    render_statistics,
)

__all__ = [
    "MenuOption",
    "ReportError",
    "ReportWriter",
    "TrackerMenu",
    "describe_character",
    "describe_session",
    "get_choice",
    "get_valid_double",
    "get_valid_int",
    "get_valid_string",
    "get_yes_no",
    "render_report",
    "render_statistics",
]
