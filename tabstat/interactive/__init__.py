"""Interactive, menu-driven analysis of a loaded dataset."""

from tabstat.interactive.prompts import (
    Prompter,
    parse_column_selection,
    parse_row_selection,
)
from tabstat.interactive.session import AnalysisSession

__all__ = [
    "AnalysisSession",
    "Prompter",
    "parse_column_selection",
    "parse_row_selection",
]
