"""Prompt helpers for the interactive session.

Input and output go through two callables so sessions can be driven by a
script or a test as easily as by a terminal: ``read_line(prompt)`` behaves
like :func:`input` (raising ``EOFError`` at end of input) and ``write(text)``
behaves like :func:`print`.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from tabstat.analysis.hypothesis import Alternative

ReadLine = Callable[[str], str]
Write = Callable[[str], None]


def parse_column_selection(
    text: str, headers: Sequence[str], allow_multiple: bool = False
) -> list[str]:
    """Turn 1-based column numbers into header names.

    Args:
        text: User input such as ``"2"`` or ``"1,3,5"``
        headers: Selectable headers in display order
        allow_multiple: Accept a comma-separated list

    Returns:
        Selected headers in the order given

    Raises:
        ValueError: If the input is not a valid selection
    """
    parts = [p.strip() for p in text.split(",")] if allow_multiple else [text.strip()]
    selected = []
    for part in parts:
        try:
            number = int(part)
        except ValueError:
            raise ValueError(f"Invalid column number: {part!r}") from None
        if not 1 <= number <= len(headers):
            raise ValueError(f"Column number out of range: {number}")
        selected.append(headers[number - 1])
    return selected


def parse_row_selection(text: str, row_count: int) -> list[int] | None:
    """Turn 1-based row numbers and ranges into 0-based indices.

    Accepts a comma-separated list of numbers and inclusive ranges, e.g.
    ``"1,4,10-20"``. A blank answer selects every row (returns None).

    Raises:
        ValueError: If a number or range is malformed or out of range
    """
    text = text.strip()
    if not text:
        return None

    indices: list[int] = []
    for part in (p.strip() for p in text.split(",")):
        start_text, sep, end_text = part.partition("-")
        try:
            start = int(start_text)
            end = int(end_text) if sep else start
        except ValueError:
            raise ValueError(f"Invalid row selection: {part!r}") from None
        if start < 1 or end > row_count or start > end:
            raise ValueError(f"Row selection out of range (1-{row_count}): {part!r}")
        indices.extend(range(start - 1, end))
    return indices


class Prompter:
    """Asks typed questions over a pair of line-oriented callables."""

    def __init__(self, read_line: ReadLine = input, write: Write = print) -> None:
        self.read_line = read_line
        self.write = write

    def ask(self, prompt: str) -> str:
        return self.read_line(prompt).strip()

    def choose_columns(
        self, headers: Sequence[str], message: str, allow_multiple: bool = False
    ) -> list[str]:
        """List headers with numbers and read a selection."""
        self.write(f"\n{message}")
        self.write("Available columns:")
        for i, header in enumerate(headers, start=1):
            self.write(f"{i}. {header}")
        if allow_multiple:
            self.write("Enter column numbers separated by commas (e.g. 1,3,5):")
        else:
            self.write("Enter a column number:")
        return parse_column_selection(self.ask("Selection: "), headers, allow_multiple)

    def choose_column(self, headers: Sequence[str], message: str) -> str:
        return self.choose_columns(headers, message)[0]

    def ask_float(self, prompt: str, default: float | None = None) -> float:
        """Read a number; a blank answer gives ``default`` when one is set.

        Raises:
            ValueError: If the answer is not a number
        """
        text = self.ask(prompt)
        if not text and default is not None:
            return default
        try:
            return float(text)
        except ValueError:
            raise ValueError(f"Invalid number: {text!r}") from None

    def ask_int(self, prompt: str) -> int:
        """Read a whole number.

        Raises:
            ValueError: If the answer is not an integer
        """
        text = self.ask(prompt)
        try:
            return int(text)
        except ValueError:
            raise ValueError(f"Invalid whole number: {text!r}") from None

    def ask_yes_no(self, prompt: str, default: bool = True) -> bool:
        text = self.ask(prompt).lower()
        if not text:
            return default
        return text not in ("n", "no")

    def ask_alpha(self, default: float) -> float:
        return self.ask_float(
            f"Significance level α (default {default}): ", default=default
        )

    def ask_alternative(self, lhs: str, rhs: str) -> Alternative:
        """Offer the three alternatives and parse the choice.

        Args:
            lhs: Left-hand side of the hypothesis, e.g. ``"μ"``
            rhs: Right-hand side, e.g. the hypothesized mean

        Raises:
            InvalidTestTypeError: If the choice is not recognized
        """
        labels = ("two-sided", "right-tailed", "left-tailed")
        self.write("Choose the alternative hypothesis:")
        for i, (alt, label) in enumerate(zip(Alternative, labels), start=1):
            self.write(f"{i}. {lhs} {alt.symbol} {rhs} ({label})")
        return Alternative.parse(self.ask("Selection (1-3): "))
