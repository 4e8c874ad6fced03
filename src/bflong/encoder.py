"""
Long-Form Encoding
==================

The long form records a program's output as the change between
consecutive output values, starting from 0:

    values   3   3   5   1
    deltas  +3  +0  +2  -4
    text    3+  0+  2+  4-   ->  "3+0+2+4-"

Grammar
-------
    long_form := (DIGITS SIGN)*
    SIGN      := "+" | "-"

There are no separators, and a zero delta is always written as "0+".
replay() reads the text back into the original values.
"""

from typing import Iterable, Union
import re

from bflong.errors import LongFormatError, SourceLocation
from bflong.simulator import OutputEvent

# One <digits><sign> step of the long form
STEP_PATTERN = re.compile(r"([0-9]+)([+-])")


def encode(events: Iterable[Union[OutputEvent, int]]) -> str:
    """
    Delta-encode output values as long-form text.

    Args:
        events: OutputEvents from the simulator, or plain int values

    Returns:
        The long-form string (empty for no events)
    """
    parts = []
    previous = 0

    for event in events:
        value = event.value if isinstance(event, OutputEvent) else event
        delta = value - previous
        previous = value

        if delta < 0:
            parts.append(f"{abs(delta)}-")
        else:
            parts.append(f"{delta}+")

    return "".join(parts)


def replay(long_form: str, filename: str = "<input>") -> list[int]:
    """
    Decode long-form text back into the output values it encodes.

    Args:
        long_form: Text produced by encode()
        filename: Name used in error locations

    Returns:
        The running totals, one per step

    Raises:
        LongFormatError: If the text does not match the long-form grammar
    """
    values = []
    total = 0
    pos = 0

    while pos < len(long_form):
        match = STEP_PATTERN.match(long_form, pos)
        if match is None:
            raise LongFormatError(
                _describe_bad_step(long_form, pos),
                location=SourceLocation(filename, 1, pos + 1),
                hint="long-form text is a run of <digits>+ or <digits>- steps",
            )

        amount = int(match.group(1))
        total += amount if match.group(2) == "+" else -amount
        values.append(total)
        pos = match.end()

    return values


def _describe_bad_step(text: str, pos: int) -> str:
    digits = re.match(r"[0-9]*", text[pos:]).group(0)
    if digits:
        if pos + len(digits) >= len(text):
            return f"missing '+' or '-' after '{digits}'"
        return f"expected '+' or '-' after '{digits}'"
    return f"unexpected character {text[pos]!r}"
