"""Narration sink for demo output.

Every demo narrates what it does line by line. Instead of printing directly,
demo code calls narrate(); the line goes to whichever sink is active for
the current context. The default sink prints through a shared rich Console.

The active sink lives in a ContextVar so that a CLI run, a test, and an API
request can each capture their own transcript without interleaving::

    with capture_narration() as transcript:
        DBConnection.get_instance()
    assert transcript.lines == ["Connection #1 created -> localhost:5432"]
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Iterator, Optional, Protocol

from rich.console import Console


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------

def fmt_money(value: Decimal | float | int | None, currency: str = "$") -> str:
    """Format a number as currency."""
    if value is None:
        return "N/A"
    return f"{currency}{value:,.2f}"


def fmt_reading(value: Optional[float]) -> str:
    """Format a sensor reading with one decimal place."""
    if value is None:
        return "N/A"
    return f"{value:.1f}"


# ---------------------------------------------------------------------------
# Sinks
# ---------------------------------------------------------------------------

class NarrationSink(Protocol):
    def write(self, line: str) -> None:
        ...


class ConsoleSink:
    """Print narration through a rich Console.

    Markup, highlighting and emoji codes are disabled: demo output contains
    literal brackets such as ``[EmailOTP]`` that must not be parsed as styles.
    """

    def __init__(self, console: Optional[Console] = None):
        self._console = console

    @property
    def console(self) -> Console:
        if self._console is None:
            self._console = Console()
        return self._console

    def write(self, line: str) -> None:
        self.console.print(
            line,
            markup=False,
            highlight=False,
            emoji=False,
            soft_wrap=True,
        )


@dataclass
class Transcript:
    """Recording sink that keeps every narrated line."""

    lines: list[str] = field(default_factory=list)

    def write(self, line: str) -> None:
        self.lines.append(line)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)

    def __contains__(self, fragment: str) -> bool:
        return any(fragment in line for line in self.lines)


_default_sink = ConsoleSink()
_current_sink: ContextVar[NarrationSink] = ContextVar("narration_sink", default=_default_sink)


def narrate(line: str = "") -> None:
    """Emit a narration line to the active sink.

    Embedded newlines are split so recorded transcripts stay one line per entry.
    """
    sink = _current_sink.get()
    for part in line.split("\n"):
        sink.write(part)


@contextmanager
def use_sink(sink: NarrationSink) -> Iterator[NarrationSink]:
    """Route narration to ``sink`` for the duration of the block."""
    token = _current_sink.set(sink)
    try:
        yield sink
    finally:
        _current_sink.reset(token)


@contextmanager
def capture_narration() -> Iterator[Transcript]:
    """Record narration instead of printing it."""
    transcript = Transcript()
    with use_sink(transcript):
        yield transcript
