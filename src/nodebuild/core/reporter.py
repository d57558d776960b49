"""Build progress reporting.

Progress lines are emitted through a ``BuildReporter`` so the host decides how
to render them. ``ClickReporter`` renders to stdout with optional color.
"""

from abc import ABC, abstractmethod
from typing import Literal

import click

LogLevel = Literal["debug", "info", "warning", "error"]

BULLET_COLOR = "magenta"

_LEVEL_COLORS: dict[str, str] = {
    "warning": "yellow",
    "error": "red",
}


class BuildReporter(ABC):
    """Abstract interface for build progress output."""

    @abstractmethod
    def log(
        self,
        message: str,
        *,
        level: LogLevel = "info",
        bullet: bool = False,
        **fields: object,
    ) -> None:
        """Emit one progress line.

        Args:
            message: Human-readable message
            level: Severity of the message
            bullet: Render the message as a list item
            **fields: Structured values attached to the message
        """
        ...

    def emphasize(self, value: str) -> str:
        """Return value marked up for emphasis (plain by default)."""
        return value


class ClickReporter(BuildReporter):
    """Reporter that writes to stdout via click.echo.

    Args:
        color: True forces ANSI colors, False disables them, None lets click
            strip them when stdout is not a terminal
    """

    def __init__(self, *, color: bool | None = None) -> None:
        self._color = color

    def log(
        self,
        message: str,
        *,
        level: LogLevel = "info",
        bullet: bool = False,
        **fields: object,
    ) -> None:
        line = f"- {message}" if bullet else message
        if fields:
            line += "".join(f" {key}={value}" for key, value in fields.items())

        fg = BULLET_COLOR if bullet else _LEVEL_COLORS.get(level)
        if self._color is not False and fg is not None:
            line = click.style(line, fg=fg)

        click.echo(line, err=level == "error", color=self._color)

    def emphasize(self, value: str) -> str:
        if self._color is False:
            return value
        return click.style(value, fg=BULLET_COLOR)
