"""Error boundary handling for CLI commands.

Catches well-known exceptions at CLI entry points and displays clean error
messages without stack traces.
"""

import functools
import logging
from collections.abc import Callable
from typing import Any, TypeVar

import click

from nodebuild.core.errors import NodeBuildError

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Callable[..., Any])


def cli_error_boundary(func: T) -> T:
    """Decorator that turns predictable failures into ``Error: ...`` and exit code 1.

    Catches:
        - NodeBuildError: Invalid manifest or translation source
        - FileNotFoundError: Missing files/directories
        - PermissionError: Permission denied while writing output
        - ValueError: Invalid option values

    All other exceptions bubble up normally with full stack traces.

    Example:
        @click.command()
        @cli_error_boundary
        def my_command():
            ...
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except (NodeBuildError, FileNotFoundError, PermissionError, ValueError) as e:
            logger.debug("Exception details:", exc_info=True)
            click.echo(f"Error: {e}", err=True)
            raise SystemExit(1) from None

    return wrapper  # type: ignore[return-value]
