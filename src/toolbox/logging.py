"""Logging helpers for toolbox.

Library modules only ever log through `logging.getLogger(__name__)` and never
install handlers on import. Applications that want those records on the
console use `configure_logging`, which attaches a Rich handler either to the
`toolbox` logger alone or to the root logger. In the root case records from
other libraries reach the same handler and are tagged with a short
"[library]" prefix so they stand apart from toolbox's own output.
"""

from __future__ import annotations

import logging
from typing import Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

from toolbox.config import get_log_level

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "toolbox"
CONSOLE_HANDLER_NAME = "toolbox-console"

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]


def is_project_logger(name: str) -> bool:
    """True for the `toolbox` logger and its children (not e.g. `toolboxes`)."""
    return name == PROJECT_PREFIX or name.startswith(f"{PROJECT_PREFIX}.")


class ThirdPartyPrefixFilter(logging.Filter):
    """Tag records from other libraries with their top-level package name.

    Sets `record.prefix` to "[sqlalchemy]" for a record from
    "sqlalchemy.engine", and to "" for toolbox records. Nothing is dropped.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        top_level = record.name.partition(".")[0]
        record.prefix = "" if is_project_logger(record.name) else f"[{top_level}]"
        return True


def config_console_handler(
    level: int | None = None, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Build a Rich handler that writes to stderr.

    Args:
        level: Minimum level for console output. None reads it from
            `TOOLBOX_LOG_LEVEL`. Ignored in debug mode.
        debug_mode: Log everything at DEBUG with timestamps, logger names and
            source links instead of library prefixes.
        color: Enable color output when True.

    Returns:
        RichHandler: Configured handler, not yet attached to any logger.

    Raises:
        InvalidLogLevelError: If `level` is None and `TOOLBOX_LOG_LEVEL` is invalid.
    """
    color_system: ColorSystem | None = "auto" if color else None
    effective = logging.DEBUG if debug_mode else level
    if effective is None:
        effective = get_log_level()

    handler = RichHandler(
        level=effective,
        console=Console(color_system=color_system, stderr=True),
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    if debug_mode:
        handler.setFormatter(logging.Formatter("%(asctime)s %(name)s: %(message)s"))
    else:
        handler.setFormatter(logging.Formatter("%(prefix)s %(message)s"))
        handler.addFilter(ThirdPartyPrefixFilter())
    return handler


def configure_logging(
    level: int | None = None,
    debug_mode: bool = False,
    color: bool = True,
    *,
    root: bool = False,
) -> RichHandler:
    """Send log records to the console.

    By default the handler goes on the `toolbox` logger only, and that logger
    is set to the handler level. With `root=True` it goes on the root logger
    instead, so records from every library are shown (third-party ones with a
    "[library]" prefix) and the root logger is set to the handler level.
    Calling this again replaces the handler installed by the previous call,
    wherever it was attached.

    Args:
        level: Minimum console level; None reads `TOOLBOX_LOG_LEVEL`.
        debug_mode: Enable debug formatting and DEBUG level.
        color: Enable color output when True.
        root: Attach to the root logger instead of the `toolbox` logger.

    Returns:
        RichHandler: The handler that was attached.
    """
    for candidate in (logging.getLogger(PROJECT_PREFIX), logging.getLogger()):
        for existing in list(candidate.handlers):
            if existing.get_name() == CONSOLE_HANDLER_NAME:
                candidate.removeHandler(existing)
                existing.close()

    handler = config_console_handler(level=level, debug_mode=debug_mode, color=color)
    handler.set_name(CONSOLE_HANDLER_NAME)
    target = logging.getLogger() if root else logging.getLogger(PROJECT_PREFIX)
    target.addHandler(handler)
    target.setLevel(handler.level)
    return handler
