"""Logging helpers for applications using SweetAlgy.

The library itself only emits records through module-level loggers and
never installs handlers on import. Host applications that want to see
those records on the console can call `enable_console_logging`, which
attaches a Rich handler to the ``sweetalgy`` package logger.
"""

from __future__ import annotations

import logging
from typing import Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

from sweetalgy.config import get_log_level

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "sweetalgy"
CONSOLE_HANDLER_NAME = "sweetalgy-console"

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]


class ThirdPartyPrefixFilter(logging.Filter):
    """Annotate third-party log records with a short prefix.

    For records whose logger name does not start with the project prefix,
    sets `record.prefix` to a short bracketed token like "[urllib3]". For
    project loggers the prefix is set to an empty string. The filter always
    returns True to allow the record to be processed.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not record.name.startswith(PROJECT_PREFIX):
            # e.g. "urllib3.connectionpool" -> "[urllib3]"
            record.prefix = f"[{record.name.split('.')[0]}]"
        else:
            record.prefix = ""
        return True


def config_console_handler(
    level: int | None = None,
    debug_mode: bool = False,
    color: bool = True,
    third_party_prefix: bool = True,
) -> RichHandler:
    """Configure and return a RichHandler for console output.

    The handler writes to stderr. In debug mode the handler is set to DEBUG
    and includes timestamps and source file/line information.

    The third-party prefix only has an effect when the handler sees records
    from other packages, i.e. when it is attached to the root logger. Pass
    ``third_party_prefix=False`` for a handler on the ``sweetalgy`` logger.

    Args:
        level: Minimum level for console output. When None, the level is
            read from `SWEETALGY_LOG_LEVEL` (see `sweetalgy.config`).
            Overridden to DEBUG in debug_mode.
        debug_mode: When True, enable debug formatting (show_path, timestamps).
        color: Enable color output when True.
        third_party_prefix: Outside debug mode, prefix third-party records
            with their top-level package name.

    Returns:
        RichHandler: Configured handler suitable to attach to a logger.
    """

    color_system: ColorSystem | None = "auto" if color else None
    console = Console(color_system=color_system, stderr=True)

    if debug_mode:
        level = logging.DEBUG
    elif level is None:
        level = get_log_level()

    handler = RichHandler(
        level=level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )

    if debug_mode:
        fmt = "%(asctime)s %(name)s: %(message)s"
    elif third_party_prefix:
        fmt = "%(prefix)s %(message)s"
        handler.addFilter(ThirdPartyPrefixFilter())
    else:
        fmt = "%(message)s"
    handler.setFormatter(logging.Formatter(fmt=fmt))

    return handler


def enable_console_logging(
    level: int | None = None, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Attach a Rich console handler to the ``sweetalgy`` package logger.

    Calling this more than once replaces the handler installed by the
    previous call instead of stacking duplicates.

    Args:
        level: Forwarded to `config_console_handler`.
        debug_mode: Forwarded to `config_console_handler`.
        color: Forwarded to `config_console_handler`.

    Returns:
        RichHandler: The handler that was attached.
    """
    package_logger = logging.getLogger(PROJECT_PREFIX)
    for existing in list(package_logger.handlers):
        if existing.name == CONSOLE_HANDLER_NAME:
            package_logger.removeHandler(existing)

    # only sweetalgy records reach this handler, so no third-party prefix
    handler = config_console_handler(
        level=level, debug_mode=debug_mode, color=color, third_party_prefix=False
    )
    handler.set_name(CONSOLE_HANDLER_NAME)
    package_logger.addHandler(handler)
    package_logger.setLevel(handler.level)
    return handler
