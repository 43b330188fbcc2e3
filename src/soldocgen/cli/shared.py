# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared utilities for CLI commands (logging, errors, exit codes)."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Final

from rich.console import Console
from rich.text import Text

EXIT_OK: Final[int] = 0
EXIT_ARTIFACT_FAILURE: Final[int] = 1
EXIT_CONFIG_FAILURE: Final[int] = 2
EXIT_RENDERER_FAILURE: Final[int] = 3

PACKAGE_LOGGER: Final[str] = "soldocgen"


class CLIError(RuntimeError):
    """Error raised when a CLI command fails and should exit with a status code."""

    def __init__(self, message: str, *, exit_code: int = 1) -> None:
        super().__init__(message)
        self.exit_code = exit_code


@dataclass(slots=True)
class CLILogger:
    """Console reporter for CLI status lines honouring emoji and colour flags."""

    console: Console
    use_emoji: bool
    use_color: bool = True
    debug_enabled: bool = False
    _key_value_re: re.Pattern[str] = re.compile(r"([\w-]+)=(\".*?\"|\S+)")

    def _status(self, symbol: str, message: str, style: str) -> None:
        text = Text()
        if self.use_emoji:
            text.append(f"{symbol} ")
        text.append(message, style=style if self.use_color else "")
        self.console.print(text, soft_wrap=True)

    def fail(self, message: str) -> None:
        """Report a failure in bold red."""

        self._status("❌", message, "bold red")

    def warn(self, message: str) -> None:
        """Report a warning in bold yellow."""

        self._status("⚠️", message, "bold yellow")

    def ok(self, message: str) -> None:
        """Report success in bold green."""

        self._status("✅", message, "bold green")

    def info(self, message: str) -> None:
        self._status("ℹ️", message, "bold cyan")

    def debug(self, message: str) -> None:
        """Emit a debug message with ``key=value`` highlighting when debug logging is enabled.

        Args:
            message: Debug payload rendered with simple highlighting.
        """

        if not self.debug_enabled:
            return
        text = Text("[debug] ", style="bold cyan")
        cursor = 0
        for match in self._key_value_re.finditer(message):
            start, end = match.span()
            if start > cursor:
                text.append(message[cursor:start], style="dim")
            text.append(match.group(1), style="bold magenta")
            text.append("=", style="dim")
            text.append(match.group(2), style="bold green")
            cursor = end
        if cursor < len(message):
            text.append(message[cursor:], style="dim")
        self.console.print(text, soft_wrap=True)


class CLILogHandler(logging.Handler):
    """Forward library ``logging`` records to :meth:`CLILogger.debug`."""

    def __init__(self, logger: CLILogger) -> None:
        super().__init__(level=logging.DEBUG)
        self._logger = logger

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self._logger.debug(f"{record.name}: {record.getMessage()}")
        except Exception:  # pragma: no cover - mirrors logging.Handler.emit contract
            self.handleError(record)


def build_cli_logger(*, emoji: bool, debug: bool = False, no_color: bool = False) -> CLILogger:
    """Return a ``CLILogger`` configured for the provided presentation flags.

    Args:
        emoji: Whether log output may include emoji glyphs.
        debug: Whether debug logging should be enabled.
        no_color: Whether terminal colour output should be disabled.

    Returns:
        CLILogger: Logger instance bound to a dedicated Rich console.
    """

    console = Console(no_color=no_color, highlight=False)
    return CLILogger(console=console, use_emoji=emoji, use_color=not no_color, debug_enabled=debug)


def install_debug_logging(logger: CLILogger) -> logging.Handler | None:
    """Route ``soldocgen`` library logs to ``logger`` when debug output is on.

    Returns:
        logging.Handler | None: Installed handler, or ``None`` when debug is off.
    """

    if not logger.debug_enabled:
        return None
    handler = CLILogHandler(logger)
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG)
    return handler


def remove_debug_logging(handler: logging.Handler | None) -> None:
    """Detach a handler installed by :func:`install_debug_logging`."""

    if handler is None:
        return
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)


__all__ = [
    "CLIError",
    "CLILogHandler",
    "CLILogger",
    "EXIT_ARTIFACT_FAILURE",
    "EXIT_CONFIG_FAILURE",
    "EXIT_OK",
    "EXIT_RENDERER_FAILURE",
    "build_cli_logger",
    "install_debug_logging",
    "remove_debug_logging",
]
