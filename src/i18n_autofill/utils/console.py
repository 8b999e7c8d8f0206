"""
Build Diagnostic Output.

Every module of the pass reports through a `logging` logger below
``i18n_autofill``. This module binds that logger tree to one `rich` console
so a host build (or a test) can decide where warnings end up: the terminal
by default, stderr when stdout carries a JSON report, or a recording console
that collects the diagnostics of a single build.

Attributes:
    console (_DiagnosticConsole): Stable handle on the active Rich console.
"""

import logging
from typing import Any, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

LOGGER_NAME = "i18n_autofill"

# Between INFO and WARNING
SUCCESS = 25
logging.addLevelName(SUCCESS, "SUCCESS")

_THEME = Theme(
  {
    "logging.level.success": "green",
    "path": "bold blue",
    "locale": "bold magenta",
  }
)

logger = logging.getLogger(LOGGER_NAME)


class _DiagnosticConsole:
  """
  Owns the console diagnostics are rendered on and the handler feeding it.
  """

  def __init__(self) -> None:
    self._backend: Console = Console(theme=_THEME)
    self._handler: Optional[RichHandler] = None
    self._bind_handler()

  @property
  def backend(self) -> Console:
    return self._backend

  def set_backend(self, new_console: Console) -> None:
    self._backend = new_console
    self._bind_handler()

  def reset(self) -> None:
    self.set_backend(Console(theme=_THEME))

  def print(self, *args: Any, **kwargs: Any) -> None:
    self._backend.print(*args, **kwargs)

  def _bind_handler(self) -> None:
    # One handler per console swap; the old one would write to a stale console
    if self._handler is not None:
      logger.removeHandler(self._handler)

    self._handler = RichHandler(
      console=self._backend,
      show_time=False,
      show_path=False,
      markup=True,
    )
    logger.addHandler(self._handler)
    logger.setLevel(logging.INFO)


console = _DiagnosticConsole()


def set_console(new_console: Console) -> None:
  """
  Sends all following diagnostics to ``new_console``.

  Args:
      new_console (Console): e.g. ``Console(record=True)`` to capture a build.
  """
  console.set_backend(new_console)


def reset_console() -> None:
  """Back to a fresh stdout console."""
  console.reset()


def get_console() -> Console:
  return console.backend


def log_info(msg: str) -> None:
  logger.info(msg, extra={"markup": True})


def log_success(msg: str) -> None:
  logger.log(SUCCESS, msg, extra={"markup": True})


def log_warning(msg: str) -> None:
  """
  Reports a call site left unchanged or a similar non-fatal build problem.

  Args:
      msg (str): Rich markup allowed; escape paths with `rich.markup.escape`.
  """
  logger.warning(msg, extra={"markup": True})


def log_error(msg: str) -> None:
  logger.error(msg, extra={"markup": True})
