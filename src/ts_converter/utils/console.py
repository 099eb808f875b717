"""
Console Output and Logging Setup.

Per-file progress lines (converted, skipped, failed) are standard `logging`
records rendered by a `rich` handler. The handler writes to whichever Console
is currently installed; `set_console` swaps it, which tests use to capture the
run's output in a buffer.

Attributes:
    console (_SwappableConsole): Module-level handle that always forwards to the
        installed Console.
"""

import logging
from typing import Any

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

SUCCESS_LEVEL_NUM = 25
logging.addLevelName(SUCCESS_LEVEL_NUM, "SUCCESS")

_STYLES = Theme(
  {
    "logging.level.success": "green",
    "path": "bold blue",
    "warning": "yellow",
    "error": "bold red",
  }
)


def _new_console() -> Console:
  return Console(theme=_STYLES)


class _SwappableConsole:
  """
  Stable stand-in for the active `rich.console.Console`.

  Modules import ``console`` once; installing a new target rebinds both this
  object and the root logger's `RichHandler`.
  """

  def __init__(self) -> None:
    self._target = _new_console()
    self._bind_logging()

  @property
  def target(self) -> Console:
    return self._target

  def install(self, target: Console) -> None:
    self._target = target
    self._bind_logging()

  def _bind_logging(self) -> None:
    root = logging.getLogger()
    for existing in [h for h in root.handlers if isinstance(h, RichHandler)]:
      root.removeHandler(existing)
    root.addHandler(
      RichHandler(
        console=self._target,
        show_time=False,
        show_path=False,
        markup=True,
        rich_tracebacks=True,
      )
    )
    root.setLevel(logging.INFO)

  def __getattr__(self, name: str) -> Any:
    return getattr(self._target, name)


console = _SwappableConsole()


def set_console(new_console: Console) -> None:
  """
  Routes all further console and log output to ``new_console``.

  Args:
      new_console (Console): e.g. ``Console(file=io.StringIO())`` in tests.
  """
  console.install(new_console)


def reset_console() -> None:
  console.install(_new_console())


def _emit(level: int, icon: str, msg: str) -> None:
  logging.log(level, f"{icon} {msg}", extra={"markup": True})


def log_info(msg: str) -> None:
  """
  Logs progress information.

  Args:
      msg (str): Message text; may contain rich markup such as ``[path]``.
  """
  _emit(logging.INFO, "•", msg)


def log_success(msg: str) -> None:
  _emit(SUCCESS_LEVEL_NUM, "✔", msg)


def log_warning(msg: str) -> None:
  _emit(logging.WARNING, "!", msg)


def log_error(msg: str) -> None:
  _emit(logging.ERROR, "✘", msg)
