"""Logging setup for editpad.

Log records go to ``editpad.log`` and, outside frozen builds, to the
console. The level comes from the command line when given, otherwise from
the configuration.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from types import TracebackType
from typing import Optional, Type

from platformdirs import user_log_path

import editpad.global_vars as global_vars
from editpad.config import LogLevelEnum
from editpad.consts import APP_AUTHOR, APP_NAME

LOG_FILE_NAME = f"{APP_NAME}.log"

LOG_FORMAT = (
	"%(asctime)s - %(threadName)s - %(name)s - %(levelname)s - %(message)s"
)

# above CRITICAL: no record passes
LOG_LEVEL_OFF = logging.CRITICAL + 10

OFF_LEVEL_NAMES = ("OFF", "NOTSET")


def get_log_file_path() -> Path:
	"""Return the path of the log file.

	The portable ``user_data`` directory is used when present, the platform
	log directory otherwise.
	"""
	if global_vars.user_data_path:
		return global_vars.user_data_path / LOG_FILE_NAME
	log_dir = user_log_path(APP_NAME, APP_AUTHOR, ensure_exists=True)
	return log_dir / LOG_FILE_NAME


def resolve_log_level(level: str | LogLevelEnum) -> int:
	"""Convert a level name from the command line or the configuration.

	Names are case-insensitive. ``OFF`` (and ``NOTSET``, the name of the
	configuration's ``off`` member) disables logging.

	Args:
		level: A level name or a LogLevelEnum member.

	Returns:
		The numeric level to give to the root logger.

	Raises:
		ValueError: If the name is not a known level.
	"""
	name = level.name if isinstance(level, LogLevelEnum) else level.upper()
	if name in OFF_LEVEL_NAMES:
		return LOG_LEVEL_OFF
	levels = logging.getLevelNamesMapping()
	if name not in levels:
		raise ValueError(f"Unknown log level: {level}")
	return levels[name]


def select_log_level(
	cli_level: Optional[str], conf_level: LogLevelEnum
) -> int:
	"""Pick the effective level: the command line wins over the configuration.

	Args:
		cli_level: The ``--log_level`` argument, or None.
		conf_level: The ``general.log_level`` setting.
	"""
	return resolve_log_level(cli_level or conf_level)


def setup_logging(level: int) -> None:
	"""Install the log handlers on the root logger.

	Args:
		level: The numeric level, usually from resolve_log_level.
	"""
	handlers: list[logging.Handler] = [
		logging.FileHandler(get_log_file_path(), mode="w", encoding="utf-8")
	]
	if not getattr(sys, "frozen", False):
		handlers.append(logging.StreamHandler())
	logging.basicConfig(
		level=level, format=LOG_FORMAT, handlers=handlers, force=True
	)


def logging_uncaught_exceptions(
	exc_type: Type[BaseException],
	exc_value: BaseException,
	exc_traceback: Optional[TracebackType],
) -> None:
	"""Hook for ``sys.excepthook`` sending uncaught exceptions to the log.

	The record goes to the logger named after the exception's module. A
	keyboard interrupt is only noted.
	"""
	if issubclass(exc_type, KeyboardInterrupt):
		logging.info("Interrupted by the user")
		return
	logger = logging.getLogger(exc_type.__module__)
	logger.critical(
		"Uncaught exception", exc_info=(exc_type, exc_value, exc_traceback)
	)
