from __future__ import annotations

import enum


class LogLevelEnum(enum.StrEnum):
	"""Enum values for log levels."""

	# no log messages are displayed
	NOTSET = "off"
	# log messages are displayed for debugging purposes
	DEBUG = enum.auto()
	# log messages are displayed for informational purposes
	INFO = enum.auto()
	# log messages are displayed for warning purposes
	WARNING = enum.auto()
	# log messages are displayed for error purposes
	ERROR = enum.auto()
	# log messages are displayed for critical purposes
	CRITICAL = enum.auto()
