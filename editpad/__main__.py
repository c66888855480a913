"""Entry point for the editpad application.

Parses command-line arguments, stores them in ``global_vars`` and starts the wx main loop.
"""

import argparse

from editpad import global_vars
from editpad.consts import APP_NAME

LOG_LEVEL_CHOICES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL", "OFF")


def parse_args(argv=None):
	"""Parse command-line arguments for the editpad application.

	Arguments:
		--log_level, -L (str | None): Sets the logging level. Valid levels are DEBUG, INFO, WARNING, ERROR, CRITICAL and OFF. Defaults to None (use the configuration).
		file (str | None): Document to open at startup. Defaults to None.

	Args:
		argv: Argument list to parse; defaults to ``sys.argv[1:]``.

	Returns:
		argparse.Namespace: Parsed command-line arguments with their values.
	"""
	parser = argparse.ArgumentParser(description=f"Run {APP_NAME}")
	parser.add_argument(
		"--log_level",
		"-L",
		type=str.upper,
		choices=LOG_LEVEL_CHOICES,
		default=None,
		help="Set the log level (DEBUG, INFO, WARNING, ERROR, CRITICAL, OFF)",
	)
	parser.add_argument(
		"file", nargs="?", help="Document to open", default=None
	)
	return parser.parse_args(argv)


def main():
	"""Run the application."""
	global_vars.args = parse_args()
	from editpad.main_app import MainApp

	app = MainApp()
	app.MainLoop()


if __name__ == '__main__':
	main()
