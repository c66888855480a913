"""Module for the main application class and initialization.

This module contains the MainApp class, a subclass of wx.App responsible for setting up logging and configuration and creating the main window.
"""

import logging
import sys

import wx

import editpad.config as config
import editpad.global_vars as global_vars

# don't use relative import here, frozen builds fail to find the module
from editpad.consts import APP_NAME
from editpad.logger import (
	get_log_file_path,
	logging_uncaught_exceptions,
	select_log_level,
	setup_logging,
)

log = logging.getLogger(__name__)


class MainApp(wx.App):
	"""Main application class for editpad."""

	def OnInit(self) -> bool:
		"""Initialize the application and set up the main window.

		Configures exception handling and logging, loads the configuration and creates the main frame, optionally opening the document given on the command line.

		Returns:
			returns True to indicate successful application initialization
		"""
		sys.excepthook = logging_uncaught_exceptions
		self.conf = config.conf()
		args = global_vars.args
		setup_logging(
			select_log_level(
				args.log_level if args else None,
				self.conf.general.log_level,
			)
		)
		log.debug(f"args: {args}")
		log.debug(f"config: {self.conf}")
		if getattr(sys, "frozen", False):
			log.info(
				"running frozen application: redirecting stdio to log file"
			)
			self.RedirectStdio(str(get_log_file_path()))
		self.init_main_frame(args.file if args else None)
		log.info("Application started")
		return True

	def init_main_frame(self, open_file=None):
		"""Create the main frame and set it as the top window.

		Args:
			open_file: Path of a document to open on startup, if any.
		"""
		from editpad.views.main_frame import MainFrame

		self.frame = MainFrame(
			None, title=APP_NAME, conf=self.conf, open_file=open_file
		)
		self.frame.Show()
		self.SetTopWindow(self.frame)

	def OnExit(self) -> int:
		"""Log the application exit.

		Returns:
			Always returns 0 to indicate successful application exit
		"""
		log.info("Application exited")
		return 0
