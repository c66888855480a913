"""Presenter for main frame orchestration logic.

Coordinates the document lifecycle (open, save, exit) and keeps the search
results in step with the document shown. Delegates all pure-UI operations
back to the MainFrame view.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from upath import UPath

from editpad.consts import APP_NAME, SEARCH_JOIN_TIMEOUT, UNTITLED_DOCUMENT
from editpad.services.document_service import DocumentError, DocumentService

if TYPE_CHECKING:
	from editpad.config import EditpadConfig
	from editpad.presenters.search_presenter import SearchPresenter
	from editpad.views.main_frame import MainFrame

log = logging.getLogger(__name__)


class MainFramePresenter:
	"""Orchestrates document and application-level logic.

	Attributes:
		view: The MainFrame view this presenter drives.
		conf: The application configuration.
		search_presenter: The presenter owning the search results.
		current_path: Path of the document shown, or None if untitled.
	"""

	def __init__(
		self,
		view: MainFrame,
		conf: EditpadConfig,
		search_presenter: SearchPresenter,
	) -> None:
		"""Initialize the main frame presenter.

		Args:
			view: The MainFrame view instance.
			conf: The application configuration.
			search_presenter: The presenter owning the search results.
		"""
		self.view = view
		self.conf = conf
		self.search_presenter = search_presenter
		self.current_path: Optional[UPath] = None

	@property
	def title(self) -> str:
		"""Window title for the document shown."""
		name = self.current_path.name if self.current_path else UNTITLED_DOCUMENT
		return f"{name} - {APP_NAME}"

	def open_file(self, path: str) -> bool:
		"""Load a document into the text area.

		On failure the error is shown and the text area is emptied.

		Args:
			path: The path of the document.

		Returns:
			True if the document was loaded.
		"""
		self.search_presenter.on_document_replaced()
		try:
			text = DocumentService.read(path, self.conf.editor.encoding)
		except DocumentError as e:
			log.error("Unable to load file %s", path, exc_info=True)
			self.current_path = None
			self.view.set_text("")
			self.view.set_title(self.title)
			self.view.show_error(str(e))
			return False
		self.current_path = UPath(path)
		self.view.set_text(text)
		self.view.set_title(self.title)
		log.info("Opened %s", self.current_path)
		return True

	def save_file(self, path: str) -> bool:
		"""Write the text area to a document.

		Args:
			path: The path of the document.

		Returns:
			True if the document was written.
		"""
		try:
			DocumentService.write(
				path, self.view.get_text(), self.conf.editor.encoding
			)
		except DocumentError as e:
			log.error("Unable to save file %s", path, exc_info=True)
			self.view.show_error(str(e))
			return False
		self.current_path = UPath(path)
		self.view.set_title(self.title)
		log.info("Saved %s", self.current_path)
		return True

	def on_open(self, event=None) -> None:
		"""Ask for a document and open it.

		Args:
			event: Optional wx event (ignored).
		"""
		path = self.view.ask_open_path()
		if not path:
			log.debug("Open cancelled")
			return
		self.open_file(path)

	def on_save(self, event=None) -> None:
		"""Ask where to save the document and write it.

		Args:
			event: Optional wx event (ignored).
		"""
		default_path = str(self.current_path) if self.current_path else None
		path = self.view.ask_save_path(default_path)
		if not path:
			log.debug("Save cancelled")
			return
		self.save_file(path)

	def on_exit(self, event=None) -> None:
		"""Remember the search options, wait for a pending search and close.

		Args:
			event: Optional wx event (ignored).
		"""
		search_settings = self.conf.search
		use_regex = self.view.get_use_regex()
		case_sensitive = self.view.get_case_sensitive()
		if (
			search_settings.use_regex != use_regex
			or search_settings.case_sensitive != case_sensitive
		):
			search_settings.use_regex = use_regex
			search_settings.case_sensitive = case_sensitive
			try:
				self.conf.save()
			except OSError:
				log.error("Unable to save the configuration", exc_info=True)
		task = self.search_presenter.search_task
		if task.is_running():
			log.debug("Waiting for the pending search")
			task.join(SEARCH_JOIN_TIMEOUT)
		self.search_presenter.close()
		self.view.close()
