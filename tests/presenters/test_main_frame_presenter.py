"""Tests for MainFramePresenter."""

from unittest.mock import MagicMock

import pytest

from editpad.config import EditorSettings, SearchSettings
from editpad.presenters.main_frame_presenter import MainFramePresenter


@pytest.fixture
def mock_view():
	"""Build a mock main frame view."""
	view = MagicMock()
	view.get_text.return_value = "document text"
	view.get_use_regex.return_value = False
	view.get_case_sensitive.return_value = True
	return view


@pytest.fixture
def mock_conf():
	"""Build a mock configuration with real setting sections."""
	conf = MagicMock()
	conf.editor = EditorSettings()
	conf.search = SearchSettings()
	return conf


@pytest.fixture
def search_presenter():
	"""Build a mock search presenter with an idle search task."""
	search_presenter = MagicMock()
	search_presenter.search_task.is_running.return_value = False
	return search_presenter


@pytest.fixture
def presenter(mock_view, mock_conf, search_presenter):
	"""Build a MainFramePresenter with mocked collaborators."""
	return MainFramePresenter(mock_view, mock_conf, search_presenter)


class TestTitle:
	"""Tests for the window title."""

	def test_untitled(self, presenter):
		"""Without a document the title says Untitled."""
		assert presenter.title == "Untitled - editpad"

	def test_with_document(self, presenter, tmp_path):
		"""The title shows the document file name."""
		path = tmp_path / "notes.txt"
		path.write_text("x", encoding="UTF-8")
		presenter.open_file(str(path))
		assert presenter.title == "notes.txt - editpad"


class TestOpen:
	"""Tests for opening documents."""

	def test_open_file(self, presenter, mock_view, search_presenter, tmp_path):
		"""A document is loaded, titled and old search results dropped."""
		path = tmp_path / "doc.txt"
		path.write_text("abc", encoding="UTF-8")
		assert presenter.open_file(str(path)) is True
		mock_view.set_text.assert_called_once_with("abc")
		mock_view.set_title.assert_called_once_with("doc.txt - editpad")
		search_presenter.on_document_replaced.assert_called_once()
		assert presenter.current_path.name == "doc.txt"

	def test_open_failure_empties_text(self, presenter, mock_view, tmp_path):
		"""A failed load shows the error and empties the text area."""
		assert presenter.open_file(str(tmp_path / "missing.txt")) is False
		mock_view.set_text.assert_called_once_with("")
		mock_view.show_error.assert_called_once()
		assert presenter.current_path is None

	def test_on_open_asks_path(self, presenter, mock_view, mocker):
		"""on_open opens the path chosen in the dialog."""
		mock_view.ask_open_path.return_value = "/some/doc.txt"
		open_file = mocker.patch.object(presenter, "open_file")
		presenter.on_open()
		open_file.assert_called_once_with("/some/doc.txt")

	def test_on_open_cancelled(self, presenter, mock_view, mocker):
		"""Cancelling the dialog does nothing."""
		mock_view.ask_open_path.return_value = None
		open_file = mocker.patch.object(presenter, "open_file")
		presenter.on_open()
		open_file.assert_not_called()


class TestSave:
	"""Tests for saving documents."""

	def test_save_file(self, presenter, mock_view, tmp_path):
		"""The text area is written to the chosen path."""
		path = tmp_path / "out.txt"
		assert presenter.save_file(str(path)) is True
		assert path.read_text(encoding="UTF-8") == "document text"
		mock_view.set_title.assert_called_once_with("out.txt - editpad")

	def test_save_failure(self, presenter, mock_view, tmp_path):
		"""A failed write shows the error and keeps the text."""
		assert presenter.save_file(str(tmp_path / "no" / "out.txt")) is False
		mock_view.show_error.assert_called_once()
		mock_view.set_text.assert_not_called()

	def test_on_save_proposes_current_path(
		self, presenter, mock_view, mocker, tmp_path
	):
		"""The save dialog proposes the path of the open document."""
		path = tmp_path / "doc.txt"
		path.write_text("abc", encoding="UTF-8")
		presenter.open_file(str(path))
		mock_view.ask_save_path.return_value = None
		save_file = mocker.patch.object(presenter, "save_file")
		presenter.on_save()
		mock_view.ask_save_path.assert_called_once_with(str(path))
		save_file.assert_not_called()

	def test_on_save_untitled(self, presenter, mock_view, mocker):
		"""An untitled document proposes no path."""
		mock_view.ask_save_path.return_value = "/tmp/x.txt"
		save_file = mocker.patch.object(presenter, "save_file")
		presenter.on_save()
		mock_view.ask_save_path.assert_called_once_with(None)
		save_file.assert_called_once_with("/tmp/x.txt")


class TestExit:
	"""Tests for the exit flow."""

	def test_exit_closes_view(self, presenter, mock_view, mock_conf):
		"""Exit closes the view without saving unchanged options."""
		presenter.on_exit()
		mock_view.close.assert_called_once()
		mock_conf.save.assert_not_called()

	def test_exit_saves_changed_options(self, presenter, mock_view, mock_conf):
		"""Changed search options are remembered in the configuration."""
		mock_view.get_use_regex.return_value = True
		presenter.on_exit()
		assert mock_conf.search.use_regex is True
		mock_conf.save.assert_called_once()

	def test_exit_survives_config_error(self, presenter, mock_view, mock_conf):
		"""A configuration write failure does not prevent closing."""
		mock_view.get_case_sensitive.return_value = False
		mock_conf.save.side_effect = PermissionError("read-only")
		presenter.on_exit()
		mock_view.close.assert_called_once()

	def test_exit_waits_for_search(self, presenter, search_presenter):
		"""A running search is given a moment to finish."""
		search_presenter.search_task.is_running.return_value = True
		presenter.on_exit()
		search_presenter.search_task.join.assert_called_once_with(1.0)

	def test_exit_closes_search_before_view(
		self, presenter, mock_view, search_presenter
	):
		"""Search results are shut off before the view is destroyed."""
		manager = MagicMock()
		manager.attach_mock(search_presenter.close, "search_close")
		manager.attach_mock(mock_view.close, "view_close")
		presenter.on_exit()
		assert [c[0] for c in manager.mock_calls] == [
			"search_close",
			"view_close",
		]
