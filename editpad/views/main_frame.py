"""Main application frame for editpad.

This is the *view* layer: it creates menus, widgets, and handles pure-UI
events. All document and search logic is delegated to the presenters.
"""

import logging
from typing import Optional

import wx

import editpad.config as config
from editpad.consts import FILE_DIALOG_WILDCARD
from editpad.presenters.main_frame_presenter import MainFramePresenter
from editpad.presenters.search_presenter import (
	SearchPresenter,
	SearchTargetAdapter,
)

from .view_mixins import ErrorDisplayMixin

log = logging.getLogger(__name__)

# size of the toolbar button bitmaps
ICON_SIZE = (16, 16)

# plain multiline control: on Windows it stores line breaks as \r\n
TEXT_AREA_STYLE = wx.TE_MULTILINE | wx.HSCROLL
TEXT_AREA_RICH_TEXT = bool(TEXT_AREA_STYLE & (wx.TE_RICH | wx.TE_RICH2))


class MainFrame(wx.Frame, ErrorDisplayMixin):
	"""Main application frame for editpad.

	Attributes:
		conf: The application configuration.
		presenter: The MainFramePresenter instance.
		search_presenter: The SearchPresenter instance.
	"""

	def __init__(self, *args, **kwargs):
		"""Initialize the main application frame.

		Args:
			args: Variable length argument list passed to wx.Frame.
			kwargs: Keyword arguments with special handling for:
				conf: The editpad configuration to use.
				open_file: Path to a document to open on startup.
		"""
		self.conf: config.EditpadConfig = kwargs.pop("conf", config.conf())
		open_file = kwargs.pop("open_file", None)
		super(MainFrame, self).__init__(*args, **kwargs)
		log.debug("Initializing main frame")

		self.init_ui()
		self.search_presenter = SearchPresenter(
			self,
			SearchTargetAdapter(self.text_area, rich_text=TEXT_AREA_RICH_TEXT),
		)
		self.presenter = MainFramePresenter(
			self, self.conf, self.search_presenter
		)
		self.bind_events()
		self.SetSize(
			self.conf.editor.window_width, self.conf.editor.window_height
		)
		self.set_title(self.presenter.title)
		if open_file:
			self.presenter.open_file(open_file)

	def init_ui(self):
		"""Initialize the menus and widgets of the frame."""
		menu_bar = wx.MenuBar()

		file_menu = wx.Menu()
		self.open_item = file_menu.Append(wx.ID_OPEN, "&Open...\tCtrl+O")
		self.save_item = file_menu.Append(wx.ID_SAVE, "&Save...\tCtrl+S")
		file_menu.AppendSeparator()
		self.exit_item = file_menu.Append(wx.ID_EXIT, "E&xit")
		menu_bar.Append(file_menu, "&File")

		search_menu = wx.Menu()
		self.start_search_item = search_menu.Append(
			wx.ID_ANY, "&Start search\tCtrl+F"
		)
		self.previous_match_item = search_menu.Append(
			wx.ID_ANY, "&Previous match\tShift+F3"
		)
		self.next_match_item = search_menu.Append(
			wx.ID_ANY, "&Next match\tF3"
		)
		search_menu.AppendSeparator()
		self.use_regex_item = search_menu.AppendCheckItem(
			wx.ID_ANY, "Use &regular expressions"
		)
		self.case_sensitive_item = search_menu.AppendCheckItem(
			wx.ID_ANY, "&Case sensitive"
		)
		menu_bar.Append(search_menu, "&Search")
		self.SetMenuBar(menu_bar)

		panel = wx.Panel(self)
		main_sizer = wx.BoxSizer(wx.VERTICAL)
		bar_sizer = wx.BoxSizer(wx.HORIZONTAL)

		self.open_btn = self._create_icon_button(panel, wx.ART_FILE_OPEN, "Open")
		self.save_btn = self._create_icon_button(panel, wx.ART_FILE_SAVE, "Save")
		self.search_field = wx.TextCtrl(panel, style=wx.TE_PROCESS_ENTER)
		self.start_search_btn = self._create_icon_button(
			panel, wx.ART_FIND, "Start search"
		)
		self.previous_match_btn = self._create_icon_button(
			panel, wx.ART_GO_BACK, "Previous match"
		)
		self.next_match_btn = self._create_icon_button(
			panel, wx.ART_GO_FORWARD, "Next match"
		)
		self.use_regex_checkbox = wx.CheckBox(panel, label="Use regex")
		self.case_sensitive_checkbox = wx.CheckBox(panel, label="Match case")

		for ctrl in (self.open_btn, self.save_btn):
			bar_sizer.Add(ctrl, flag=wx.ALL, border=5)
		bar_sizer.Add(
			self.search_field, proportion=1, flag=wx.ALL | wx.EXPAND, border=5
		)
		for ctrl in (
			self.start_search_btn,
			self.previous_match_btn,
			self.next_match_btn,
			self.use_regex_checkbox,
			self.case_sensitive_checkbox,
		):
			bar_sizer.Add(ctrl, flag=wx.ALL | wx.ALIGN_CENTER_VERTICAL, border=5)
		main_sizer.Add(bar_sizer, flag=wx.EXPAND)

		self.text_area = wx.TextCtrl(panel, style=TEXT_AREA_STYLE)
		main_sizer.Add(
			self.text_area, proportion=1, flag=wx.ALL | wx.EXPAND, border=5
		)
		panel.SetSizer(main_sizer)

		self.CreateStatusBar()
		self.set_use_regex(self.conf.search.use_regex)
		self.set_case_sensitive(self.conf.search.case_sensitive)

	def _create_icon_button(
		self, parent: wx.Window, art_id: str, tooltip: str
	) -> wx.BitmapButton:
		bitmap = wx.ArtProvider.GetBitmap(art_id, wx.ART_BUTTON, ICON_SIZE)
		button = wx.BitmapButton(parent, bitmap=bitmap)
		button.SetToolTip(tooltip)
		button.SetName(tooltip)
		return button

	def bind_events(self):
		"""Bind menu items and buttons to the presenters."""
		self.open_btn.Bind(wx.EVT_BUTTON, self.presenter.on_open)
		self.save_btn.Bind(wx.EVT_BUTTON, self.presenter.on_save)
		self.start_search_btn.Bind(
			wx.EVT_BUTTON, self.search_presenter.on_start_search
		)
		self.search_field.Bind(
			wx.EVT_TEXT_ENTER, self.search_presenter.on_start_search
		)
		self.previous_match_btn.Bind(
			wx.EVT_BUTTON, self.search_presenter.on_previous
		)
		self.next_match_btn.Bind(wx.EVT_BUTTON, self.search_presenter.on_next)
		self.use_regex_checkbox.Bind(
			wx.EVT_CHECKBOX,
			lambda e: self.use_regex_item.Check(e.IsChecked()),
		)
		self.case_sensitive_checkbox.Bind(
			wx.EVT_CHECKBOX,
			lambda e: self.case_sensitive_item.Check(e.IsChecked()),
		)

		self.Bind(wx.EVT_MENU, self.presenter.on_open, self.open_item)
		self.Bind(wx.EVT_MENU, self.presenter.on_save, self.save_item)
		self.Bind(wx.EVT_MENU, self.presenter.on_exit, self.exit_item)
		self.Bind(
			wx.EVT_MENU,
			self.search_presenter.on_start_search,
			self.start_search_item,
		)
		self.Bind(
			wx.EVT_MENU,
			self.search_presenter.on_previous,
			self.previous_match_item,
		)
		self.Bind(
			wx.EVT_MENU, self.search_presenter.on_next, self.next_match_item
		)
		self.Bind(
			wx.EVT_MENU,
			lambda e: self.set_use_regex(self.use_regex_item.IsChecked()),
			self.use_regex_item,
		)
		self.Bind(
			wx.EVT_MENU,
			lambda e: self.set_case_sensitive(
				self.case_sensitive_item.IsChecked()
			),
			self.case_sensitive_item,
		)
		self.Bind(wx.EVT_CLOSE, self.on_close)

	def on_close(self, event: wx.CloseEvent):
		"""Route the window close button through the exit flow.

		Args:
			event: The close event.
		"""
		self.presenter.on_exit()

	# -- View interface used by the presenters --

	def get_text(self) -> str:
		"""Return the document text."""
		return self.text_area.GetValue()

	def set_text(self, text: str):
		"""Replace the document text and move the caret to the start."""
		self.text_area.SetValue(text)
		self.text_area.SetInsertionPoint(0)

	def set_title(self, title: str):
		"""Set the window title."""
		self.SetTitle(title)

	def set_status_text(self, text: str):
		"""Show a message in the status bar."""
		self.SetStatusText(text)

	def get_search_text(self) -> str:
		"""Return the pattern typed in the search field."""
		return self.search_field.GetValue()

	def get_use_regex(self) -> bool:
		"""Return whether the pattern is a regular expression."""
		return self.use_regex_checkbox.GetValue()

	def set_use_regex(self, value: bool):
		"""Sync the regex checkbox and menu item."""
		self.use_regex_checkbox.SetValue(value)
		self.use_regex_item.Check(value)

	def get_case_sensitive(self) -> bool:
		"""Return whether the search is case-sensitive."""
		return self.case_sensitive_checkbox.GetValue()

	def set_case_sensitive(self, value: bool):
		"""Sync the case-sensitivity checkbox and menu item."""
		self.case_sensitive_checkbox.SetValue(value)
		self.case_sensitive_item.Check(value)

	def show_not_found(self, pattern: str):
		"""Tell the user that the pattern has no match."""
		self.show_info(f'"{pattern}" not found.', "Search Result")

	def ask_open_path(self) -> Optional[str]:
		"""Ask for a document to open.

		Returns:
			The selected path, or None if cancelled.
		"""
		with wx.FileDialog(
			self,
			message="Open",
			wildcard=FILE_DIALOG_WILDCARD,
			style=wx.FD_OPEN | wx.FD_FILE_MUST_EXIST,
		) as dlg:
			if dlg.ShowModal() != wx.ID_OK:
				return None
			return dlg.GetPath()

	def ask_save_path(self, default_path: Optional[str] = None) -> Optional[str]:
		"""Ask where to save the document.

		Args:
			default_path: The path proposed in the dialog.

		Returns:
			The selected path, or None if cancelled.
		"""
		with wx.FileDialog(
			self,
			message="Save",
			wildcard=FILE_DIALOG_WILDCARD,
			style=wx.FD_SAVE | wx.FD_OVERWRITE_PROMPT,
		) as dlg:
			if default_path:
				dlg.SetPath(default_path)
			if dlg.ShowModal() != wx.ID_OK:
				return None
			return dlg.GetPath()

	def close(self):
		"""Destroy the frame, ending the main loop."""
		log.debug("Closing main frame")
		self.Destroy()
