"""Presenter for the search bar of the main frame.

Owns the occurrence selector and the background search task, leaving the
view responsible only for widget management.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Callable, Optional

from editpad.occurrence_selector import OccurrenceSelector
from editpad.search_task import SearchTask
from editpad.services.search_service import Occurrence, PatternError

if TYPE_CHECKING:
	from editpad.views.main_frame import MainFrame

log = logging.getLogger(__name__)


def to_control_position(
	text: str,
	position: int,
	platform: str = sys.platform,
	rich_text: bool = False,
) -> int:
	"""Convert a code point offset in *text* to a native text control position.

	On Windows the native control counts characters outside the Basic
	Multilingual Plane as two UTF-16 units. A plain multiline control also
	stores line breaks as ``\\r\\n``, so each of them shifts the following
	positions by one; a RichEdit control (``wx.TE_RICH``/``wx.TE_RICH2``)
	keeps a single character per line break. Other platforms use code
	point positions directly.

	Args:
		text: The text the offset refers to.
		position: The code point offset.
		platform: The platform identifier, as in ``sys.platform``.
		rich_text: Whether the control is a RichEdit control.

	Returns:
		The position to hand to the text control.
	"""
	if platform != "win32":
		return position
	relevant_text = text[:position]
	shift = sum(1 for c in relevant_text if ord(c) >= 0x10000)
	if not rich_text:
		shift += relevant_text.count("\n")
	return position + shift


class SearchTargetAdapter:
	"""Adapter that exposes a wx.TextCtrl as a search target.

	Wraps a wx.TextCtrl (or compatible) to provide a plain Python
	interface usable by SearchPresenter without importing wx.
	"""

	def __init__(
		self, ctrl, platform: str = sys.platform, rich_text: bool = False
	) -> None:
		"""Initialise the adapter.

		Args:
			ctrl: A wx.TextCtrl or compatible widget.
			platform: The platform identifier used for position mapping.
			rich_text: Whether *ctrl* was created with a RichEdit style.
		"""
		self._ctrl = ctrl
		self._platform = platform
		self._rich_text = rich_text

	def get_text(self) -> str:
		"""Return the full text content of the control.

		Returns:
			The text content.
		"""
		return self._ctrl.GetValue()

	def set_selection(self, start: int, end: int) -> None:
		"""Select the given code point range and focus the control.

		The span may come from a search over an older version of the text,
		so it is clamped to the current text rather than validated.

		Args:
			start: Start offset of the selection.
			end: End offset of the selection.
		"""
		text = self.get_text()
		text_length = len(text)
		start = min(max(start, 0), text_length)
		end = min(max(end, start), text_length)
		ctrl_start = to_control_position(
			text, start, self._platform, self._rich_text
		)
		ctrl_end = to_control_position(
			text, end, self._platform, self._rich_text
		)
		self._ctrl.SetInsertionPoint(ctrl_end)
		self._ctrl.SetSelection(ctrl_start, ctrl_end)
		self._ctrl.SetFocus()


class SearchPresenter:
	"""Presenter for the search bar.

	Runs searches in the background and applies their results to the
	occurrence selector on the interaction thread.

	Attributes:
		view: The main frame view (may be None until wired).
		target: The SearchTargetAdapter wrapping the searched text control.
		selector: The occurrences of the last search and the selected one.
		search_task: Runs the searches off the interaction thread.
		closed: True once the view is gone; late results are then dropped.
	"""

	def __init__(
		self,
		view: Optional[MainFrame],
		target: SearchTargetAdapter,
		call_after: Optional[Callable[..., None]] = None,
	) -> None:
		"""Initialise the presenter.

		Args:
			view: The main frame (may be set later via assignment).
			target: Adapter wrapping the text control being searched.
			call_after: Optional scheduler matching ``wx.CallAfter``; defaults to ``wx.CallAfter``.
		"""
		self.view = view
		self.target = target
		self.selector = OccurrenceSelector(on_select=target.set_selection)
		self.search_task = SearchTask(
			on_done=self.on_search_done,
			on_error=self.on_search_failed,
			call_after=call_after,
		)
		self.closed = False

	def close(self) -> None:
		"""Stop applying search results; the view is being destroyed."""
		self.closed = True

	def on_start_search(self, event=None) -> None:
		"""Start a search using the current view state.

		Args:
			event: Optional wx event (ignored).
		"""
		pattern = self.view.get_search_text()
		use_regex = self.view.get_use_regex()
		case_sensitive = self.view.get_case_sensitive()
		log.debug(
			"Starting search for %r (regex=%s, case_sensitive=%s)",
			pattern,
			use_regex,
			case_sensitive,
		)
		self.search_task.start(
			self.target.get_text(), pattern, use_regex, case_sensitive
		)

	def on_search_done(
		self, occurrences: list[Occurrence], pattern: str
	) -> None:
		"""Apply the result of a finished search.

		Args:
			occurrences: The occurrences found, in match order.
			pattern: The pattern the search ran with.
		"""
		if self.closed:
			log.debug("Ignoring result for %r after close", pattern)
			return
		self.selector.reset(occurrences)
		if self.selector.is_empty:
			self.view.set_status_text("")
			self.view.show_not_found(pattern)
			return
		self.view.set_status_text(
			f"{len(self.selector)} match(es) for \"{pattern}\""
		)

	def on_search_failed(self, error: Exception) -> None:
		"""Clear the results of a failed search and report the error.

		Args:
			error: The exception raised by the search.
		"""
		if self.closed:
			log.debug("Ignoring search failure after close: %s", error)
			return
		self.selector.clear()
		self.view.set_status_text("")
		if isinstance(error, PatternError):
			log.warning("Invalid regular expression: %s", error)
			self.view.show_error(f"Invalid regular expression: {error}")
		else:
			log.error("Search failed: %s", error)
			self.view.show_error(f"Unable to search the text: {error}")

	def on_next(self, event=None) -> None:
		"""Select the next occurrence.

		Args:
			event: Optional wx event (ignored).
		"""
		self.selector.select_next()

	def on_previous(self, event=None) -> None:
		"""Select the previous occurrence.

		Args:
			event: Optional wx event (ignored).
		"""
		self.selector.select_previous()

	def on_document_replaced(self) -> None:
		"""Forget the occurrences of a document that is no longer shown."""
		self.selector.clear()
		if self.view is not None:
			self.view.set_status_text("")
