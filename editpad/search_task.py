"""Background execution of searches.

A search runs on a worker thread over a snapshot of the document text so
that the interface never blocks. The worker never touches the selector or
any widget: it hands its result to a scheduler which runs the completion
callbacks on the interaction thread.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable, Optional

from editpad.services.search_service import (
	Occurrence,
	PatternError,
	SearchService,
)

log = logging.getLogger(__name__)


class SearchTask:
	"""Runs searches off the interaction thread.

	Requests may overlap. Each one runs to completion and the callbacks
	are invoked in arrival order, so the last result delivered wins.
	There is no cancellation and no timeout: a pathological regular
	expression keeps its worker busy until the scan ends.

	Attributes:
		on_done: Called with the occurrences and the pattern of a finished search.
		on_error: Called with the exception of a failed search.
		task: The worker thread of the most recent request, or None.
	"""

	def __init__(
		self,
		on_done: Callable[[list[Occurrence], str], None],
		on_error: Callable[[Exception], None],
		call_after: Optional[Callable[..., None]] = None,
	) -> None:
		"""Initialize the search task.

		Args:
			on_done: Called with the occurrences and the pattern of a finished search.
			on_error: Called with the exception of a failed search.
			call_after: Callable matching the ``wx.CallAfter`` signature ``call_after(func, *args)`` used to run callbacks on the interaction thread; defaults to ``wx.CallAfter``.
		"""
		self.on_done = on_done
		self.on_error = on_error
		self._call_after = call_after
		self.task: Optional[threading.Thread] = None

	def _deliver(self, func: Callable, *args) -> None:
		if self._call_after is not None:
			self._call_after(func, *args)
		else:
			import wx

			wx.CallAfter(func, *args)

	def start(
		self,
		text: str,
		pattern: str,
		use_regex: bool,
		case_sensitive: bool = True,
	) -> threading.Thread:
		"""Start a search in a worker thread.

		Args:
			text: Snapshot of the document text to search.
			pattern: The raw search text entered by the user.
			use_regex: Whether *pattern* is a regular expression.
			case_sensitive: Whether the search is case-sensitive.

		Returns:
			The started worker thread.
		"""
		self.task = threading.Thread(
			target=self._run,
			args=(text, pattern, use_regex, case_sensitive),
			daemon=True,
		)
		self.task.start()
		log.debug(f"Search task {self.task.ident} started")
		return self.task

	def _run(
		self, text: str, pattern: str, use_regex: bool, case_sensitive: bool
	) -> None:
		try:
			occurrences = SearchService.find(
				text, pattern, use_regex, case_sensitive
			)
		except PatternError as e:
			log.debug("Invalid search pattern %r: %s", pattern, e)
			self._deliver(self.on_error, e)
			return
		except Exception as e:
			log.error("Unexpected error during search", exc_info=True)
			self._deliver(self.on_error, e)
			return
		self._deliver(self.on_done, occurrences, pattern)

	def is_running(self) -> bool:
		"""Check if the most recent search is still running."""
		return self.task is not None and self.task.is_alive()

	def join(self, timeout: Optional[float] = None) -> None:
		"""Wait for the most recent search to finish.

		Args:
			timeout: Maximum number of seconds to wait, or None to wait forever.
		"""
		if self.task is not None:
			self.task.join(timeout)
