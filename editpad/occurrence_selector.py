"""Cyclic navigation over the occurrences found by the last search.

The selector keeps the spans of the most recent search and a cursor into
them. It never looks at the document text: it is purely an index over
spans, and every change of the active span is reported through the
``on_select`` callback.

Example:
	selector = OccurrenceSelector(on_select=target.set_selection)
	selector.reset(SearchService.find("ababab", "ab", use_regex=False))
	selector.select_next()  # selects (2, 4)
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Iterator, Optional

from editpad.services.search_service import Occurrence

log = logging.getLogger(__name__)


class OccurrenceSelector:
	"""Holds the occurrences of the last search and the selected one.

	The selector has two states. When empty the cursor is ``None`` and
	navigation does nothing. Once reset with at least one occurrence the
	cursor is always a valid index and navigation wraps around in both
	directions.

	The selector is not thread-safe; all calls must come from the
	interaction thread.

	Attributes:
		on_select: Callback receiving ``(start, end)`` of the selected span.
	"""

	def __init__(
		self, on_select: Optional[Callable[[int, int], None]] = None
	) -> None:
		"""Initialize an empty selector.

		Args:
			on_select: Callback receiving ``(start, end)`` each time the selected occurrence changes.
		"""
		self.on_select = on_select
		self._occurrences: tuple[Occurrence, ...] = ()
		self._cursor: Optional[int] = None

	@property
	def occurrences(self) -> tuple[Occurrence, ...]:
		"""The occurrences of the last search, in match order."""
		return self._occurrences

	@property
	def cursor(self) -> Optional[int]:
		"""Index of the selected occurrence, or None when empty."""
		return self._cursor

	@property
	def current(self) -> Optional[Occurrence]:
		"""The selected occurrence, or None when empty."""
		if self._cursor is None:
			return None
		return self._occurrences[self._cursor]

	@property
	def is_empty(self) -> bool:
		"""True when there is nothing to navigate."""
		return not self._occurrences

	def reset(self, occurrences: Iterable[Occurrence]) -> None:
		"""Replace the stored occurrences and select the first one.

		Args:
			occurrences: The occurrences of a new search, in match order.
		"""
		self._occurrences = tuple(Occurrence(*o) for o in occurrences)
		self._cursor = None
		log.debug("Selector reset with %d occurrence(s)", len(self))
		self.select_next()

	def clear(self) -> None:
		"""Drop all occurrences."""
		self.reset(())

	def select_next(self) -> None:
		"""Select the next occurrence, wrapping to the first after the last."""
		if not self._occurrences:
			return
		cursor = -1 if self._cursor is None else self._cursor
		self._select((cursor + 1) % len(self._occurrences))

	def select_previous(self) -> None:
		"""Select the previous occurrence, wrapping to the last before the first."""
		if not self._occurrences:
			return
		count = len(self._occurrences)
		# an unset cursor only exists transiently inside reset()
		cursor = 0 if self._cursor is None else self._cursor
		self._select((cursor - 1 + count) % count)

	def _select(self, index: int) -> None:
		self._cursor = index
		occurrence = self._occurrences[index]
		log.debug("Selecting occurrence %d: %s", index, occurrence)
		if self.on_select:
			self.on_select(occurrence.start, occurrence.end)

	def __len__(self) -> int:
		return len(self._occurrences)

	def __iter__(self) -> Iterator[Occurrence]:
		return iter(self._occurrences)

	def __getitem__(self, index: int) -> Occurrence:
		return self._occurrences[index]

	def __str__(self) -> str:
		cursor = "-" if self._cursor is None else self._cursor
		return f"OccurrenceSelector({cursor}/{len(self._occurrences)})"

	def __repr__(self) -> str:
		return self.__str__()
