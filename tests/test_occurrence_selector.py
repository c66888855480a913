"""Tests for the OccurrenceSelector class."""

from unittest.mock import call

import pytest

from editpad.occurrence_selector import OccurrenceSelector
from editpad.services.search_service import Occurrence, SearchService


@pytest.fixture
def selector(on_select):
	"""Return an empty selector wired to a mock callback."""
	return OccurrenceSelector(on_select=on_select)


@pytest.fixture
def active_selector(selector, occurrences, on_select):
	"""Return a selector reset with three occurrences, callback history cleared."""
	selector.reset(occurrences)
	on_select.reset_mock()
	return selector


class TestInitialState:
	"""Tests for a fresh selector."""

	def test_empty(self, selector):
		"""A new selector has no occurrences and no cursor."""
		assert selector.is_empty
		assert selector.cursor is None
		assert selector.current is None
		assert len(selector) == 0

	def test_navigation_is_noop(self, selector, on_select):
		"""Navigation on an empty selector emits nothing."""
		selector.select_next()
		selector.select_previous()
		on_select.assert_not_called()
		assert selector.cursor is None

	def test_without_callback(self, occurrences):
		"""A selector without callback still tracks the cursor."""
		selector = OccurrenceSelector()
		selector.reset(occurrences)
		selector.select_next()
		assert selector.cursor == 1


class TestReset:
	"""Tests for OccurrenceSelector.reset."""

	def test_selects_first(self, selector, occurrences, on_select):
		"""Reset with occurrences auto-selects index 0."""
		selector.reset(occurrences)
		assert selector.cursor == 0
		assert selector.current == (0, 2)
		on_select.assert_called_once_with(0, 2)

	def test_replaces_previous_results(self, active_selector, on_select):
		"""A new reset discards the old occurrences and cursor."""
		active_selector.select_next()
		active_selector.reset([Occurrence(10, 12)])
		assert active_selector.occurrences == ((10, 12),)
		assert active_selector.cursor == 0
		on_select.assert_called_with(10, 12)

	def test_empty_sequence(self, active_selector, on_select):
		"""Reset with no occurrences empties the selector silently."""
		active_selector.reset([])
		assert active_selector.is_empty
		assert active_selector.cursor is None
		on_select.assert_not_called()

	def test_accepts_plain_tuples(self, selector, on_select):
		"""Plain (start, end) pairs are stored as Occurrence."""
		selector.reset([(3, 5)])
		assert isinstance(selector[0], Occurrence)
		on_select.assert_called_once_with(3, 5)

	def test_copies_input(self, selector, occurrences):
		"""Mutating the input list does not change the selector."""
		selector.reset(occurrences)
		occurrences.clear()
		assert len(selector) == 3

	def test_accepts_generator(self, selector, on_select):
		"""Any iterable of spans is accepted."""
		selector.reset(Occurrence(i, i + 1) for i in range(3))
		assert len(selector) == 3
		on_select.assert_called_once_with(0, 1)


class TestNavigation:
	"""Tests for cyclic navigation."""

	def test_next(self, active_selector, on_select):
		"""select_next moves forward and emits the span."""
		active_selector.select_next()
		assert active_selector.cursor == 1
		on_select.assert_called_once_with(2, 4)

	def test_full_cycle(self, active_selector):
		"""Calling select_next count times returns to index 0."""
		for _ in range(len(active_selector)):
			active_selector.select_next()
		assert active_selector.cursor == 0

	def test_previous_wraps_to_last(self, active_selector, on_select):
		"""select_previous at index 0 wraps to the last occurrence."""
		active_selector.select_previous()
		assert active_selector.cursor == 2
		on_select.assert_called_once_with(4, 6)

	def test_previous_after_next(self, active_selector):
		"""Moving forward then back returns to the same occurrence."""
		active_selector.select_next()
		active_selector.select_previous()
		assert active_selector.cursor == 0

	def test_single_occurrence(self, selector, on_select):
		"""With one occurrence, navigation keeps re-selecting it."""
		selector.reset([Occurrence(1, 2)])
		selector.select_next()
		selector.select_previous()
		assert selector.cursor == 0
		assert on_select.call_args_list == [call(1, 2)] * 3

	def test_scenario(self, selector, on_select):
		"""Search "ab" in "ababab" and walk through the matches with wraparound."""
		selector.reset(SearchService.find("ababab", "ab", use_regex=False))
		selector.select_next()
		selector.select_next()
		selector.select_next()
		assert on_select.call_args_list == [
			call(0, 2),
			call(2, 4),
			call(4, 6),
			call(0, 2),
		]


class TestClear:
	"""Tests for OccurrenceSelector.clear."""

	def test_clear(self, active_selector, on_select):
		"""clear empties the selector and makes navigation a no-op."""
		active_selector.clear()
		active_selector.select_next()
		active_selector.select_previous()
		assert active_selector.is_empty
		on_select.assert_not_called()

	def test_clear_twice(self, active_selector, on_select):
		"""Clearing twice is the same as clearing once."""
		active_selector.clear()
		active_selector.clear()
		assert active_selector.is_empty
		assert active_selector.cursor is None
		on_select.assert_not_called()


class TestContainerProtocol:
	"""Tests for the read-only container helpers."""

	def test_iteration_and_indexing(self, active_selector, occurrences):
		"""The selector iterates and indexes its occurrences."""
		assert list(active_selector) == occurrences
		assert active_selector[1] == occurrences[1]
		assert len(active_selector) == 3

	def test_str_repr(self, selector, occurrences):
		"""String representation shows cursor and count."""
		assert str(selector) == "OccurrenceSelector(-/0)"
		selector.reset(occurrences)
		assert repr(selector) == "OccurrenceSelector(0/3)"
