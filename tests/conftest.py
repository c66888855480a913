"""Common test fixtures for editpad."""

import logging
from unittest.mock import MagicMock

import pytest

from editpad.services.search_service import Occurrence


def run_now(func, *args):
	"""Scheduler running the callback immediately on the calling thread."""
	func(*args)


@pytest.fixture
def call_after():
	"""Return a synchronous replacement for wx.CallAfter."""
	return run_now


@pytest.fixture
def occurrences():
	"""Return the occurrences of "ab" in "ababab"."""
	return [Occurrence(0, 2), Occurrence(2, 4), Occurrence(4, 6)]


@pytest.fixture
def on_select():
	"""Return a mock selection callback."""
	return MagicMock()


@pytest.fixture
def restore_logging():
	"""Restore the root logger level after the test."""
	root = logging.getLogger()
	level = root.level
	yield root
	root.setLevel(level)
