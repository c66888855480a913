"""Service layer for text search logic.

Provides the occurrence model, pattern compilation and match finding used by
the search presenter. Nothing here touches wx, so the functions can run on a
worker thread.
"""

from __future__ import annotations

import logging
import re
from typing import NamedTuple, Optional

from editpad.decorators import measure_time

log = logging.getLogger(__name__)


class Occurrence(NamedTuple):
	"""A single match location as a ``[start, end)`` span of code points.

	Offsets refer to the text at the moment the search ran and are never
	re-validated against later edits.
	"""

	start: int
	end: int


class PatternError(ValueError):
	"""Raised when a regular expression search pattern does not compile.

	Attributes:
		pattern: The pattern entered by the user.
		msg: The message reported by the regular expression engine.
		pos: Index in *pattern* where compilation failed, if known.
	"""

	def __init__(
		self, pattern: str, msg: str, pos: Optional[int] = None
	) -> None:
		"""Initialise the error.

		Args:
			pattern: The pattern entered by the user.
			msg: The message reported by the regular expression engine.
			pos: Index in *pattern* where compilation failed, if known.
		"""
		self.pattern = pattern
		self.msg = msg
		self.pos = pos
		if pos is None:
			super().__init__(msg)
		else:
			super().__init__(f"{msg} at position {pos}")


class SearchService:
	"""Service providing stateless search operations.

	All methods are static; no instance state is required.
	"""

	@staticmethod
	def compile_pattern(
		pattern: str, use_regex: bool, case_sensitive: bool = True
	) -> re.Pattern:
		"""Compile a search pattern.

		In literal mode the pattern is escaped so that regex metacharacters
		are matched as themselves. In regex mode it is compiled as-is.

		Args:
			pattern: The raw search text entered by the user.
			use_regex: Whether *pattern* is a regular expression.
			case_sensitive: Whether the search is case-sensitive.

		Returns:
			A compiled :class:`re.Pattern`.

		Raises:
			PatternError: If *use_regex* is set and *pattern* is invalid.
		"""
		flags = re.UNICODE
		if not case_sensitive:
			flags |= re.IGNORECASE
		if not use_regex:
			pattern_text = re.escape(pattern)
		else:
			pattern_text = pattern
		try:
			return re.compile(pattern_text, flags)
		except re.error as e:
			raise PatternError(pattern, e.msg, e.pos) from e

	@staticmethod
	@measure_time
	def find(
		text: str, pattern: str, use_regex: bool, case_sensitive: bool = True
	) -> list[Occurrence]:
		"""Find all non-overlapping occurrences of *pattern* in *text*.

		The text is scanned once from left to right. After a match the scan
		resumes at its end, or one position further when the match is empty,
		so an empty pattern matches at every offset from 0 to ``len(text)``.

		Args:
			text: The full text to search within.
			pattern: The raw search text entered by the user.
			use_regex: Whether *pattern* is a regular expression.
			case_sensitive: Whether the search is case-sensitive.

		Returns:
			The occurrences in match order; empty when nothing matches.

		Raises:
			PatternError: If *use_regex* is set and *pattern* is invalid.
		"""
		compiled = SearchService.compile_pattern(
			pattern, use_regex, case_sensitive
		)
		occurrences = []
		pos = 0
		text_length = len(text)
		while pos <= text_length:
			match = compiled.search(text, pos)
			if match is None:
				break
			start, end = match.span()
			occurrences.append(Occurrence(start, end))
			pos = end if end > start else end + 1
		log.debug(
			"Found %d occurrence(s) of %r (regex=%s)",
			len(occurrences),
			pattern,
			use_regex,
		)
		return occurrences
