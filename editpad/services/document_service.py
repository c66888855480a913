"""Service layer for reading and writing document files."""

from __future__ import annotations

import logging
import os

from upath import UPath

from editpad.consts import DEFAULT_ENCODING

log = logging.getLogger(__name__)


class DocumentError(OSError):
	"""Raised when a document cannot be read or written.

	Attributes:
		path: The path of the document.
	"""

	def __init__(self, path: UPath, msg: str) -> None:
		"""Initialise the error.

		Args:
			path: The path of the document.
			msg: A human-readable description of the failure.
		"""
		self.path = path
		super().__init__(msg)


class DocumentService:
	"""Stateless helpers to load and store document text."""

	@staticmethod
	def read(
		path: str | os.PathLike, encoding: str = DEFAULT_ENCODING
	) -> str:
		"""Read the whole text of a document.

		Args:
			path: The path of the document.
			encoding: The text encoding of the file.

		Returns:
			The document text.

		Raises:
			DocumentError: If the file cannot be read or decoded.
		"""
		doc_path = UPath(path)
		log.debug("Reading document %s (%s)", doc_path, encoding)
		try:
			return doc_path.read_text(encoding=encoding)
		except (OSError, UnicodeDecodeError, LookupError) as e:
			raise DocumentError(
				doc_path, f"Unable to load file {doc_path}: {e}"
			) from e

	@staticmethod
	def write(
		path: str | os.PathLike, text: str, encoding: str = DEFAULT_ENCODING
	) -> None:
		"""Write the whole text of a document, replacing the file.

		Args:
			path: The path of the document.
			text: The document text.
			encoding: The text encoding of the file.

		Raises:
			DocumentError: If the file cannot be written or encoded.
		"""
		doc_path = UPath(path)
		log.debug("Writing document %s (%s)", doc_path, encoding)
		try:
			doc_path.write_text(text, encoding=encoding)
		except (OSError, UnicodeEncodeError, LookupError) as e:
			raise DocumentError(
				doc_path, f"Unable to save file {doc_path}: {e}"
			) from e
