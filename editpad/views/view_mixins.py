"""Reusable view mixins for editpad GUI components.

Provides:
- ``ErrorDisplayMixin``: unified error and information display for wx-based views.
"""

from __future__ import annotations

import wx


class ErrorDisplayMixin:
	"""Mixin for views that need standardised message display."""

	def show_error(self, message: str, title: str = None) -> None:
		"""Display a simple error dialog (wx.MessageBox).

		Args:
			message: The error message to display.
			title: Dialog title. Defaults to "Error".
		"""
		if title is None:
			title = "Error"
		wx.MessageBox(message, title, wx.OK | wx.ICON_ERROR)

	def show_info(self, message: str, title: str = None) -> None:
		"""Display a simple information dialog (wx.MessageBox).

		Args:
			message: The message to display.
			title: Dialog title. Defaults to "Information".
		"""
		if title is None:
			title = "Information"
		wx.MessageBox(message, title, wx.OK | wx.ICON_INFORMATION)
