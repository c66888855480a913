"""Presenters holding editor state and logic, driven by the wx views."""
