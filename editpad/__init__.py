"""editpad: a small text editor with literal and regular expression search."""
