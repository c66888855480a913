"""wx views of the editor."""
