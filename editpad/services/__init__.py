"""Service layer: search and document handling without any wx dependency."""
