"""Output writers for clip and section results."""
