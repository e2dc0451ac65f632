"""Infrastructure layer for taskmeter (storage)."""
