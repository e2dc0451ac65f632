"""User-facing interfaces for taskmeter (CLI)."""
