"""taskmeter - time-weighted progress tracking for multi-project tasks."""

__version__ = "0.1.0"
