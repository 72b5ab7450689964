"""Helpers for a terminal container-management UI: formatting, translations, tasks and logging."""

__version__ = "0.1.0"