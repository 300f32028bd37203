"""Command execution and reply normalization."""

from .executor import DEFAULT_MAX_WATCH_RETRIES, CommandExecutor, translate_error


__all__ = ["DEFAULT_MAX_WATCH_RETRIES", "CommandExecutor", "translate_error"]
