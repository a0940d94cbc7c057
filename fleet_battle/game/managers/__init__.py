"""Manager classes.

- log_manager.py: Categorized, filterable log fed from the event bus
"""

from .log_manager import LogManager, LogCategory, LogLevel, LogEntry

__all__ = [
    "LogManager",
    "LogCategory",
    "LogLevel",
    "LogEntry",
]
