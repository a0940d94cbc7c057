"""
Log management for battle messages and debugging.

This module provides centralized logging with categorization, filtering and
bounded storage. Battle events and log events arrive over the event bus; the
collected log can be exported as text or saved to a timestamped file.
"""
import os
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, auto
from typing import Optional, TYPE_CHECKING

from ...core.events import (
    BATTLE_EVENT_TYPES,
    BattleEvent,
    DebugMessage,
    EventType,
    LogMessage as LogEvent,
    LogSaveRequested,
)

if TYPE_CHECKING:
    from ...core.events import EventManager, GameEvent


class LogCategory(Enum):
    """Categories for log messages."""
    SYSTEM = auto()     # Startup, loading, saving
    BATTLE = auto()     # Combat messages
    FLEET = auto()      # Fleet building and repair
    DEBUG = auto()      # Debug messages
    WARNING = auto()    # Warning messages
    ERROR = auto()      # Error messages


CATEGORY_TAGS = {
    LogCategory.SYSTEM: "SYS",
    LogCategory.BATTLE: "BTL",
    LogCategory.FLEET: "FLT",
    LogCategory.DEBUG: "DBG",
    LogCategory.WARNING: "WRN",
    LogCategory.ERROR: "ERR",
}


class LogLevel(Enum):
    """Log levels for filtering."""
    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3


@dataclass
class LogEntry:
    """A single log message with metadata."""
    text: str
    category: LogCategory
    level: LogLevel = LogLevel.INFO
    timestamp: datetime = field(default_factory=datetime.now)

    def format(self, include_timestamp: bool = False, include_category: bool = True) -> str:
        """Format the message for display."""
        parts = []

        if include_timestamp:
            parts.append(f"[{self.timestamp.strftime('%H:%M:%S')}]")

        if include_category:
            parts.append(f"[{CATEGORY_TAGS.get(self.category, '???')}]")

        parts.append(self.text)
        return " ".join(parts)


class LogManager:
    """Collects battle and system messages with categorization and filtering."""

    def __init__(
        self,
        event_manager: "EventManager",
        max_messages: int = 1000,
        default_level: LogLevel = LogLevel.INFO
    ):
        """Initialize the log manager.

        Args:
            event_manager: Event bus to collect messages from
            max_messages: Maximum number of messages kept in the buffer
            default_level: Minimum level shown by get_messages
        """
        self.messages: deque[LogEntry] = deque(maxlen=max_messages)
        self.log_level = default_level
        self.enabled_categories = set(LogCategory)
        self.event_manager = event_manager

        self.category_levels = {
            LogCategory.DEBUG: LogLevel.DEBUG,
            LogCategory.WARNING: LogLevel.WARNING,
            LogCategory.ERROR: LogLevel.ERROR,
            # SYSTEM, BATTLE, FLEET default to INFO
        }

        self._setup_event_subscriptions()

    def _setup_event_subscriptions(self) -> None:
        for event_type in BATTLE_EVENT_TYPES:
            self.event_manager.subscribe(
                event_type,
                self._handle_battle_event,
                subscriber_name=f"LogManager.{event_type.name.lower()}"
            )

        self.event_manager.subscribe(
            EventType.LOG_MESSAGE,
            self._handle_log_message_event,
            subscriber_name="LogManager.log_message"
        )
        self.event_manager.subscribe(
            EventType.DEBUG_MESSAGE,
            self._handle_debug_message_event,
            subscriber_name="LogManager.debug_message"
        )
        self.event_manager.subscribe(
            EventType.LOG_SAVE_REQUESTED,
            self._handle_log_save_request,
            subscriber_name="LogManager.log_save_request"
        )

    def _handle_battle_event(self, event: "GameEvent") -> None:
        # Separators carry no text
        if isinstance(event, BattleEvent) and event.message:
            self.battle(event.message)

    def _handle_log_message_event(self, event: "GameEvent") -> None:
        if not isinstance(event, LogEvent):
            return

        try:
            category = LogCategory[event.category.upper()]
        except (KeyError, AttributeError):
            category = LogCategory.SYSTEM

        level = event.level
        if isinstance(level, str):
            level = LogLevel.__members__.get(level.upper(), LogLevel.INFO)

        self.log(event.message, category, level)

    def _handle_debug_message_event(self, event: "GameEvent") -> None:
        if isinstance(event, DebugMessage):
            self.log(f"[{event.source}] {event.message}", LogCategory.DEBUG)

    def _handle_log_save_request(self, event: "GameEvent") -> None:
        if isinstance(event, LogSaveRequested):
            self.save_log_to_file(event.log_dir)

    def log(self, text: str, category: LogCategory = LogCategory.SYSTEM,
            level: Optional[LogLevel] = None) -> None:
        """Add a message to the log.

        Args:
            text: The message text
            category: The category of the message
            level: Message level (defaults to the category's level)
        """
        if level is None:
            level = self.category_levels.get(category, LogLevel.INFO)
        self.messages.append(LogEntry(text=text, category=category, level=level))

    # Convenience methods for common categories
    def system(self, text: str) -> None:
        """Log a system message."""
        self.log(text, LogCategory.SYSTEM)

    def battle(self, text: str) -> None:
        """Log a battle message."""
        self.log(text, LogCategory.BATTLE)

    def fleet(self, text: str) -> None:
        """Log a fleet message."""
        self.log(text, LogCategory.FLEET)

    def debug(self, text: str) -> None:
        """Log a debug message."""
        self.log(text, LogCategory.DEBUG)

    def warning(self, text: str) -> None:
        """Log a warning message."""
        self.log(text, LogCategory.WARNING)

    def error(self, text: str) -> None:
        """Log an error message."""
        self.log(text, LogCategory.ERROR)

    def get_messages(self, count: Optional[int] = None,
                     categories: Optional[set[LogCategory]] = None) -> list[LogEntry]:
        """Get recent messages, optionally filtered by category.

        Args:
            count: Maximum number of messages to return (None for all)
            categories: Set of categories to include (None for all enabled,
                filtered by the current log level)

        Returns:
            List of recent messages, oldest first
        """
        if categories:
            filtered = [msg for msg in self.messages
                        if msg.category in categories and msg.category in self.enabled_categories]
        else:
            filtered = [msg for msg in self.messages
                        if msg.category in self.enabled_categories
                        and msg.level.value >= self.log_level.value]

        if count is not None and count < len(filtered):
            return filtered[-count:]
        return filtered

    def clear(self) -> None:
        """Clear all messages from the log."""
        self.messages.clear()

    def enable_category(self, category: LogCategory) -> None:
        self.enabled_categories.add(category)

    def disable_category(self, category: LogCategory) -> None:
        self.enabled_categories.discard(category)

    def set_log_level(self, level: LogLevel) -> None:
        self.log_level = level

    def is_debug_enabled(self) -> bool:
        """Check if debug messages are currently shown."""
        return (LogCategory.DEBUG in self.enabled_categories and
                self.log_level == LogLevel.DEBUG)

    def toggle_debug(self) -> None:
        """Toggle debug message visibility."""
        if self.is_debug_enabled():
            self.disable_category(LogCategory.DEBUG)
            self.set_log_level(LogLevel.INFO)
        else:
            self.enable_category(LogCategory.DEBUG)
            self.set_log_level(LogLevel.DEBUG)

    def export_text(self, include_timestamp: bool = True) -> str:
        """Render every buffered message, ignoring the current filters."""
        return "\n".join(
            msg.format(include_timestamp=include_timestamp, include_category=True)
            for msg in self.messages
        )

    def save_log_to_file(self, log_dir: str = "logs") -> bool:
        """Save all messages to a timestamped log file.

        Args:
            log_dir: Directory the file is written to (created if missing)

        Returns:
            True if save was successful, False otherwise
        """
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        filepath = os.path.join(log_dir, f"log_{timestamp}.log")

        try:
            os.makedirs(log_dir, exist_ok=True)

            with open(filepath, 'w', encoding='utf-8') as f:
                f.write("Fleet Battle Simulator - Battle Log\n")
                f.write(f"Generated: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}\n")
                f.write("=" * 60 + "\n\n")

                if not self.messages:
                    f.write("No messages to save.\n")
                else:
                    # All messages, including debug level, regardless of filters
                    for msg in self.messages:
                        timestamp_str = msg.timestamp.strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
                        f.write(f"[{timestamp_str}] [{msg.category.name}] {msg.text}\n")
        except OSError as e:
            self.error(f"Failed to save log file: {e}")
            return False

        self.system(f"Battle log saved to {filepath}")
        return True
