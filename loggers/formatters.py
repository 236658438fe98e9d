"""
Formatters for the different log streams.
Keeps the layout consistent across log files.
"""

import logging

class PetFormatter(logging.Formatter):
    """Formatter for pet state changes and system events."""

    def format(self, record):
        timestamp = self.formatTime(record)
        return (
            f"[{timestamp}] {record.levelname:8} "
            f"{record.name.split('.')[-1]:8} | {record.getMessage()}"
        )

class EventFormatter(logging.Formatter):
    """Formatter for the event dispatcher."""

    def format(self, record):
        timestamp = self.formatTime(record)
        return f"[{timestamp}] {record.levelname:8} EVENT | {record.getMessage()}"

class ConsoleFormatter(logging.Formatter):
    """Minimal formatter for console output."""

    def format(self, record):
        if record.levelno >= logging.WARNING:
            return f"! {record.getMessage()}"
        return record.getMessage()
