"""
Specialized loggers for the petcare subsystems.
Provides clean interfaces for specific logging needs.
"""

import logging
import json
from typing import Any, Dict, Optional

class SystemLogger:
    """Logger for driver and runtime operations."""

    @staticmethod
    def error(message: str):
        """Log error-level system events."""
        logger = logging.getLogger('petcare.system')
        logger.error(f"System Error: {message}")

    @staticmethod
    def warning(message: str):
        """Log warning-level system events."""
        logger = logging.getLogger('petcare.system')
        logger.warning(f"System Warning: {message}")

    @staticmethod
    def debug(message: str):
        """Log debug-level system events."""
        logger = logging.getLogger('petcare.system')
        logger.debug(f"System Debug: {message}")

    @staticmethod
    def info(message: str):
        """Log info-level system events."""
        logger = logging.getLogger('petcare.system')
        logger.info(f"System Info: {message}")

    @staticmethod
    def log_command(raw_input: str, error: Optional[str] = None):
        """Log a driver command and whether it was accepted."""
        logger = logging.getLogger('petcare.system')
        if error:
            logger.warning(f"Command rejected: {raw_input!r} ({error})")
        else:
            logger.debug(f"Command accepted: {raw_input!r}")

class PetLogger:
    """Logger for pet state changes."""

    @staticmethod
    def log_state_change(component: str, old_value: Any, new_value: Any):
        logger = logging.getLogger('petcare.pet')
        logger.debug(
            f"State Change: {component}\n"
            f"  From: {old_value}\n"
            f"  To:   {new_value}"
        )
        logger.info(f"Pet: {component} changed to {new_value}")

    @staticmethod
    def log_action(action: str, needs: Dict[str, int]):
        logger = logging.getLogger('petcare.pet')
        logger.debug(f"Action: {action}\nNeeds: {json.dumps(needs)}")

    @staticmethod
    def log_tick(needs: Dict[str, int]):
        logger = logging.getLogger('petcare.pet')
        logger.debug(f"Tick\nNeeds: {json.dumps(needs)}")

    @staticmethod
    def log_death(needs: Dict[str, int]):
        logger = logging.getLogger('petcare.pet')
        logger.warning(f"Pet died with needs {json.dumps(needs)}")

    @staticmethod
    def debug(message: str):
        logger = logging.getLogger('petcare.pet')
        logger.debug(f"Pet Debug: {message}")

class EventLogger:
    """Logger for event system operations."""

    @staticmethod
    def error(message: str):
        logger = logging.getLogger('petcare.events')
        logger.error(f"Event Error: {message}")

    @staticmethod
    def debug(message: str):
        logger = logging.getLogger('petcare.events')
        logger.debug(f"Event Debug: {message}")

    @staticmethod
    def log_event_dispatch(event_type: str, data: Any = None, metadata: Optional[Dict] = None):
        logger = logging.getLogger('petcare.events')
        components = [f"Event Dispatched: {event_type}"]
        if data is not None:
            if isinstance(data, dict):
                data_str = json.dumps({k: str(v) for k, v in data.items()}, indent=2)
                components.append(f"Data:\n{data_str}")
            else:
                components.append(f"Data: {data}")
        if metadata:
            meta_str = json.dumps({k: str(v) for k, v in metadata.items()}, indent=2)
            components.append(f"Metadata:\n{meta_str}")
        logger.debug('\n'.join(components))
        logger.info(f"Dispatched: {event_type}")
