"""
petcare logging system.
Provides structured logging for the pet, the driver and the event system.
"""

from .manager import LogManager
from .loggers import PetLogger, SystemLogger, EventLogger

__all__ = ['LogManager', 'PetLogger', 'SystemLogger', 'EventLogger']
