from .need import Need
from .needs_manager import NeedsManager, NEED_NAMES

__all__ = ['Need', 'NeedsManager', 'NEED_NAMES']
