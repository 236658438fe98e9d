from .action import Action, parse_action

__all__ = ['Action', 'parse_action']
