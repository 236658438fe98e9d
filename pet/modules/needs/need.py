# pet/modules/needs/need.py

from config import Config
from utils.helpers import clamp

class Need:
    """
    Represents a single need. Higher values mean a worse-off pet.
    """

    def __init__(self, name, value=0, min_value=Config.NEED_MIN, max_value=Config.NEED_MAX):
        """
        Initializes a Need instance.

        Args:
            name (str): The name of the need (e.g., 'hunger').
            value (int, optional): The initial value of the need, clamped into range.
            min_value (int, optional): The minimum value the need can have.
            max_value (int, optional): The maximum value the need can have.
        """
        self.name = name
        self.min_value = min_value
        self.max_value = max_value
        self._value = clamp(int(value), min_value, max_value)

    @property
    def value(self):
        return self._value

    @value.setter
    def value(self, new_value):
        self._value = clamp(int(new_value), self.min_value, self.max_value)

    def alter(self, amount):
        """
        Alters the need's value by a specified amount, ensuring it stays within min and max bounds.

        Args:
            amount (int): The amount to change the need's value by.
        """
        self.value = self._value + amount

    def __repr__(self):
        return f"Need({self.name!r}, {self._value})"
