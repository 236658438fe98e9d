# pet/modules/needs/needs_manager.py

from typing import Dict
from .need import Need
from config import Config

NEED_NAMES = ('hunger', 'hygiene', 'social', 'sleep')

class NeedsManager:
    """
    Holds the pet's four needs and keeps each within its bounds.
    """

    def __init__(self, hunger=Config.INITIAL_HUNGER, hygiene=Config.INITIAL_HYGIENE,
                 social=Config.INITIAL_SOCIAL, sleep=Config.INITIAL_SLEEP):
        """
        Initializes the NeedsManager.

        Args:
            hunger (int, optional): Initial hunger.
            hygiene (int, optional): Initial hygiene.
            social (int, optional): Initial social.
            sleep (int, optional): Initial sleep.
        """
        self.needs: Dict[str, Need] = {
            'hunger': Need('hunger', hunger),
            'hygiene': Need('hygiene', hygiene),
            'social': Need('social', social),
            'sleep': Need('sleep', sleep),
        }

    def _get(self, need_name) -> Need:
        need = self.needs.get(need_name)
        if need is None:
            raise ValueError(f"Need '{need_name}' does not exist.")
        return need

    def alter_need(self, need_name, amount):
        """
        Alters a specific need by a given amount.

        Args:
            need_name (str): The name of the need to alter.
            amount (int): The amount to change the need's value by.
        """
        self._get(need_name).alter(amount)

    def set_need_value(self, need_name, value):
        """Sets a need outright, clamped into range."""
        self._get(need_name).value = value

    def get_need_value(self, need_name) -> int:
        """
        Retrieves the current value of a specific need.

        Args:
            need_name (str): The name of the need.

        Returns:
            int: The current value of the need.
        """
        return self._get(need_name).value

    def count_above(self, threshold) -> int:
        """Number of needs strictly above threshold."""
        return sum(1 for need in self.needs.values() if need.value > threshold)

    def count_below(self, threshold) -> int:
        """Number of needs strictly below threshold."""
        return sum(1 for need in self.needs.values() if need.value < threshold)

    def as_dict(self) -> Dict[str, int]:
        return {name: need.value for name, need in self.needs.items()}

    @property
    def hunger(self):
        return self.needs['hunger'].value

    @hunger.setter
    def hunger(self, value):
        self.needs['hunger'].value = value

    @property
    def hygiene(self):
        return self.needs['hygiene'].value

    @hygiene.setter
    def hygiene(self, value):
        self.needs['hygiene'].value = value

    @property
    def social(self):
        return self.needs['social'].value

    @social.setter
    def social(self, value):
        self.needs['social'].value = value

    @property
    def sleep(self):
        return self.needs['sleep'].value

    @sleep.setter
    def sleep(self, value):
        self.needs['sleep'].value = value
