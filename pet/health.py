# pet/health.py

from typing import Dict, Any
from pydantic import BaseModel, ConfigDict, Field

from pet.modules.moods.mood import Mood

class HealthSnapshot(BaseModel):
    """
    Read-only view of the pet at the moment it was taken.
    """
    model_config = ConfigDict(frozen=True)

    mood: Mood
    dead: bool
    hunger: int = Field(ge=0, le=100)
    hygiene: int = Field(ge=0, le=100)
    social: int = Field(ge=0, le=100)
    sleep: int = Field(ge=0, le=100)

    @property
    def alive(self) -> bool:
        return not self.dead

    def needs(self) -> Dict[str, int]:
        return {
            'hunger': self.hunger,
            'hygiene': self.hygiene,
            'social': self.social,
            'sleep': self.sleep,
        }

    def to_dict(self) -> Dict[str, Any]:
        return {'mood': self.mood.value, 'dead': self.dead, **self.needs()}

    def __str__(self):
        return (
            f"HealthStatus{{mood = {self.mood.name}, alive = {str(self.alive).lower()}, "
            f"hunger = {self.hunger}, hygiene = {self.hygiene}, "
            f"social = {self.social}, sleep = {self.sleep}}}"
        )
