# config.py

"""
Configuration settings for the petcare project.
"""

from typing import Optional
from pathlib import Path
import os

from dotenv import load_dotenv

load_dotenv()

class Config:
    """
    Centralized configuration management.

    Class attributes hold the simulation constants; the get_* classmethods
    read runtime settings from the environment (a .env file is loaded on
    import), falling back to the defaults below.
    """

    # Initial needs (lower is better)
    INITIAL_HUNGER = 20
    INITIAL_HYGIENE = 60
    INITIAL_SOCIAL = 60
    INITIAL_SLEEP = 15

    # Need bounds
    NEED_MIN = 0
    NEED_MAX = 100

    # Content/distressed mood evaluation: DISTRESS_COUNT needs above DISTRESS_THRESHOLD
    DISTRESS_THRESHOLD = 60
    DISTRESS_COUNT = 2

    # Anxious mood evaluation: CALM_COUNT needs below CALM_THRESHOLD
    CALM_THRESHOLD = 50
    CALM_COUNT = 3

    # Anxiety onset, chances out of 100
    ANXIETY_TRIGGER_THRESHOLD = 60
    ANXIETY_CHANCE_STRESSED = 50
    ANXIETY_CHANCE_BASELINE = 20

    # Anxious strategy scales the content table by this factor
    ANXIOUS_ACTION_SCALE = 0.75
    COMFORT_SOCIAL_RELIEF = 30

    # Death when both hunger and sleep exceed this
    DEATH_THRESHOLD = 95

    # Driver settings
    DEFAULT_TICK_INTERVAL = 2.0  # seconds
    MESSAGE_LOG_SIZE = 50

    @classmethod
    def get_tick_interval(cls) -> float:
        """Seconds between automatic ticks."""
        return float(os.getenv("PET_TICK_INTERVAL", str(cls.DEFAULT_TICK_INTERVAL)))

    @classmethod
    def get_auto_tick(cls) -> bool:
        """Whether the driver advances time on its own."""
        return os.getenv("PET_AUTO_TICK", "True").lower() in ("true", "1", "yes")

    @classmethod
    def get_random_seed(cls) -> Optional[int]:
        """Seed for the system random source, None for an unseeded run."""
        seed = os.getenv("PET_RANDOM_SEED")
        if seed is None or seed.strip() == "":
            return None
        return int(seed)

    @classmethod
    def get_log_dir(cls) -> Path:
        """Base directory for log files."""
        return Path(os.getenv("PET_LOG_DIR", "data/logs"))
