"""
Controller between a Pet and whatever drives it.

Maps text commands onto pet calls, runs the automatic tick, and keeps a
short log of what happened to the pet. Every pet call goes through one
asyncio.Lock, so the timer and manual commands never interleave.
"""

import asyncio
from collections import deque
from dataclasses import dataclass
from typing import Deque, List, Optional

from config import Config
from core.timer import TickTimer
from event_dispatcher import Event
from loggers import SystemLogger
from pet import Pet, HealthSnapshot, Action, Mood, parse_mood

class CommandError(ValueError):
    """Raised for input that does not map onto a pet command."""

@dataclass(frozen=True)
class Command:
    """
    A parsed driver command.

    Attributes:
        name: One of COMMANDS
        count: How many times to repeat it (ticks/steps for 'a' and 'x')
        argument: Mood name for 'm'
    """
    name: str
    count: int = 1
    argument: Optional[str] = None

COMMAND_ACTIONS = {
    'p': Action.PLAY,
    'f': Action.FEED,
    'c': Action.CLEAN,
    's': Action.SLEEP,
    'h': Action.COMFORT,
}

COMMANDS = {
    'p': "Play n times",
    'f': "Feed n items of food",
    'c': "Clean n times",
    's': "Put pet to sleep n times",
    'h': "Hug n times (calms an anxious pet)",
    'a': "Advance pet state n steps",
    'x': "Execute simulation for n steps",
    'm': "Set mood (content, distressed, anxious)",
}

def parse_command(line: str) -> Command:
    """
    Parses '<letter> [n]' or 'm <mood>'.

    Raises:
        CommandError: On empty input, unknown letters, bad counts or bad moods.
    """
    parts = line.strip().split()
    if not parts:
        raise CommandError("Empty command.")

    name = parts[0].lower()
    if name not in COMMANDS:
        raise CommandError(f"Unknown command '{parts[0]}'.")

    if name == 'm':
        if len(parts) != 2:
            raise CommandError("Usage: m <mood>")
        try:
            mood = parse_mood(parts[1])
        except ValueError as e:
            raise CommandError(str(e)) from e
        return Command(name=name, argument=mood.value)

    if len(parts) > 2:
        raise CommandError(f"Usage: {name} [n]")
    count = 1
    if len(parts) == 2:
        try:
            count = int(parts[1])
        except ValueError:
            raise CommandError(f"Count must be a whole number, got '{parts[1]}'.") from None
        if count < 1:
            raise CommandError(f"Count must be at least 1, got {count}.")
    return Command(name=name, count=count)

class PetController:
    """
    Single owner of a Pet for a driver session.
    """

    def __init__(self, pet: Optional[Pet] = None, tick_interval: Optional[float] = None,
                 log_size: int = Config.MESSAGE_LOG_SIZE):
        """
        Args:
            pet (Pet, optional): The pet to drive. A new one is created if omitted.
            tick_interval (float, optional): Seconds between automatic ticks.
                Defaults to Config.get_tick_interval().
            log_size (int): Number of messages kept in the message log.
        """
        self.pet = pet or Pet()
        self.tick_interval = tick_interval if tick_interval is not None else Config.get_tick_interval()
        self.messages: Deque[str] = deque(maxlen=log_size)
        self._lock = asyncio.Lock()
        self._timer: Optional[TickTimer] = None
        self.pet.dispatcher.add_listener("pet:*", self._record_event)

    def _record_event(self, event: Event) -> None:
        data = event.data or {}
        if event.event_type == "pet:action":
            self.messages.append(data['action'])
        elif event.event_type == "pet:mood_changed":
            self.messages.append(f"mood {data['old_mood']} -> {data['new_mood']} ({data['reason']})")
        elif event.event_type == "pet:died":
            self.messages.append("died")

    def recent_messages(self, limit: Optional[int] = None) -> List[str]:
        """Most recent messages, oldest first."""
        messages = list(self.messages)
        if limit is not None:
            messages = messages[-limit:] if limit > 0 else []
        return messages

    def health(self) -> HealthSnapshot:
        return self.pet.health()

    async def interact(self, action: Action, times: int = 1) -> HealthSnapshot:
        """Applies an action `times` times without letting a tick in between."""
        async with self._lock:
            for _ in range(times):
                self.pet.apply_action(action)
            return self.pet.health()

    async def step(self, times: int = 1) -> HealthSnapshot:
        """Advances the pet `times` ticks."""
        async with self._lock:
            for _ in range(times):
                self.pet.tick()
            return self.pet.health()

    async def set_mood(self, mood: Mood) -> HealthSnapshot:
        async with self._lock:
            self.pet.set_mood(mood)
            return self.pet.health()

    async def run_simulation(self, steps: int) -> HealthSnapshot:
        """
        Scripted care routine: tick every step, then feed, play, clean and
        put to sleep on steps divisible by 5, 10, 15 and 20 respectively,
        starting with step 0.
        """
        async with self._lock:
            for i in range(steps):
                self.pet.tick()
                if i % 5 == 0:
                    self.pet.apply_action(Action.FEED)
                if i % 10 == 0:
                    self.pet.apply_action(Action.PLAY)
                if i % 15 == 0:
                    self.pet.apply_action(Action.CLEAN)
                if i % 20 == 0:
                    self.pet.apply_action(Action.SLEEP)
            return self.pet.health()

    async def execute(self, line: str) -> HealthSnapshot:
        """
        Parses and runs one command line.

        Raises:
            CommandError: If the line is not a valid command.
        """
        try:
            command = parse_command(line)
        except CommandError as e:
            SystemLogger.log_command(line, str(e))
            raise
        SystemLogger.log_command(line)

        if command.name in COMMAND_ACTIONS:
            return await self.interact(COMMAND_ACTIONS[command.name], command.count)
        if command.name == 'a':
            return await self.step(command.count)
        if command.name == 'x':
            return await self.run_simulation(command.count)
        return await self.set_mood(parse_mood(command.argument))

    def start_auto_tick(self) -> None:
        """Starts ticking the pet every tick_interval seconds on the running loop."""
        if self._timer is None:
            self._timer = TickTimer("auto_tick", self.tick_interval, self._auto_tick)
        self._timer.start()

    async def _auto_tick(self) -> None:
        await self.step()

    async def stop(self) -> None:
        """Stops the automatic tick and detaches from the pet's events."""
        if self._timer is not None:
            await self._timer.stop()
            self._timer = None
        self.pet.dispatcher.remove_listener("pet:*", self._record_event)
