"""
Main entry point for petcare.
Runs an interactive session with one pet, ticking it in the background.
"""

from __future__ import annotations
import argparse
import asyncio
import sys
from datetime import datetime

from dotenv import load_dotenv
from rich.console import Console

from config import Config
from core.controller import COMMANDS, CommandError, PetController
from display.console import render_menu, show
from loggers import LogManager, SystemLogger
from pet import Pet
from utils.random_source import SystemRandomSource


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Take care of a virtual pet.")
    parser.add_argument("--interval", type=float, default=None,
                        help="seconds between automatic ticks (default: PET_TICK_INTERVAL or 2.0)")
    parser.add_argument("--no-auto-tick", action="store_true",
                        help="only advance time with the 'a' command")
    parser.add_argument("--seed", type=int, default=None,
                        help="seed the random source (default: PET_RANDOM_SEED)")
    return parser.parse_args(argv)


async def read_line() -> str:
    """Reads one line of stdin without blocking the timer."""
    return await asyncio.to_thread(sys.stdin.readline)


async def main(args: argparse.Namespace) -> None:
    """Initialize and run one pet session."""
    console = Console()
    seed = args.seed if args.seed is not None else Config.get_random_seed()
    controller = PetController(Pet(SystemRandomSource(seed)), tick_interval=args.interval)

    console.print(f"Welcome to Virtual Pet Care! Started at {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
    console.print(render_menu(COMMANDS))
    show(console, controller.health())

    if Config.get_auto_tick() and not args.no_auto_tick:
        controller.start_auto_tick()

    try:
        while True:
            line = await read_line()
            if not line or line.strip().lower() in ("q", "quit", "exit"):
                break
            if not line.strip():
                continue
            try:
                snapshot = await controller.execute(line)
            except CommandError as e:
                console.print(f"[red]{e}[/red]")
                continue
            show(console, snapshot, controller.recent_messages(5))
            if snapshot.dead:
                console.print("[bold red]Your pet has died.[/bold red]")
    finally:
        await controller.stop()
        SystemLogger.info("Session ended")


def run() -> None:
    """Console script entry point."""
    load_dotenv()
    LogManager.setup_logging()
    try:
        asyncio.run(main(parse_args()))
    except KeyboardInterrupt:
        print("\nGoodbye.")


if __name__ == "__main__":
    run()
