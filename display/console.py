# display/console.py

"""
Console rendering for the interactive driver.
"""

from typing import Iterable, Optional
from rich.console import Console
from rich.table import Table
from rich.text import Text

from pet import HealthSnapshot, Mood

MOOD_STYLES = {
    Mood.CONTENT: "green",
    Mood.DISTRESSED: "yellow",
    Mood.ANXIOUS: "magenta",
}

def need_style(value: int) -> str:
    """Colour for a need value; lower is better."""
    if value > 80:
        return "bold red"
    if value > 60:
        return "yellow"
    return "green"

def render_health(snapshot: HealthSnapshot) -> Table:
    """Builds a table of the snapshot's mood, life state and needs."""
    table = Table(title="Pet Status", show_header=True, header_style="bold")
    table.add_column("Stat")
    table.add_column("Value", justify="right")

    if snapshot.dead:
        table.add_row("state", Text("dead", style="bold red"))
    else:
        table.add_row("state", Text("alive", style="green"))
    table.add_row("mood", Text(snapshot.mood.value, style=MOOD_STYLES[snapshot.mood]))
    for name, value in snapshot.needs().items():
        table.add_row(name, Text(str(value), style=need_style(value)))
    return table

def render_menu(commands: dict) -> Text:
    text = Text("Commands:\n", style="bold")
    for letter, description in commands.items():
        argument = "<mood>" if letter == 'm' else "n"
        text.append(f"  {letter} {argument:7} - {description}\n")
    text.append("  q         - Quit\n")
    return text

def show(console: Console, snapshot: HealthSnapshot, messages: Optional[Iterable[str]] = None) -> None:
    console.print(render_health(snapshot))
    if messages:
        console.print(Text("Recent: " + ", ".join(messages), style="dim"))
