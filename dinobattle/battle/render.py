"""Rich rendering helpers for rosters and battle results."""
from __future__ import annotations
from rich.align import Align
from rich.box import ROUNDED, DOUBLE
from rich.columns import Columns
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from .roster import Roster, TEAM_CAP
from .session import BattleOutcome, BattleSession
from .species import stats_for

_OUTCOME_TEXT = {
    BattleOutcome.LEFT_WINS: ("Left team wins!", "green"),
    BattleOutcome.RIGHT_WINS: ("Right team wins!", "green"),
    BattleOutcome.STALEMATE: ("Stalemate: both teams fell", "yellow"),
    BattleOutcome.ROUND_LIMIT: ("No decision: round limit reached", "red"),
}

def health_bar(current: int, max_hp: int, width: int = 10) -> str:
    if current <= 0:
        return "[red]DEAD[/red]"
    percent = current / max_hp if max_hp > 0 else 1.0
    # Overheal fills the bar, it does not grow it
    filled = min(width, max(1, int(percent * width)))
    if percent > 0.5:
        color = "green"
    elif percent > 0.25:
        color = "yellow"
    else:
        color = "red"
    bar = "█" * filled + "░" * (width - filled)
    return f"[{color}]{bar}[/{color}]"

def roster_table(roster: Roster, title: str) -> Table:
    table = Table(title=f"{title} (HP {roster.total_health()})", box=ROUNDED)
    table.add_column("#", justify="right")
    table.add_column("Species")
    table.add_column("HP", justify="right")
    table.add_column("")
    table.add_column("ATK/DEF", justify="center")
    table.add_column("Traits")
    for slot, dino in enumerate(roster):
        traits = []
        if dino.heal:
            traits.append(f"heal {dino.heal}")
        if dino.splash:
            traits.append(f"splash {dino.splash}")
        if dino.infight:
            traits.append(f"infight {dino.infight}")
        max_hp = stats_for(dino.species).health
        name = f"[bold]{dino.species}[/bold]" if slot == 0 else str(dino.species)
        table.add_row(str(slot + 1), name, str(dino.health), health_bar(dino.health, max_hp),
                      f"{dino.attack}/{dino.defense}", ", ".join(traits))
    for slot in range(len(roster), TEAM_CAP):
        table.add_row(str(slot + 1), "[dim]-[/dim]", "", "", "", "")
    return table

def outcome_panel(outcome: BattleOutcome, rounds: int) -> Panel:
    text, color = _OUTCOME_TEXT[outcome]
    return Panel(f"[bold {color}]{text}[/bold {color}]\n[bright_white]Rounds: {rounds}[/bright_white]",
                 title="[bold]RESULT[/bold]", box=DOUBLE, width=45)

def render_battle(console: Console, session: BattleSession) -> None:
    columns = Columns([roster_table(session.left, "LEFT"), roster_table(session.right, "RIGHT")],
                      equal=True, padding=(0, 4))
    console.print(Align.center(columns))

__all__ = ["health_bar","roster_table","outcome_panel","render_battle"]
