"""Terminal battle presentation built on Rich.

Everything here reads BattleState snapshots; nothing mutates a battle. The
layout mirrors a classic battle screen: opponent panel on top, player panel
below, party status and the recent log underneath.
"""
from __future__ import annotations
from typing import List, Optional, Sequence

from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text
from rich.table import Table
from rich.align import Align
from rich.box import ROUNDED, DOUBLE

from arena.battle.advice import Advice
from arena.battle.models import Combatant
from arena.battle.state import BattleState, Outcome, Phase
from arena.core.types import TYPE_COLORS_HEX, type_abbreviation

console = Console()

GREEN = (46, 204, 113)
YELLOW = (241, 196, 15)
RED = (231, 76, 60)

def _lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t

def _mix(c1: tuple[int,int,int], c2: tuple[int,int,int], t: float) -> tuple[int,int,int]:
    return (int(_lerp(c1[0], c2[0], t)), int(_lerp(c1[1], c2[1], t)), int(_lerp(c1[2], c2[2], t)))

def hp_color(cur: int, max_hp: int) -> str:
    """Hex color blending red -> yellow -> green with remaining HP."""
    ratio = max(0.0, min(1.0, cur / max(1, max_hp)))
    if ratio >= 0.5:
        col = _mix(YELLOW, GREEN, (ratio - 0.5) / 0.5)
    else:
        col = _mix(RED, YELLOW, ratio / 0.5)
    return "#{:02x}{:02x}{:02x}".format(*col)

def hp_bar(cur: int, max_hp: int, width: int = 24) -> Text:
    cur = max(0, min(cur, max_hp))
    filled = int(round(cur / max(1, max_hp) * width))
    bar = Text("[")
    bar.append("█" * filled, style=hp_color(cur, max_hp))
    bar.append("░" * (width - filled), style="grey37")
    bar.append(f"] {cur}/{max_hp}")
    return bar

def type_badges(c: Combatant) -> Text:
    text = Text()
    for i, t in enumerate(c.types):
        if i:
            text.append("/")
        text.append(type_abbreviation(t), style=f"bold {TYPE_COLORS_HEX[t]}")
    return text

def combatant_panel(c: Combatant, title: str) -> Panel:
    head = Text(c.name, style="bold")
    head.append("  ")
    head.append_text(type_badges(c))
    if c.fainted:
        head.append("  FNT", style="bold red")
    return Panel(Group(head, hp_bar(c.current_hp, c.max_hp)), title=title, box=ROUNDED, width=48)

def party_table(state: BattleState) -> Table:
    table = Table(box=ROUNDED, show_header=True, header_style="bold")
    table.add_column("#", justify="right")
    table.add_column("Your squad")
    table.add_column("Types")
    table.add_column("HP", justify="right")
    for c in state.player_roster:
        marker = "▶" if c is state.player_active else ""
        style = "dim" if c.fainted else None
        table.add_row(f"{marker}{c.uid}", c.name, type_badges(c), f"{c.current_hp}/{c.max_hp}", style=style)
    return table

def log_panel(lines: Sequence[str]) -> Panel:
    body = Text("\n".join(lines)) if lines else Text("")
    return Panel(body, title="Battle log", box=ROUNDED)

def render_state(state: BattleState) -> Group:
    return Group(
        combatant_panel(state.opponent_active, "Opponent"),
        Align.right(combatant_panel(state.player_active, "You")),
        party_table(state),
        log_panel(state.log),
    )

def render_outcome(state: BattleState) -> Panel:
    if state.outcome is Outcome.VICTORY:
        msg = Text("VICTORY", style="bold green")
        sub = "Enemy forces neutralized. Team performance: OPTIMAL."
    elif state.outcome is Outcome.DEFEAT:
        msg = Text("DEFEAT", style="bold red")
        sub = "Team critical failure. Strategic retreat initiated."
    else:
        msg = Text("BATTLE ABANDONED", style="bold yellow")
        sub = f"Stopped after {state.turn} turns."
    return Panel(Group(Align.center(msg), Align.center(Text(sub))), box=DOUBLE)

def render_advice(advice: Advice) -> Panel:
    body = Text(advice.advice, style="italic cyan")
    body.append(f"\nRecommended: {advice.recommended_move}", style="bold")
    return Panel(body, title="Coach", box=ROUNDED)

def command_menu(state: BattleState) -> List[str]:
    """Numbered choices available in the current phase."""
    choices: List[str] = []
    if state.phase is Phase.AWAITING_INPUT:
        for i, m in enumerate(state.player_active.moves):
            choices.append(f"{i + 1}) {m.name} [{m.type.display_name} {m.category} P{m.power} A{m.accuracy}]")
    for c in state.player_roster:
        if not c.fainted and c is not state.player_active:
            choices.append(f"s{c.uid}) Switch to {c.name}")
    return choices

def show(state: BattleState, target: Optional[Console] = None):
    (target or console).print(render_state(state))

__all__ = ["console", "hp_bar", "hp_color", "type_badges", "combatant_panel", "party_table",
           "log_panel", "render_state", "render_outcome", "render_advice", "command_menu", "show"]
