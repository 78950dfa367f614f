from __future__ import annotations
import argparse
import random
import time
from pathlib import Path
from typing import Callable, Optional, Sequence

from rich.console import Console
from rich.prompt import Prompt

from arena.battle.advice import Advisor, HeuristicAdvisor
from arena.battle.session import BattleMachine
from arena.battle.state import BattleState, Phase, Switch
from arena.core.errors import ArenaError, BattleError
from arena.core.logging import logger
from arena.data.loader import bundled_roster, load_roster
from arena.system.settings import Settings
from arena.ui import battle as ui

DEFAULT_PLAYER = "ember_squad"
DEFAULT_OPPONENT = "tide_squad"
MAX_AUTO_TURNS = 500

def _load(arg: Optional[str], default: str):
    if arg is None:
        return bundled_roster(default)
    return load_roster(Path(arg))

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="arena", description="Run a squad battle in the terminal")
    parser.add_argument("--player", help="player roster JSON (default: bundled Ember Squad)")
    parser.add_argument("--opponent", help="opponent roster JSON (default: bundled Tide Squad)")
    parser.add_argument("--seed", type=int, help="RNG seed for a reproducible battle")
    parser.add_argument("--auto", action="store_true", help="let the coach pick every action")
    parser.add_argument("--fast", action="store_true", help="no pause between narrated lines")
    return parser

def auto_action(state: BattleState, advisor: Advisor):
    """Coach-driven action: forced switches go to the first healthy member."""
    if state.phase is Phase.AWAITING_FORCED_SWITCH:
        target = next(c for c in state.player_roster if not c.fainted)
        return Switch(target.uid)
    tip = advisor.advise(state.player_active, state.opponent_active, state.log)
    for i, m in enumerate(state.player_active.moves):
        if m.name == tip.recommended_move:
            return i
    return 0

def prompt_action(state: BattleState, console: Console, advisor: Advisor):
    """Ask for the next action; returns a move slot index or a Switch."""
    while True:
        for line in ui.command_menu(state):
            console.print(line, markup=False)
        if state.phase is Phase.AWAITING_INPUT:
            console.print("?) Ask the coach")
        choice = Prompt.ask("Action").strip().lower()
        if choice == "?" and state.phase is Phase.AWAITING_INPUT:
            console.print(ui.render_advice(advisor.advise(state.player_active, state.opponent_active, state.log)))
            continue
        if choice.startswith("s") and choice[1:].lstrip("-").isdigit():
            return Switch(int(choice[1:]))
        if choice.isdigit():
            return int(choice) - 1
        console.print("[red]Unknown choice[/red]")

def play(machine: BattleMachine, state: BattleState, choose: Callable[[BattleState], object],
         console: Console, max_turns: int = MAX_AUTO_TURNS) -> BattleState:
    while state.phase is not Phase.ENDED and state.turn < max_turns:
        ui.show(state, console)
        action = choose(state)
        try:
            if isinstance(action, Switch):
                state = machine.submit_action(action)
            else:
                state = machine.use_move(int(action))  # type: ignore[arg-type]
        except BattleError as e:
            console.print(f"[yellow]{e}[/yellow]")
            state = machine.get_state()
    return state

def run(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = Settings.load()
    settings.apply_logging()
    console = ui.console
    seed = args.seed if args.seed is not None else settings.data.seed
    delay = 0.0 if (args.fast or args.auto) else settings.data.text_delay

    def _narrate(line: str):
        console.print(line, markup=False)
        if delay:
            time.sleep(delay)

    try:
        player = _load(args.player, DEFAULT_PLAYER)
        opponent = _load(args.opponent, DEFAULT_OPPONENT)
    except ArenaError as e:
        logger.error("RosterLoadFailed", error=str(e))
        return 2
    machine = BattleMachine(rng=random.Random(seed), log_limit=settings.data.log_limit,
                            on_victory=lambda s: logger.info("VictoryRecorded", turns=s.turn),
                            message_cb=_narrate)
    advisor = HeuristicAdvisor()
    state = machine.start(player, opponent)
    if args.auto:
        chooser = lambda s: auto_action(s, advisor)
    else:
        chooser = lambda s: prompt_action(s, console, advisor)
    state = play(machine, state, chooser, console)
    ui.show(state, console)
    console.print(ui.render_outcome(state))
    return 0

def main():
    raise SystemExit(run())

if __name__ == "__main__":
    main()
