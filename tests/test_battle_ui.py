import random
from rich.console import Console
from arena import cli
from arena.battle.session import BattleMachine
from arena.battle.state import Phase, Switch
from arena.battle.advice import HeuristicAdvisor
from arena.core.logging import logger
from arena.ui import battle as ui


def _recording_console():
    return Console(record=True, width=100, color_system=None)


def test_render_state_shows_both_sides_and_log(make_creature):
    machine = BattleMachine(rng=random.Random(1))
    state = machine.start([make_creature(1, "Torch", types=("Fire",)), make_creature(2, "Pebble")],
                          [make_creature(9, "Sprout", types=("Grass", "Poison"))])
    con = _recording_console()
    ui.show(state, con)
    out = con.export_text()
    assert "Torch" in out and "Sprout" in out and "Pebble" in out
    assert "GRS/PSN" in out
    assert "100/100" in out
    assert "The battle begins!" in out


def test_hp_bar_and_color():
    assert ui.hp_bar(50, 100, width=10).plain == "[█████░░░░░] 50/100"
    assert ui.hp_bar(-5, 100, width=4).plain == "[░░░░] 0/100"
    assert ui.hp_color(100, 100) == "#2ecc71"
    assert ui.hp_color(0, 100) == "#e74c3c"


def test_command_menu_during_forced_switch(fixed_rng, make_creature, make_move):
    machine = BattleMachine(rng=fixed_rng())
    machine.start([make_creature(1, "Frail", hp=1, speed=1), make_creature(2, "Next")],
                  [make_creature(9, "Brute", speed=99, moves=[make_move("Crush", power=80)])])
    state = machine.use_move(0)
    assert state.phase is Phase.AWAITING_FORCED_SWITCH
    assert ui.command_menu(state) == ["s2) Switch to Next"]


def test_auto_action_handles_forced_switch(fixed_rng, make_creature, make_move):
    machine = BattleMachine(rng=fixed_rng())
    machine.start([make_creature(1, "Frail", hp=1, speed=1), make_creature(2, "Next")],
                  [make_creature(9, "Brute", speed=99, moves=[make_move("Crush", power=80)])])
    state = machine.use_move(0)
    assert cli.auto_action(state, HeuristicAdvisor()) == Switch(2)


def test_auto_battle_runs_to_completion(make_creature, make_move):
    machine = BattleMachine(rng=random.Random(11))
    state = machine.start([make_creature(1, "A", speed=80, moves=[make_move("Hit", power=90)]),
                           make_creature(2, "B", moves=[make_move("Hit", power=90)])],
                          [make_creature(9, "X", moves=[make_move("Hit", power=90)]),
                           make_creature(10, "Y", moves=[make_move("Hit", power=90)])])
    advisor = HeuristicAdvisor()
    state = cli.play(machine, state, lambda s: cli.auto_action(s, advisor), _recording_console())
    assert state.phase is Phase.ENDED


def test_cli_auto_with_bundled_rosters(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setattr(logger, "threshold", logger.threshold)
    monkeypatch.setattr(ui, "console", _recording_console())
    assert cli.run(["--auto", "--seed", "3"]) == 0
    out = ui.console.export_text()
    assert "The battle begins!" in out
    assert "VICTORY" in out or "DEFEAT" in out or "ABANDONED" in out


def test_cli_reports_bad_roster(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setattr(logger, "threshold", logger.threshold)
    bad = tmp_path / "bad.json"
    bad.write_text("[]")
    assert cli.run(["--auto", "--player", str(bad)]) == 2
