"""
Battle engine package.
- chart.py (type effectiveness)
- models.py (Move, StatBlock, Combatant)
- factory.py (creature record -> Combatant normalization)
- mechanics.py (damage formula, accuracy)
- ai.py (opponent move choice)
- state.py (BattleState, phases, actions, events)
- resolver.py (turn resolution pipeline)
- session.py (state machine + narrated log)
- advice.py (optional coaching hook)
"""
from .session import BattleMachine, start_battle
from .state import BattleState, Outcome, Phase, Switch, UseMove
__all__ = ["BattleMachine", "start_battle", "BattleState", "Outcome", "Phase", "Switch", "UseMove"]
