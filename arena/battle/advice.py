"""Coaching advice hook.

Advice is requested by the presentation layer between turns; the engine
itself never calls an advisor. ``HeuristicAdvisor`` works offline and picks
the move with the best expected damage score; an online coach only needs to
implement ``advise``.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Protocol, Sequence
from .chart import combined_effectiveness
from .mechanics import same_type_bonus
from .models import Combatant, Move

@dataclass(frozen=True)
class Advice:
    advice: str
    recommended_move: str

class Advisor(Protocol):
    def advise(self, player_active: Combatant, opponent_active: Combatant, log: Sequence[str]) -> Advice: ...

def advice_context(player_active: Combatant, opponent_active: Combatant) -> str:
    """Plain-text battle summary handed to an external coach."""
    def _types(c: Combatant) -> str:
        return "/".join(t.display_name for t in c.types)
    return (f"Your combatant: {player_active.name} ({_types(player_active)})\n"
            f"Opponent: {opponent_active.name} ({_types(opponent_active)})\n"
            f"Moves available: {', '.join(m.name for m in player_active.moves)}")

def move_score(user: Combatant, foe: Combatant, move: Move) -> float:
    if not move.is_damaging:
        return 0.0
    eff = combined_effectiveness(move.type, foe.types)
    return move.power * same_type_bonus(user, move) * eff * (move.accuracy / 100)

class HeuristicAdvisor:
    def advise(self, player_active: Combatant, opponent_active: Combatant, log: Sequence[str] = ()) -> Advice:
        best = None
        best_score = -1.0
        for m in player_active.moves:
            score = move_score(player_active, opponent_active, m)
            if score > best_score:
                best_score = score
                best = m
        best = best or player_active.moves[0]
        eff = combined_effectiveness(best.type, opponent_active.types)
        if best_score <= 0:
            text = f"Nothing {player_active.name} knows can hurt {opponent_active.name}. Consider switching."
        elif eff > 1:
            text = f"{best.name} hits {opponent_active.name} super effectively. Press the advantage!"
        elif eff < 1:
            text = f"{opponent_active.name} resists {best.name}, but it still scores best of your moves."
        else:
            text = f"{best.name} gives {player_active.name} the best expected damage."
        return Advice(advice=text, recommended_move=best.name)

__all__ = ["Advice", "Advisor", "HeuristicAdvisor", "advice_context", "move_score"]
