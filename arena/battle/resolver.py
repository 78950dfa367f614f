"""Turn resolution for two-active-combatant battles.

One call resolves one player action against the opponent's randomly chosen
move. Ordering rules:

* a switch always resolves before any attack
* otherwise the faster active combatant acts first; equal speed favors the player
* an action whose actor fainted (or was replaced) earlier in the turn is skipped

Faints cascade immediately: an emptied roster ends the battle, an opponent
faint auto-sends the next healthy roster member, a player faint halts the
turn and waits for a forced switch.
"""
from __future__ import annotations
import random
from typing import List, Optional, Tuple
from arena.core.errors import InvalidActionError, InvalidSwitchError
from arena.core.logging import logger
from .ai import OpponentAI, RandomMoveAI
from .chart import describe_effectiveness
from .mechanics import accuracy_check, damage_roll
from .models import Combatant, Move
from .state import (Action, BattleEvent, BattleState, Outcome, Phase, Side,
                    Switch, TurnResult, UseMove)

QueuedAction = Tuple[Side, Action, Combatant]

class TurnResolver:
    def __init__(self, rng: Optional[random.Random] = None, ai: Optional[OpponentAI] = None):
        self.rng = rng or random.Random()
        self.ai = ai or RandomMoveAI()

    # ------------------------------------------------------------------
    # Validation (never mutates, never draws randomness)
    # ------------------------------------------------------------------
    def validate(self, state: BattleState, action: Action) -> None:
        phase = state.phase.value
        if state.phase is Phase.ENDED:
            raise InvalidActionError("The battle is over", phase)
        if state.phase is Phase.RESOLVING:
            raise InvalidActionError("A turn is already being resolved", phase)
        if isinstance(action, Switch):
            idx = state.find(Side.PLAYER, action.target_id)
            if idx is None:
                raise InvalidSwitchError(action.target_id, "no such combatant in your roster", phase)
            if state.player_roster[idx].fainted:
                raise InvalidSwitchError(action.target_id, "it has fainted", phase)
            if idx == state.player_active_index:
                raise InvalidSwitchError(action.target_id, "it is already in battle", phase)
        elif isinstance(action, UseMove):
            if state.phase is Phase.AWAITING_FORCED_SWITCH:
                raise InvalidActionError("Choose a replacement before attacking", phase)
            active = state.player_active
            if not active.knows(action.move):
                raise InvalidActionError(f"{active.name} doesn't know {action.move.name}", phase)
        else:
            raise InvalidActionError(f"Unsupported action {action!r}", phase)

    # ------------------------------------------------------------------
    # Ordering
    # ------------------------------------------------------------------
    def turn_order(self, state: BattleState, player_action: Action, opponent_move: Move) -> List[QueuedAction]:
        player = (Side.PLAYER, player_action, state.player_active)
        opponent = (Side.OPPONENT, UseMove(opponent_move), state.opponent_active)
        if isinstance(player_action, Switch):
            return [player, opponent]
        if state.player_active.stats.speed >= state.opponent_active.stats.speed:
            return [player, opponent]
        return [opponent, player]

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------
    def resolve_turn(self, state: BattleState, action: Action) -> TurnResult:
        self.validate(state, action)
        if state.phase is Phase.AWAITING_FORCED_SWITCH:
            return self._forced_switch(state, action)  # type: ignore[arg-type]

        state.phase = Phase.RESOLVING
        state.turn += 1
        result = TurnResult(turn=state.turn)
        try:
            opponent_move = self.ai.choose_move(state.opponent_active, state.player_active, self.rng)
            for side, act, actor in self.turn_order(state, action, opponent_move):
                if actor.fainted or state.active(side) is not actor:
                    logger.debug("ActionSkipped", side=side.value, actor=actor.name)
                    continue
                if isinstance(act, Switch):
                    self._switch(state, side, act.target_id, result)
                else:
                    self._attack(state, side, actor, act.move, result)
                if state.phase is not Phase.RESOLVING:
                    break
        except Exception as e:
            # unlock the battle; partial events stay unnarrated
            if state.phase is Phase.RESOLVING:
                state.phase = Phase.AWAITING_INPUT
            logger.error("TurnAborted", turn=state.turn, error=repr(e))
            raise
        if state.phase is Phase.RESOLVING:
            state.phase = Phase.AWAITING_INPUT
        result.phase = state.phase
        result.outcome = state.outcome
        logger.debug("TurnResolved", turn=state.turn, phase=state.phase.value, events=len(result.events))
        return result

    def _forced_switch(self, state: BattleState, action: Switch) -> TurnResult:
        result = TurnResult(turn=state.turn)
        self._switch(state, Side.PLAYER, action.target_id, result)
        state.phase = Phase.AWAITING_INPUT
        result.phase = state.phase
        return result

    def _switch(self, state: BattleState, side: Side, target_id: int, result: TurnResult):
        idx = state.find(side, target_id)
        assert idx is not None
        state.set_active(side, idx)
        incoming = state.active(side)
        result.events.append(BattleEvent("switch", f"You switched to {incoming.name}!",
                                         side=side, actor=incoming.name, data={"uid": incoming.uid}))

    def _attack(self, state: BattleState, side: Side, attacker: Combatant, move: Move, result: TurnResult):
        defender_side = side.other
        defender = state.active(defender_side)
        events = result.events
        events.append(BattleEvent("move", f"{attacker.name} used {move.name}!", side=side,
                                  actor=attacker.name, target=defender.name, data={"move": move.name}))
        if not accuracy_check(move, self.rng):
            events.append(BattleEvent("miss", f"{attacker.name}'s attack missed!", side=side,
                                      actor=attacker.name, target=defender.name))
            return
        roll = damage_roll(attacker, defender, move, self.rng)
        hp_before = defender.current_hp
        lost = defender.take_damage(roll["damage"])
        if move.is_damaging:
            qualifier = describe_effectiveness(roll["effectiveness"], defender.name)
            if qualifier:
                events.append(BattleEvent("effectiveness", qualifier, side=side, actor=attacker.name,
                                          target=defender.name, data={"multiplier": roll["effectiveness"]}))
        # silent event: carries the numbers for HP bar updates
        events.append(BattleEvent("damage", "", side=side, actor=attacker.name, target=defender.name,
                                  data={"amount": lost, "hp_before": hp_before, "hp_after": defender.current_hp,
                                        "effectiveness": roll["effectiveness"], "stab": roll["stab"]}))
        if defender.fainted:
            self._faint(state, defender_side, defender, result)

    def _faint(self, state: BattleState, side: Side, fallen: Combatant, result: TurnResult):
        result.events.append(BattleEvent("faint", f"{fallen.name} fainted!", side=side, actor=fallen.name))
        if not state.has_available(side):
            state.phase = Phase.ENDED
            if side is Side.OPPONENT:
                state.outcome = Outcome.VICTORY
                result.events.append(BattleEvent("victory", "You won the battle!", side=Side.PLAYER))
            else:
                state.outcome = Outcome.DEFEAT
                result.events.append(BattleEvent("defeat", "Your squad was defeated...", side=Side.OPPONENT))
            return
        if side is Side.OPPONENT:
            idx = state.next_available(side)
            assert idx is not None
            state.set_active(side, idx)
            incoming = state.opponent_active
            result.events.append(BattleEvent("send_out", f"Opponent sent out {incoming.name}!", side=side,
                                             actor=incoming.name, data={"uid": incoming.uid}))
        else:
            state.phase = Phase.AWAITING_FORCED_SWITCH

__all__ = ["TurnResolver"]
