"""Battle state machine: the public face of the battle engine.

Owns exactly one BattleState, feeds player actions to the TurnResolver and
turns the resulting events into the narrated battle log. Callers only ever
receive deep-copied snapshots, so presentation code cannot corrupt a battle.

Typical use::

    machine = BattleMachine(rng=random.Random(7), on_victory=tracker.bump)
    state = machine.start(player_records, opponent_records)
    while state.phase is not Phase.ENDED:
        state = machine.submit_action(UseMove(state.player_active.moves[0]))
"""
from __future__ import annotations
import copy
import random
from typing import Any, Callable, Optional, Sequence
from arena.core.errors import BattleError, InvalidActionError
from arena.core.logging import logger
from .ai import OpponentAI
from .factory import normalize_roster
from .resolver import TurnResolver
from .state import (Action, BattleEvent, BattleState, DEFAULT_LOG_LIMIT, Outcome, Phase,
                    Side, Switch, TurnResult, UseMove)

START_MESSAGE = "The battle begins!"

class BattleMachine:
    def __init__(self, rng: Optional[random.Random] = None, ai: Optional[OpponentAI] = None, *,
                 log_limit: int = DEFAULT_LOG_LIMIT,
                 on_victory: Optional[Callable[[BattleState], None]] = None,
                 message_cb: Optional[Callable[[str], None]] = None):
        self.resolver = TurnResolver(rng=rng, ai=ai)
        self.log_limit = max(1, int(log_limit))
        self.on_victory = on_victory
        self.message_cb = message_cb
        self.last_turn: Optional[TurnResult] = None
        self._state: Optional[BattleState] = None
        self._victory_notified = False

    @property
    def rng(self) -> random.Random:
        return self.resolver.rng

    def start(self, player_roster: Sequence[Any], opponent_roster: Sequence[Any]) -> BattleState:
        players = normalize_roster(player_roster)
        opponents = normalize_roster(opponent_roster)
        state = BattleState(player_roster=players, opponent_roster=opponents, log_limit=self.log_limit)
        state.player_active_index = state.next_available(Side.PLAYER) or 0
        state.opponent_active_index = state.next_available(Side.OPPONENT) or 0
        self._state = state
        self._victory_notified = False
        self.last_turn = None
        self._narrate(BattleEvent("start", START_MESSAGE))
        logger.debug("BattleStart", player=state.player_active.name, opponent=state.opponent_active.name,
                     player_size=len(players), opponent_size=len(opponents))
        return self.get_state()

    def get_state(self) -> BattleState:
        return copy.deepcopy(self._require_state())

    def submit_action(self, action: Action) -> BattleState:
        state = self._require_state()
        try:
            result = self.resolver.resolve_turn(state, action)
        except BattleError as e:
            logger.debug("ActionRejected", phase=state.phase.value, reason=str(e))
            raise
        self.last_turn = result
        for event in result.events:
            if event.message:
                self._narrate(event)
        if state.outcome is Outcome.VICTORY and not self._victory_notified:
            self._victory_notified = True
            if self.on_victory:
                self.on_victory(copy.deepcopy(state))
        if state.phase is Phase.ENDED:
            logger.debug("BattleEnded", outcome=state.outcome.value, turns=state.turn)
        return self.get_state()

    # Convenience wrappers for menu-driven callers
    def use_move(self, index: int) -> BattleState:
        moves = self._require_state().player_active.moves
        if not 0 <= index < len(moves):
            raise InvalidActionError(f"No move in slot {index}", self._require_state().phase.value)
        return self.submit_action(UseMove(moves[index]))

    def switch_to(self, target_id: int) -> BattleState:
        return self.submit_action(Switch(target_id))

    def _narrate(self, event: BattleEvent):
        state = self._require_state()
        state.push_log(event.message)
        if self.message_cb:
            self.message_cb(event.message)

    def _require_state(self) -> BattleState:
        if self._state is None:
            raise InvalidActionError("No battle in progress; call start() first")
        return self._state

def start_battle(player_roster: Sequence[Any], opponent_roster: Sequence[Any], **kwargs: Any) -> BattleMachine:
    """Build a machine and start it in one step."""
    machine = BattleMachine(**kwargs)
    machine.start(player_roster, opponent_roster)
    return machine

__all__ = ["BattleMachine", "start_battle", "START_MESSAGE"]
