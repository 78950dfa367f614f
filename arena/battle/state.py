"""Battle state value types: phases, actions, events and the state itself."""
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Mapping, Optional, Union
from .models import Combatant, Move

DEFAULT_LOG_LIMIT = 11

class Phase(str, Enum):
    AWAITING_INPUT = "awaiting-player-input"
    RESOLVING = "resolving"
    AWAITING_FORCED_SWITCH = "awaiting-forced-switch"
    ENDED = "ended"

class Outcome(str, Enum):
    NONE = "none"
    VICTORY = "victory"
    DEFEAT = "defeat"

class Side(str, Enum):
    PLAYER = "player"
    OPPONENT = "opponent"

    @property
    def other(self) -> "Side":
        return Side.OPPONENT if self is Side.PLAYER else Side.PLAYER

@dataclass(frozen=True)
class UseMove:
    move: Move

@dataclass(frozen=True)
class Switch:
    target_id: int

Action = Union[UseMove, Switch]

@dataclass(frozen=True)
class BattleEvent:
    """One narrated sub-event of a turn, in resolution order."""
    kind: str  # start | move | miss | effectiveness | damage | faint | switch | send_out | victory | defeat
    message: str
    side: Optional[Side] = None
    actor: Optional[str] = None
    target: Optional[str] = None
    data: Mapping[str, object] = field(default_factory=dict)

@dataclass
class TurnResult:
    turn: int
    events: List[BattleEvent] = field(default_factory=list)
    phase: Phase = Phase.AWAITING_INPUT
    outcome: Outcome = Outcome.NONE

    @property
    def messages(self) -> List[str]:
        return [e.message for e in self.events]

@dataclass
class BattleState:
    player_roster: List[Combatant]
    opponent_roster: List[Combatant]
    player_active_index: int = 0
    opponent_active_index: int = 0
    phase: Phase = Phase.AWAITING_INPUT
    outcome: Outcome = Outcome.NONE
    turn: int = 0
    log: List[str] = field(default_factory=list)
    log_limit: int = DEFAULT_LOG_LIMIT

    @property
    def player_active(self) -> Combatant:
        return self.player_roster[self.player_active_index]

    @property
    def opponent_active(self) -> Combatant:
        return self.opponent_roster[self.opponent_active_index]

    @property
    def is_over(self) -> bool:
        return self.phase is Phase.ENDED

    def roster(self, side: Side) -> List[Combatant]:
        return self.player_roster if side is Side.PLAYER else self.opponent_roster

    def active(self, side: Side) -> Combatant:
        return self.player_active if side is Side.PLAYER else self.opponent_active

    def set_active(self, side: Side, index: int):
        if side is Side.PLAYER:
            self.player_active_index = index
        else:
            self.opponent_active_index = index

    def find(self, side: Side, uid: int) -> Optional[int]:
        for i, c in enumerate(self.roster(side)):
            if c.uid == uid:
                return i
        return None

    def next_available(self, side: Side) -> Optional[int]:
        """First non-fainted roster index in roster order."""
        for i, c in enumerate(self.roster(side)):
            if not c.fainted:
                return i
        return None

    def has_available(self, side: Side) -> bool:
        return self.next_available(side) is not None

    def push_log(self, message: str):
        self.log.append(message)
        if len(self.log) > self.log_limit:
            del self.log[:len(self.log) - self.log_limit]

__all__ = ["Phase", "Outcome", "Side", "UseMove", "Switch", "Action",
           "BattleEvent", "TurnResult", "BattleState", "DEFAULT_LOG_LIMIT"]
