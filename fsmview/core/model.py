# fsmview/core/model.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from fsmview.core.actions import Action
from fsmview.core.states import State
from fsmview.core.transitions import Transition
from fsmview.core.triggers import Trigger


@dataclass
class SimulationCursor:
    """The simulator's position in the machine. Nothing but the simulator moves it."""

    current: Optional[State] = None


@dataclass(eq=False)
class FSMModel:
    """
    The complete machine: every state (nested ones included), transition,
    trigger and action keyed by id, plus the initial/final bookkeeping and
    the simulation cursor.

    The dictionaries preserve insertion order, which the builder relies on
    when it has to fall back to the first registered state as initial.
    """

    states: Dict[str, State] = field(default_factory=dict)
    transitions: Dict[str, Transition] = field(default_factory=dict)
    triggers: Dict[str, Trigger] = field(default_factory=dict)
    actions: Dict[str, Action] = field(default_factory=dict)
    initial_state: Optional[State] = None
    final_states: List[State] = field(default_factory=list)
    cursor: SimulationCursor = field(default_factory=SimulationCursor)

    @property
    def current_state(self) -> Optional[State]:
        return self.cursor.current

    @current_state.setter
    def current_state(self, state: Optional[State]) -> None:
        self.cursor.current = state

    def reset(self) -> None:
        """Move the cursor back to the initial state."""
        self.cursor.current = self.initial_state

    def is_final(self, state: State) -> bool:
        return any(f is state for f in self.final_states)

    def root_states(self) -> List[State]:
        """States with no parent, in registration order."""
        return [s for s in self.states.values() if s.parent is None]

    def transitions_from(self, state: State) -> List[Transition]:
        return [t for t in self.transitions.values() if t.source.id == state.id]

    def transitions_to(self, state: State) -> List[Transition]:
        return [t for t in self.transitions.values() if t.target.id == state.id]
