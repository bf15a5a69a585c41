# fsmview/core/transitions.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from typing import List, Optional

from fsmview.core.actions import Action
from fsmview.core.states import State
from fsmview.core.triggers import Trigger


class Transition:
    """
    Defines a path from one state to another, taken when its trigger fires.
    A transition references its endpoints and trigger but does not own them.
    """

    def __init__(
        self,
        transition_id: str,
        source: State,
        target: State,
        trigger: Trigger,
        guard: str = "",
        actions: Optional[List[Action]] = None,
    ) -> None:
        """
        :param transition_id: Identifier unique among the model's transitions.
        :param source: The origin state.
        :param target: The destination state.
        :param trigger: The trigger this transition listens for.
        :param guard: Free-form condition text; empty means unconditional.
        :param actions: Actions run while moving from source to target.
        """
        self._id = transition_id
        self._source = source
        self._target = target
        self._trigger = trigger
        self._guard = guard or ""
        self.actions: List[Action] = list(actions) if actions else []

    def __repr__(self) -> str:
        return f"Transition(id={self._id!r}, {self._source.id!r} -> {self._target.id!r}, trigger={self._trigger.id!r})"

    @property
    def id(self) -> str:
        return self._id

    @property
    def source(self) -> State:
        """The source state of the transition."""
        return self._source

    @property
    def target(self) -> State:
        """The target state of the transition."""
        return self._target

    @property
    def trigger(self) -> Trigger:
        return self._trigger

    @property
    def guard(self) -> str:
        return self._guard

    @property
    def is_guarded(self) -> bool:
        return bool(self._guard)

    def describe(self) -> str:
        """Return a one-line summary such as ``tr1: s1 -> s2 [x > 0]``."""
        text = f"{self._id}: {self._source.id} -> {self._target.id}"
        if self._guard:
            text += f" [{self._guard}]"
        return text
