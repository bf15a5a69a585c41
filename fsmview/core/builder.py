# fsmview/core/builder.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List, Optional, Sequence, Union

from fsmview.core.actions import Action, ActionKind
from fsmview.core.errors import InvalidReferenceError
from fsmview.core.factory import StateFactory
from fsmview.core.model import FSMModel
from fsmview.core.states import State, StateKind
from fsmview.core.transitions import Transition
from fsmview.core.triggers import Trigger

if TYPE_CHECKING:
    from fsmview.interfaces.protocols import InjectionRule

logger = logging.getLogger(__name__)

ROOT_PARENT = "_"


class FSMBuilder:
    """
    Incrementally assembles an FSMModel. Every ``add_*`` method returns the
    builder so calls can be chained.

    Ordering precondition: a parent state must be added before its children.
    A child whose parent id is still unknown is registered as a root state.
    """

    def __init__(
        self,
        factory: Optional[StateFactory] = None,
        rules: Sequence["InjectionRule"] = (),
    ) -> None:
        """
        :param factory: Creates state variants; a default StateFactory if omitted.
        :param rules: Post-build transition injection rules, applied in order by build().
        """
        self._factory = factory or StateFactory()
        self._rules = list(rules)
        self._model = FSMModel()
        self.warnings: List[str] = []

    @property
    def model(self) -> FSMModel:
        """The model under construction."""
        return self._model

    def add_state(
        self,
        state_id: str,
        name: str,
        kind: Union[StateKind, str],
        parent_id: Optional[str] = None,
    ) -> "FSMBuilder":
        """
        Create a state and register it.

        :param state_id: Identifier of the state; re-adding an id replaces the entry.
        :param name: Display name.
        :param kind: A StateKind or its case-insensitive name.
        :param parent_id: Enclosing state id; None, "" or "_" for a root state.
        :raises UnknownKindError: If ``kind`` is not a recognized state kind.
        """
        state = self._factory.create_state(state_id, name, kind)
        model = self._model
        previous = model.states.get(state_id)
        if previous is not None:
            self._forget(previous)
        model.states[state_id] = state

        if state.kind is StateKind.INITIAL:
            model.initial_state = state
            model.current_state = state
        elif state.kind is StateKind.FINAL:
            model.final_states.append(state)

        if parent_id and parent_id != ROOT_PARENT:
            parent = model.states.get(parent_id)
            if parent is not None and parent is not state:
                parent.add_child(state)
            else:
                logger.debug("Parent '%s' of state '%s' is not registered yet, link skipped", parent_id, state_id)

        return self

    def _forget(self, state: State) -> None:
        """Drop every reference the model keeps to a state that is being replaced."""
        model = self._model
        model.final_states = [s for s in model.final_states if s is not state]
        if model.initial_state is state:
            model.initial_state = None
        if model.current_state is state:
            model.current_state = None
        if state.parent is not None:
            state.parent.remove_child(state)
        logger.debug("State '%s' redefined, previous definition replaced", state.id)

    def add_trigger(self, trigger_id: str, name: str) -> "FSMBuilder":
        self._model.triggers[trigger_id] = Trigger(trigger_id, name)
        return self

    def add_action(self, action_id: str, name: str, kind: Union[ActionKind, str]) -> "FSMBuilder":
        """
        Register an action. Attaching it to a state or transition is a separate step.

        :raises UnknownKindError: If ``kind`` is not a recognized action kind.
        """
        self._model.actions[action_id] = Action(action_id, name, ActionKind.parse(kind))
        return self

    def add_entry_action(self, state_id: str, action_id: str) -> "FSMBuilder":
        return self._attach_state_action(state_id, action_id, "entry_actions")

    def add_exit_action(self, state_id: str, action_id: str) -> "FSMBuilder":
        return self._attach_state_action(state_id, action_id, "exit_actions")

    def add_do_action(self, state_id: str, action_id: str) -> "FSMBuilder":
        return self._attach_state_action(state_id, action_id, "do_actions")

    def _attach_state_action(self, state_id: str, action_id: str, slot: str) -> "FSMBuilder":
        state = self._model.states.get(state_id)
        action = self._model.actions.get(action_id)
        if state is not None and action is not None:
            getattr(state, slot).append(action)
        return self

    def add_transition(
        self,
        transition_id: str,
        source_id: str,
        target_id: str,
        trigger_id: str,
        guard: str = "",
    ) -> "FSMBuilder":
        """
        Create and register a transition between two registered states.

        :raises InvalidReferenceError: If the source, target or trigger is not registered.
        """
        model = self._model
        missing = []
        if source_id not in model.states:
            missing.append(f"source state '{source_id}'")
        if target_id not in model.states:
            missing.append(f"target state '{target_id}'")
        if trigger_id not in model.triggers:
            missing.append(f"trigger '{trigger_id}'")
        if missing:
            raise InvalidReferenceError(f"Invalid transition '{transition_id}': unknown {', '.join(missing)}")

        model.transitions[transition_id] = Transition(
            transition_id,
            model.states[source_id],
            model.states[target_id],
            model.triggers[trigger_id],
            guard,
        )
        return self

    def add_transition_action(self, transition_id: str, action_id: str) -> "FSMBuilder":
        transition = self._model.transitions.get(transition_id)
        action = self._model.actions.get(action_id)
        if transition is not None and action is not None:
            transition.actions.append(action)
        return self

    def add_rule(self, rule: "InjectionRule") -> "FSMBuilder":
        self._rules.append(rule)
        return self

    def build(self) -> FSMModel:
        """
        Finalize and return the model.

        Without an explicit initial state the first registered state is used
        instead and a warning is recorded. Injection rules run afterwards, so
        they see the fallback initial state too.
        """
        model = self._model
        if model.initial_state is None and model.states:
            fallback = next(iter(model.states.values()))
            model.initial_state = fallback
            model.current_state = fallback
            message = f"No initial state defined, using first state '{fallback.id}' as initial state"
            logger.warning(message)
            self.warnings.append(message)

        for rule in self._rules:
            added = rule.apply(model)
            for transition in added:
                logger.debug("Injected transition %r", transition)

        return model
