# fsmview/core/validations.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING, Deque, Dict, List, Set, Tuple

from fsmview.core.states import State
from fsmview.core.transitions import Transition
from fsmview.interfaces.types import Diagnostics, StateID, TriggerID

if TYPE_CHECKING:
    from fsmview.core.model import FSMModel


class Validator:
    """
    Static analysis of a built model. Findings are advisory strings; the
    validator never mutates the model and never raises for structural problems.
    """

    def __init__(self) -> None:
        self._rules_engine = _ValidationRulesEngine()

    def validate(self, model: "FSMModel") -> Diagnostics:
        """
        Run every check and collect the findings.

        :param model: The model to inspect.
        :return: Diagnostics in check order; empty when the model is well formed.
        """
        return self._rules_engine.run(model)


class _ValidationRulesEngine:
    """
    Internal engine running each rule independently and concatenating their findings.
    """

    def __init__(self) -> None:
        self._rules = (
            _DefaultValidationRules.check_initial_state,
            _DefaultValidationRules.check_final_states,
            _DefaultValidationRules.check_determinism,
            _DefaultValidationRules.check_reachability,
        )

    def run(self, model: "FSMModel") -> Diagnostics:
        diagnostics: Diagnostics = []
        for rule in self._rules:
            diagnostics.extend(rule(model))
        return diagnostics


class _DefaultValidationRules:
    """
    Built-in rules: initial and final state shape, determinism and reachability.
    """

    @staticmethod
    def check_initial_state(model: "FSMModel") -> List[str]:
        """
        The machine needs an initial state and nothing may transition into it.
        """
        initial = model.initial_state
        if initial is None:
            return ["No initial state defined"]
        if model.transitions_to(initial):
            return [f"Initial state '{initial.id}' has incoming transitions"]
        return []

    @staticmethod
    def check_final_states(model: "FSMModel") -> List[str]:
        return [
            f"Final state '{state.id}' has outgoing transitions"
            for state in model.final_states
            if model.transitions_from(state)
        ]

    @staticmethod
    def check_determinism(model: "FSMModel") -> List[str]:
        """
        Transitions sharing a source and trigger are ambiguous when one of them
        is unguarded or two of them carry the same guard text.
        """
        groups: Dict[Tuple[StateID, TriggerID], List[Transition]] = {}
        for t in model.transitions.values():
            groups.setdefault((t.source.id, t.trigger.id), []).append(t)

        errors = []
        for (source_id, trigger_id), group in groups.items():
            if len(group) < 2 or not _is_ambiguous(group):
                continue
            ids = ", ".join(t.id for t in group)
            errors.append(
                f"Non-deterministic transitions from state '{source_id}' with trigger '{trigger_id}': {ids}"
            )
        return errors

    @staticmethod
    def check_reachability(model: "FSMModel") -> List[str]:
        """
        Breadth-first search from the initial state. Reaching a state also
        reaches every ancestor, whose own transitions are then explored.
        Children of a reached compound are not implied.
        """
        if model.initial_state is None:
            return []

        reachable: Set[str] = set()
        queue: Deque[State] = deque()

        def mark(state: State) -> None:
            for s in (state, *state.ancestors()):
                if s.id not in reachable:
                    reachable.add(s.id)
                    queue.append(s)

        mark(model.initial_state)
        while queue:
            current = queue.popleft()
            for t in model.transitions_from(current):
                mark(t.target)

        return [
            f"State '{state_id}' is not reachable from initial state"
            for state_id in model.states
            if state_id not in reachable
        ]


def _is_ambiguous(group: List[Transition]) -> bool:
    seen: Set[str] = set()
    for t in group:
        if not t.is_guarded or t.guard in seen:
            return True
        seen.add(t.guard)
    return False


def validate(model: "FSMModel") -> Diagnostics:
    """Shortcut for ``Validator().validate(model)``."""
    return Validator().validate(model)
