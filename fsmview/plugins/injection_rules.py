# fsmview/plugins/injection_rules.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import logging
from typing import List

from fsmview.core.model import FSMModel
from fsmview.core.states import StateKind
from fsmview.core.transitions import Transition

logger = logging.getLogger(__name__)

LEGACY_POWER_ON_COMPOUND = "powered_on"
LEGACY_POWER_ON_TRIGGER = "power_on"


class DuplicateOntoCompoundRule:
    """
    Copies the initial state's transitions for one trigger onto a compound
    state, so the trigger also fires from anywhere inside that compound.

    Each copy keeps target, trigger, guard and actions, takes the compound
    as its source and gets the id ``<original id>__<compound id>``. A copy is
    skipped when the compound already has a transition with the same target
    and trigger.
    """

    def __init__(self, compound_id: str, trigger_id: str) -> None:
        """
        :param compound_id: Id of the compound state receiving the copies.
        :param trigger_id: Trigger id to copy, compared case-insensitively.
        """
        self.compound_id = compound_id
        self.trigger_id = trigger_id

    def __repr__(self) -> str:
        return f"DuplicateOntoCompoundRule(compound_id={self.compound_id!r}, trigger_id={self.trigger_id!r})"

    def apply(self, model: FSMModel) -> List[Transition]:
        compound = model.states.get(self.compound_id)
        initial = model.initial_state
        if compound is None or compound.kind is not StateKind.COMPOUND or initial is None:
            return []

        wanted = self.trigger_id.lower()
        added = []
        for transition in list(model.transitions.values()):
            if transition.source.id != initial.id or transition.trigger.id.lower() != wanted:
                continue
            if self._has_equivalent(model, compound.id, transition):
                continue

            copy = Transition(
                f"{transition.id}__{compound.id}",
                compound,
                transition.target,
                transition.trigger,
                transition.guard,
                transition.actions,
            )
            model.transitions[copy.id] = copy
            added.append(copy)

        if added:
            logger.debug("%r added %d transition(s)", self, len(added))
        return added

    @staticmethod
    def _has_equivalent(model: FSMModel, source_id: str, transition: Transition) -> bool:
        return any(
            t.source.id == source_id
            and t.target.id == transition.target.id
            and t.trigger.id == transition.trigger.id
            for t in model.transitions.values()
        )


def legacy_power_on_rule() -> DuplicateOntoCompoundRule:
    """
    The historical special case: ``power_on`` transitions leaving the initial
    state are mirrored onto the ``powered_on`` compound state.
    """
    return DuplicateOntoCompoundRule(LEGACY_POWER_ON_COMPOUND, LEGACY_POWER_ON_TRIGGER)
