# fsmview/core/factory.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from typing import Dict, Type, Union

from fsmview.core.states import CompoundState, FinalState, InitialState, SimpleState, State, StateKind

_VARIANTS: Dict[StateKind, Type[State]] = {
    StateKind.INITIAL: InitialState,
    StateKind.SIMPLE: SimpleState,
    StateKind.COMPOUND: CompoundState,
    StateKind.FINAL: FinalState,
}


class StateFactory:
    """
    Creates the concrete state variant for a kind tag.
    """

    def create_state(self, state_id: str, name: str, kind: Union[StateKind, str]) -> State:
        """
        Build a new, unattached state.

        :param state_id: Identifier of the new state.
        :param name: Display name of the new state.
        :param kind: A StateKind or its case-insensitive name.
        :raises UnknownKindError: If ``kind`` is not one of the four state kinds.
        """
        variant = _VARIANTS[StateKind.parse(kind)]
        return variant(state_id, name)


def create_state(state_id: str, name: str, kind: Union[StateKind, str]) -> State:
    """Shortcut for ``StateFactory().create_state(...)``."""
    return StateFactory().create_state(state_id, name, kind)
