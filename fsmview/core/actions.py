# fsmview/core/actions.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from fsmview.core.errors import UnknownKindError


class ActionKind(Enum):
    """
    Where an action may be attached: a state's entry, exit or do list, or a transition.
    """

    ENTRY_ACTION = "ENTRY_ACTION"
    EXIT_ACTION = "EXIT_ACTION"
    DO_ACTION = "DO_ACTION"
    TRANSITION_ACTION = "TRANSITION_ACTION"

    @classmethod
    def parse(cls, value: Union["ActionKind", str]) -> "ActionKind":
        """
        Resolve an ActionKind from an enum member or a case-insensitive member name.

        :param value: The kind tag to resolve.
        :raises UnknownKindError: If the tag is not a recognized action kind.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                pass
        raise UnknownKindError(f"Unknown action kind: {value!r}")

    @property
    def is_state_action(self) -> bool:
        return self is not ActionKind.TRANSITION_ACTION


@dataclass(frozen=True)
class Action:
    """
    A named action. Actions carry no behavior of their own; the simulator
    reports them by name when the state or transition they belong to fires.
    """

    id: str
    name: str
    kind: ActionKind
