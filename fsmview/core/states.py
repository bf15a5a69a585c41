# fsmview/core/states.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Iterator, List, Optional, Union
from weakref import ReferenceType, ref

from fsmview.core.errors import UnknownKindError

if TYPE_CHECKING:
    from fsmview.core.actions import Action


class StateKind(Enum):
    """
    The closed set of state variants a definition may declare.
    """

    INITIAL = "INITIAL"
    SIMPLE = "SIMPLE"
    COMPOUND = "COMPOUND"
    FINAL = "FINAL"

    @classmethod
    def parse(cls, value: Union["StateKind", str]) -> "StateKind":
        """
        Resolve a StateKind from an enum member or a case-insensitive member name.

        :param value: The kind tag to resolve.
        :raises UnknownKindError: If the tag is not a recognized state kind.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                pass
        raise UnknownKindError(f"Unknown state kind: {value!r}")


class State:
    """
    Base class for every state variant. A state owns its children and keeps
    only a weak reference to its parent, so the hierarchy never forms a
    strong reference cycle.

    Invariant: if ``child.parent is p`` then ``p.children`` holds ``child``
    exactly once.
    """

    kind: StateKind

    def __init__(self, state_id: str, name: str) -> None:
        """
        Initialize a state with its identity and display name.

        :param state_id: Identifier unique across the whole model.
        :param name: Human readable name.
        """
        self._id = state_id
        self.name = name
        self._parent: Optional[ReferenceType[State]] = None
        self.children: List[State] = []
        self.entry_actions: List["Action"] = []
        self.exit_actions: List["Action"] = []
        self.do_actions: List["Action"] = []

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self._id!r}, name={self.name!r})"

    @property
    def id(self) -> str:
        """The state identifier."""
        return self._id

    @property
    def parent(self) -> Optional["State"]:
        """The enclosing state, or None for a root state."""
        return self._parent() if self._parent is not None else None

    def add_child(self, child: "State") -> None:
        """
        Adopt a state as a child, linking both directions. A child that already
        belongs to another parent is moved.

        :param child: The state to nest under this one.
        :raises ValueError: If the link would make a state its own ancestor.
        """
        if child is self or any(a is child for a in self.ancestors()):
            raise ValueError(f"Adding state '{child.id}' under '{self.id}' would create a cycle")

        current = child.parent
        if current is self:
            return
        if current is not None:
            current.remove_child(child)

        self.children.append(child)
        child._parent = ref(self)

    def remove_child(self, child: "State") -> None:
        """Detach a child. A state that is not a child of this one is ignored."""
        if any(c is child for c in self.children):
            self.children = [c for c in self.children if c is not child]
            child._parent = None

    def ancestors(self) -> Iterator["State"]:
        """Yield the parent, grandparent and so on up to the root."""
        current = self.parent
        while current is not None:
            yield current
            current = current.parent

    def clone(self) -> "State":
        """
        Deep copy this state and its subtree. Ids and names are preserved and
        each cloned child points back at its cloned parent. The copy is
        detached: it has no parent of its own.
        """
        copy = type(self)(self._id, self.name)
        copy.entry_actions = list(self.entry_actions)
        copy.exit_actions = list(self.exit_actions)
        copy.do_actions = list(self.do_actions)
        for child in self.children:
            copy.add_child(child.clone())
        return copy


class InitialState(State):
    """The state a machine starts in and returns to on reset."""

    kind = StateKind.INITIAL


class SimpleState(State):
    """A leaf state."""

    kind = StateKind.SIMPLE


class CompoundState(State):
    """
    A state containing nested child states. Transitions leaving a compound
    state also apply to every state nested inside it.
    """

    kind = StateKind.COMPOUND


class FinalState(State):
    """A terminal state. A well-formed final state has no outgoing transitions."""

    kind = StateKind.FINAL
