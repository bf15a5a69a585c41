# fsmview/interfaces/protocols.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
from typing import TYPE_CHECKING, List, Optional, Protocol, runtime_checkable

if TYPE_CHECKING:
    from fsmview.core.model import FSMModel
    from fsmview.core.transitions import Transition


@runtime_checkable
class Renderer(Protocol):
    """
    Renderer protocol consumed by the simulator.

    Runtime Invariants:
    - Rendering is read-only; the model and its cursor are left untouched.
    - It may be called any number of times.
    """

    def render(self, model: "FSMModel") -> str:
        """Return a text projection of the model."""
        ...


@runtime_checkable
class LineReader(Protocol):
    """
    Source of user input lines.

    Methods:
        read_line(prompt): Show the prompt and return the next line without
        its newline, or None once input is exhausted.
    """

    def read_line(self, prompt: str = "") -> Optional[str]: ...


@runtime_checkable
class LineWriter(Protocol):
    """Sink for user-facing output, one line at a time."""

    def write_line(self, text: str = "") -> None: ...


@runtime_checkable
class InjectionRule(Protocol):
    """
    A post-build rule that may add transitions to a freshly built model.

    Runtime Invariants:
    - Rules only add transitions; they never remove or rewire existing ones.
    - Applying the same rule twice adds nothing the second time.
    """

    def apply(self, model: "FSMModel") -> List["Transition"]:
        """Add transitions to the model and return the ones that were added."""
        ...
