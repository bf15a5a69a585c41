# fsmview/render/text.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from typing import Dict, List

from fsmview.core.model import FSMModel
from fsmview.core.states import State, StateKind

_TAGS: Dict[StateKind, str] = {
    StateKind.INITIAL: "[INITIAL]",
    StateKind.SIMPLE: "[SIMPLE]",
    StateKind.COMPOUND: "[COMPOUND]",
    StateKind.FINAL: "[FINAL]",
}

INDENT = "  "


class TextRenderer:
    """
    Renders a model as indented plain text: the state tree, the transitions
    and the current state. Rendering never touches the cursor.
    """

    def render(self, model: FSMModel) -> str:
        lines = ["=== FSM MODEL ===", "", "STATES:"]
        for state in model.root_states():
            self._render_state(state, 0, lines)
        lines.append("")

        lines.append("TRANSITIONS:")
        for t in model.transitions.values():
            guard = f" [{t.guard}]" if t.guard else ""
            line = f"{INDENT}{t.source.id} --{t.trigger.id}{guard}--> {t.target.id}"
            if t.actions:
                line += " / " + ", ".join(a.name for a in t.actions)
            lines.append(line)
        lines.append("")

        current = model.current_state
        if current is not None:
            lines.append(f"CURRENT STATE: {current.id} ({current.name})")

        return "\n".join(lines) + "\n"

    def _render_state(self, state: State, depth: int, lines: List[str]) -> None:
        pad = INDENT * depth
        lines.append(f"{pad}{_TAGS[state.kind]} {state.id}: {state.name}")

        # Action lists sit one level deeper than their state.
        for label, actions in (
            ("Entry", state.entry_actions),
            ("Exit", state.exit_actions),
            ("Do", state.do_actions),
        ):
            if actions:
                lines.append(f"{pad}{INDENT}{label}: {', '.join(a.name for a in actions)}")

        for child in state.children:
            self._render_state(child, depth + 1, lines)
