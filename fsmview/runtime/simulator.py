# fsmview/runtime/simulator.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import logging
from typing import List, Optional

from fsmview.core.model import FSMModel
from fsmview.core.states import State
from fsmview.core.transitions import Transition
from fsmview.core.triggers import Trigger
from fsmview.interfaces.protocols import LineReader, LineWriter, Renderer
from fsmview.runtime.console import ConsoleReader, ConsoleWriter

logger = logging.getLogger(__name__)

QUIT = "quit"
SHOW = "show"
RESET = "reset"


class Simulator:
    """
    Interactive execution of a model. Reads one command per line and moves
    the model's cursor; the model's structure is never modified.

    Triggers are resolved hierarchically: transitions leaving the current
    state are searched first, then those leaving its parent, and so on up to
    the root. The first level with any match wins.
    """

    def __init__(
        self,
        model: FSMModel,
        renderer: Renderer,
        reader: Optional[LineReader] = None,
        writer: Optional[LineWriter] = None,
    ) -> None:
        """
        :param model: The model to drive.
        :param renderer: Produces the ``show`` output.
        :param reader: Source of command lines; standard input if omitted.
        :param writer: Sink for user-facing output; standard output if omitted.
        """
        self._model = model
        self._renderer = renderer
        self._reader = reader or ConsoleReader()
        self._writer = writer or ConsoleWriter()

    @property
    def model(self) -> FSMModel:
        return self._model

    @property
    def current_state(self) -> Optional[State]:
        return self._model.current_state

    def reset(self) -> None:
        """Return the cursor to the initial state."""
        self._model.reset()

    def run(self) -> None:
        """
        Run the command loop until ``quit`` or end of input.
        """
        self.reset()
        self._print_banner()

        while True:
            current = self._model.current_state
            if current is not None:
                self._write(f"Current state: {current.id} ({current.name})")

            line = self._reader.read_line("Enter trigger: ")
            if line is None:
                break
            command = line.strip()
            keyword = command.lower()

            if keyword == QUIT:
                break
            if keyword == SHOW:
                self._write(self._renderer.render(self._model))
                continue
            if keyword == RESET:
                self.reset()
                self._write("FSM reset to initial state")
                continue
            if not command:
                continue

            self.fire(command)
            self._write()

    def fire(self, token: str) -> Optional[Transition]:
        """
        Resolve a trigger token and execute the chosen transition.

        :param token: Trigger id or name, matched case-insensitively.
        :return: The executed transition, or None when nothing was executed.
        """
        current = self._model.current_state
        if current is None:
            self._write("No current state, load a model with an initial state first")
            return None

        candidates = self.resolve(token)
        if not candidates:
            self._report_no_match(token, current)
            return None

        transition = candidates[0] if len(candidates) == 1 else self._choose(token, candidates)
        if transition is None:
            return None

        self.execute_transition(transition)
        return transition

    def resolve(self, token: str) -> List[Transition]:
        """
        Find the transitions the token would fire from the current state.
        Matches from different hierarchy levels are never merged.
        """
        state = self._model.current_state
        while state is not None:
            matches = [t for t in self._model.transitions_from(state) if t.trigger.matches(token)]
            if matches:
                return matches
            state = state.parent
        return []

    def available_triggers(self) -> List[Trigger]:
        """
        Distinct triggers of the transitions leaving the current state or any of its ancestors.
        """
        current = self._model.current_state
        if current is None:
            return []
        seen: List[Trigger] = []
        for state in (current, *current.ancestors()):
            for t in self._model.transitions_from(state):
                if t.trigger not in seen:
                    seen.append(t.trigger)
        return seen

    def execute_transition(self, transition: Transition) -> None:
        """
        Take a transition: exit actions of the source, then the transition's
        own actions, then move the cursor, then entry actions of the target.
        """
        source, target = transition.source, transition.target
        logger.debug("Executing %r", transition)
        self._write(f"Executing transition: {source.id} -> {target.id}")

        for action in source.exit_actions:
            self._write(f"  Exit action: {action.name}")
        for action in transition.actions:
            self._write(f"  Transition action: {action.name}")

        self._model.current_state = target

        for action in target.entry_actions:
            self._write(f"  Entry action: {action.name}")

        if self._model.is_final(target):
            self._write("*** FINAL STATE REACHED ***")

    def _choose(self, token: str, candidates: List[Transition]) -> Optional[Transition]:
        self._write(f"Multiple transitions match trigger '{token}':")
        for number, t in enumerate(candidates, start=1):
            self._write(f"  {number}. {t.describe()}")

        answer = self._reader.read_line(f"Choose transition (1-{len(candidates)}): ")
        try:
            index = int((answer or "").strip())
        except ValueError:
            index = 0
        if not 1 <= index <= len(candidates):
            self._write(f"Invalid selection '{answer or ''}', no transition executed")
            return None
        return candidates[index - 1]

    def _report_no_match(self, token: str, current: State) -> None:
        self._write(f"No transition found for trigger '{token}' from state '{current.id}'")
        self._write("Available triggers from this state:")
        triggers = self.available_triggers()
        if not triggers:
            self._write("  (none)")
        for trigger in triggers:
            self._write(f"  {trigger.id} ({trigger.name})")

    def _print_banner(self) -> None:
        self._write("=== FSM SIMULATOR ===")
        self._write("Available triggers:")
        for trigger in self._model.triggers.values():
            self._write(f"  {trigger.id}: {trigger.name}")
        self._write("Type 'quit' to exit, 'show' to display the model, 'reset' to restart")
        self._write()

    def _write(self, text: str = "") -> None:
        self._writer.write_line(text)
