# fsmview/dsl/parser.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

"""
Parser for the FSM definition language.

A definition is a sequence of ``;``-terminated statements; ``#`` starts a
comment running to the end of the line (write ``\\#`` for a literal hash)::

    STATE <id> <parentId|_> "<name>" : <INITIAL|SIMPLE|COMPOUND|FINAL>
    TRIGGER <id> "<name>"
    ACTION <id> "<name>" : <ENTRY_ACTION|EXIT_ACTION|DO_ACTION|TRANSITION_ACTION> [ON <ownerId>]
    TRANSITION <id> <sourceId> -> <targetId> [<triggerId>] ["<guard>"]

The optional ``ON <ownerId>`` clause attaches an action to a state (entry,
exit and do actions) or to a transition (transition actions). The owner has
to be defined earlier in the text.

Parsing is best effort: a statement that cannot be understood is reported
in ``FSMParser.warnings`` and skipped.
"""

from __future__ import annotations

import logging
import re
from typing import Callable, Dict, List, Optional, Sequence

from fsmview.core.actions import ActionKind
from fsmview.core.builder import FSMBuilder
from fsmview.core.errors import InvalidReferenceError, UnknownKindError
from fsmview.core.model import FSMModel
from fsmview.interfaces.protocols import InjectionRule

logger = logging.getLogger(__name__)

_COMMENT = re.compile(r"(?<!\\)#[^\n]*")

_STATE = re.compile(r'^STATE\s+(\w+)\s+(\w+)\s+"([^"]*)"\s*:\s*(\w+)$', re.IGNORECASE)
_TRIGGER = re.compile(r'^TRIGGER\s+(\w+)\s+"([^"]*)"$', re.IGNORECASE)
_ACTION = re.compile(r'^ACTION\s+(\w+)\s+"([^"]*)"\s*:\s*(\w+)(?:\s+ON\s+(\w+))?$', re.IGNORECASE)
_TRANSITION = re.compile(
    r'^TRANSITION\s+(\w+)\s+(\w+)\s*->\s*(\w+)(?:\s+(\w+))?(?:\s+"([^"]*)")?$',
    re.IGNORECASE,
)


def split_statements(text: str) -> List[str]:
    """
    Strip comments and split a definition into trimmed, non-empty statements.
    """
    uncommented = _COMMENT.sub("", text).replace("\\#", "#")
    return [s.strip() for s in uncommented.split(";") if s.strip()]


class FSMParser:
    """
    Turns definition text into builder calls and returns the built model.
    The parser performs no file I/O; see ``fsmview.dsl.loader`` for that.
    """

    def __init__(self, builder: Optional[FSMBuilder] = None) -> None:
        """
        :param builder: Builder receiving the parsed statements; a fresh one if omitted.
        """
        self._builder = builder or FSMBuilder()
        self.warnings: List[str] = []
        self._handlers: Dict[str, Callable[[str], None]] = {
            "STATE": self._parse_state,
            "TRIGGER": self._parse_trigger,
            "ACTION": self._parse_action,
            "TRANSITION": self._parse_transition,
        }

    def parse(self, text: str) -> FSMModel:
        """
        Parse a definition and build the model.

        :param text: The full definition text.
        :return: The model holding every statement that parsed successfully.
        """
        for statement in split_statements(text):
            keyword = statement.split(None, 1)[0].upper()
            handler = self._handlers.get(keyword)
            if handler is None:
                self._warn(f"Unknown statement ignored: '{statement}'")
                continue
            handler(statement)

        # Only builder warnings raised by this build are new.
        seen = len(self._builder.warnings)
        model = self._builder.build()
        self.warnings.extend(self._builder.warnings[seen:])
        return model

    parse_string = parse

    def _warn(self, message: str) -> None:
        logger.warning(message)
        self.warnings.append(message)

    def _parse_state(self, statement: str) -> None:
        m = _STATE.match(statement)
        if not m:
            self._warn(f"Invalid STATE statement: '{statement}'")
            return
        state_id, parent_id, name, kind = m.groups()
        try:
            self._builder.add_state(state_id, name, kind, parent_id)
        except UnknownKindError as e:
            self._warn(f"{e} in: '{statement}'")

    def _parse_trigger(self, statement: str) -> None:
        m = _TRIGGER.match(statement)
        if not m:
            self._warn(f"Invalid TRIGGER statement: '{statement}'")
            return
        self._builder.add_trigger(*m.groups())

    def _parse_action(self, statement: str) -> None:
        m = _ACTION.match(statement)
        if not m:
            self._warn(f"Invalid ACTION statement: '{statement}'")
            return
        action_id, name, kind_name, owner_id = m.groups()
        try:
            kind = ActionKind.parse(kind_name)
        except UnknownKindError as e:
            self._warn(f"{e} in: '{statement}'")
            return

        self._builder.add_action(action_id, name, kind)
        if owner_id:
            self._bind_action(action_id, kind, owner_id)

    def _bind_action(self, action_id: str, kind: ActionKind, owner_id: str) -> None:
        model = self._builder.model
        if kind is ActionKind.TRANSITION_ACTION:
            if owner_id not in model.transitions:
                self._warn(f"Action '{action_id}' bound to unknown transition '{owner_id}'")
                return
            self._builder.add_transition_action(owner_id, action_id)
            return

        if owner_id not in model.states:
            self._warn(f"Action '{action_id}' bound to unknown state '{owner_id}'")
            return
        attach = {
            ActionKind.ENTRY_ACTION: self._builder.add_entry_action,
            ActionKind.EXIT_ACTION: self._builder.add_exit_action,
            ActionKind.DO_ACTION: self._builder.add_do_action,
        }[kind]
        attach(owner_id, action_id)

    def _parse_transition(self, statement: str) -> None:
        m = _TRANSITION.match(statement)
        if not m:
            self._warn(f"Invalid TRANSITION statement: '{statement}'")
            return
        transition_id, source_id, target_id, trigger_id, guard = m.groups()

        if not trigger_id:
            trigger_id = f"__{transition_id}__"
            self._builder.add_trigger(trigger_id, "")

        try:
            self._builder.add_transition(transition_id, source_id, target_id, trigger_id, guard or "")
        except InvalidReferenceError as e:
            self._warn(f"Could not add transition '{transition_id}': {e}")


def parse(text: str, rules: Sequence[InjectionRule] = ()) -> FSMModel:
    """
    Parse definition text with a fresh builder.

    :param text: The full definition text.
    :param rules: Post-build injection rules handed to the builder.
    """
    return FSMParser(FSMBuilder(rules=rules)).parse(text)
