# tests/unit/core/test_triggers_actions.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import dataclasses

import pytest

from fsmview.core.actions import Action, ActionKind
from fsmview.core.errors import UnknownKindError
from fsmview.core.states import SimpleState
from fsmview.core.transitions import Transition
from fsmview.core.triggers import Trigger


def test_trigger_matches_id_or_name_case_insensitively():
    trigger = Trigger("t_go", "Go Now")
    assert trigger.matches("T_GO")
    assert trigger.matches("go now")
    assert not trigger.matches("go")


def test_anonymous_trigger_never_matches_empty_token():
    trigger = Trigger("__tr1__", "")
    assert not trigger.matches("")
    assert not trigger.matches("   ")
    assert trigger.matches("__tr1__")


def test_trigger_is_immutable():
    trigger = Trigger("t", "T")
    with pytest.raises(dataclasses.FrozenInstanceError):
        trigger.name = "other"


def test_action_kind_parse():
    assert ActionKind.parse("do_action") is ActionKind.DO_ACTION
    assert ActionKind.parse(ActionKind.EXIT_ACTION) is ActionKind.EXIT_ACTION
    assert ActionKind.ENTRY_ACTION.is_state_action
    assert not ActionKind.TRANSITION_ACTION.is_state_action
    with pytest.raises(UnknownKindError, match="Unknown action kind"):
        ActionKind.parse("ENTRY")


def test_transition_properties():
    source = SimpleState("a", "A")
    target = SimpleState("b", "B")
    trigger = Trigger("t", "T")
    action = Action("x", "beep", ActionKind.TRANSITION_ACTION)

    t = Transition("tr", source, target, trigger, actions=[action])

    assert t.source is source
    assert t.target is target
    assert t.trigger is trigger
    assert t.guard == ""
    assert not t.is_guarded
    assert t.actions == [action]
    assert t.describe() == "tr: a -> b"


def test_guarded_transition_description():
    t = Transition("tr", SimpleState("a", "A"), SimpleState("b", "B"), Trigger("t", "T"), guard="x > 1")
    assert t.is_guarded
    assert t.describe() == "tr: a -> b [x > 1]"
