# tests/unit/runtime/test_simulator.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import pytest

from fsmview.core.builder import FSMBuilder
from fsmview.runtime.simulator import Simulator


def make_simulator(model, renderer, io):
    return Simulator(model, renderer, io.reader, io.writer)


@pytest.fixture
def action_model():
    """a --go--> b with exit, transition and entry actions on the way."""
    return (
        FSMBuilder()
        .add_state("a", "A", "INITIAL")
        .add_state("b", "B", "FINAL")
        .add_trigger("go", "Go")
        .add_action("x1", "leave a", "EXIT_ACTION")
        .add_action("x2", "lock a", "EXIT_ACTION")
        .add_action("t1", "travel", "TRANSITION_ACTION")
        .add_action("e1", "arrive b", "ENTRY_ACTION")
        .add_exit_action("a", "x1")
        .add_exit_action("a", "x2")
        .add_transition("tr", "a", "b", "go")
        .add_transition_action("tr", "t1")
        .add_entry_action("b", "e1")
        .build()
    )


@pytest.fixture
def ambiguous_model():
    """Two guarded 'go' transitions leave the initial state."""
    return (
        FSMBuilder()
        .add_state("s", "Start", "INITIAL")
        .add_state("left", "Left", "SIMPLE")
        .add_state("right", "Right", "SIMPLE")
        .add_trigger("go", "Go")
        .add_transition("to_left", "s", "left", "go", "x < 0")
        .add_transition("to_right", "s", "right", "go", "x >= 0")
        .build()
    )


def test_reset_restores_initial_state(linear_model, dummy_renderer, scripted):
    sim = make_simulator(linear_model, dummy_renderer, scripted())
    linear_model.current_state = linear_model.states["s3"]
    sim.reset()
    assert sim.current_state is linear_model.initial_state


def test_execute_transition_runs_actions_in_order(action_model, dummy_renderer, scripted):
    io = scripted()
    sim = make_simulator(action_model, dummy_renderer, io)

    sim.execute_transition(action_model.transitions["tr"])

    assert sim.current_state.id == "b"
    assert io.lines == [
        "Executing transition: a -> b",
        "  Exit action: leave a",
        "  Exit action: lock a",
        "  Transition action: travel",
        "  Entry action: arrive b",
        "*** FINAL STATE REACHED ***",
    ]


def test_entry_actions_run_after_cursor_moves(action_model, scripted):
    positions = []

    class Writer:
        def write_line(self, text=""):
            if text.startswith("  "):
                positions.append((text.strip(), action_model.current_state.id))

    sim = Simulator(action_model, None, scripted().reader, Writer())
    sim.execute_transition(action_model.transitions["tr"])

    assert positions == [
        ("Exit action: leave a", "a"),
        ("Exit action: lock a", "a"),
        ("Transition action: travel", "a"),
        ("Entry action: arrive b", "b"),
    ]


def test_fire_matches_trigger_name_case_insensitively(linear_model, dummy_renderer, scripted):
    sim = make_simulator(linear_model, dummy_renderer, scripted())
    executed = sim.fire("t1")
    assert executed.id == "tr1"
    assert sim.fire("T1").id == "tr2"
    assert sim.current_state.id == "s3"


def test_hierarchical_resolution_uses_parent_transition(nested_model, dummy_renderer, scripted):
    sim = make_simulator(nested_model, dummy_renderer, scripted())
    nested_model.current_state = nested_model.states["working"]

    assert [t.id for t in sim.resolve("stop")] == ["tr_stop"]
    sim.fire("stop")

    assert sim.current_state.id == "stopped"


def test_innermost_level_wins(dummy_renderer, scripted):
    model = (
        FSMBuilder()
        .add_state("i", "Init", "INITIAL")
        .add_state("outer", "Outer", "COMPOUND")
        .add_state("inner", "Inner", "SIMPLE", "outer")
        .add_state("x", "X", "SIMPLE")
        .add_state("y", "Y", "SIMPLE")
        .add_trigger("go", "Go")
        .add_transition("from_inner", "inner", "x", "go")
        .add_transition("from_outer", "outer", "y", "go")
        .build()
    )
    sim = make_simulator(model, dummy_renderer, scripted())
    model.current_state = model.states["inner"]

    assert [t.id for t in sim.resolve("go")] == ["from_inner"]


def test_no_match_reports_suggestions(nested_model, dummy_renderer, scripted):
    io = scripted()
    sim = make_simulator(nested_model, dummy_renderer, io)
    nested_model.current_state = nested_model.states["working"]

    assert sim.fire("unknown") is None

    assert sim.current_state.id == "working"
    assert io.lines == [
        "No transition found for trigger 'unknown' from state 'working'",
        "Available triggers from this state:",
        "  done (Done)",
        "  stop (Stop)",
    ]


def test_available_triggers_are_deduplicated(dummy_renderer, scripted):
    model = (
        FSMBuilder()
        .add_state("a", "A", "INITIAL")
        .add_state("b", "B", "SIMPLE")
        .add_state("c", "C", "SIMPLE")
        .add_trigger("go", "Go")
        .add_transition("t1", "a", "b", "go", "p")
        .add_transition("t2", "a", "c", "go", "q")
        .build()
    )
    sim = make_simulator(model, dummy_renderer, scripted())
    assert [t.id for t in sim.available_triggers()] == ["go"]


def test_ambiguous_trigger_prompts_for_choice(ambiguous_model, dummy_renderer, scripted):
    io = scripted("2")
    sim = make_simulator(ambiguous_model, dummy_renderer, io)

    executed = sim.fire("go")

    assert executed.id == "to_right"
    assert sim.current_state.id == "right"
    assert io.lines[:3] == [
        "Multiple transitions match trigger 'go':",
        "  1. to_left: s -> left [x < 0]",
        "  2. to_right: s -> right [x >= 0]",
    ]


@pytest.mark.parametrize("answer", ["0", "3", "two", ""])
def test_invalid_choice_leaves_state_unchanged(ambiguous_model, dummy_renderer, scripted, answer):
    io = scripted(answer)
    sim = make_simulator(ambiguous_model, dummy_renderer, io)

    assert sim.fire("go") is None

    assert sim.current_state.id == "s"
    assert io.lines[-1] == f"Invalid selection '{answer}', no transition executed"


def test_fire_without_current_state(dummy_renderer, scripted):
    io = scripted()
    sim = make_simulator(FSMBuilder().build(), dummy_renderer, io)
    assert sim.fire("go") is None
    assert "No current state" in io.text


def test_run_show_trigger_reset(dummy_renderer, scripted):
    model = (
        FSMBuilder()
        .add_state("init", "Initial", "INITIAL")
        .add_state("s1", "State1", "SIMPLE")
        .add_state("final", "Final", "FINAL")
        .add_trigger("go", "go")
        .add_transition("t1", "init", "s1", "go")
        .build()
    )
    io = scripted("show", "go", "reset", "show", "quit")

    make_simulator(model, dummy_renderer, io).run()

    assert dummy_renderer.calls == 2
    assert "<rendered model>" in io.text
    assert "Executing transition: init -> s1" in io.text
    assert "FSM reset to initial state" in io.text
    assert model.current_state.id == "init"


def test_run_prints_banner_and_current_state(linear_model, dummy_renderer, scripted):
    io = scripted("quit")
    make_simulator(linear_model, dummy_renderer, io).run()

    assert io.lines[:3] == ["=== FSM SIMULATOR ===", "Available triggers:", "  t1: T1"]
    assert "Current state: s1 (S1)" in io.lines


def test_run_starts_from_initial_state(linear_model, dummy_renderer, scripted):
    linear_model.current_state = linear_model.states["s2"]
    make_simulator(linear_model, dummy_renderer, scripted("quit")).run()
    assert linear_model.current_state.id == "s1"


def test_run_commands_are_case_insensitive_and_blank_lines_ignored(linear_model, dummy_renderer, scripted):
    io = scripted("", "   ", "T1", "SHOW", "QUIT", "t1")
    make_simulator(linear_model, dummy_renderer, io).run()

    assert linear_model.current_state.id == "s2"
    assert dummy_renderer.calls == 1


def test_run_stops_at_end_of_input(linear_model, dummy_renderer, scripted):
    io = scripted("t1", "t1")
    make_simulator(linear_model, dummy_renderer, io).run()

    assert linear_model.current_state.id == "s3"
    assert "*** FINAL STATE REACHED ***" in io.text


def test_final_state_keeps_loop_running(linear_model, dummy_renderer, scripted):
    io = scripted("t1", "t1", "t1", "quit")
    make_simulator(linear_model, dummy_renderer, io).run()

    assert linear_model.current_state.id == "s3"
    assert "No transition found for trigger 't1' from state 's3'" in io.text
    assert "  (none)" in io.lines
