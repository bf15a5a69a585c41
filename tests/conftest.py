# tests/conftest.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import io

import pytest

from fsmview.core.builder import FSMBuilder
from fsmview.runtime.console import StreamReader, StreamWriter


def pytest_configure(config):
    """Register custom marks."""
    config.addinivalue_line("markers", "legacy: covers the hard-coded power-on special case, not a general contract")
    config.addinivalue_line("markers", "integration: end-to-end test from definition text to simulation")
    config.addinivalue_line("markers", "property: property-based test driven by hypothesis")


class ScriptedIO:
    """Scripted input lines plus captured output for simulator and menu tests."""

    def __init__(self, *lines):
        self.reader = StreamReader(io.StringIO("".join(f"{line}\n" for line in lines)))
        self._out = io.StringIO()
        self.writer = StreamWriter(self._out)

    @property
    def text(self) -> str:
        return self._out.getvalue()

    @property
    def lines(self):
        return self.text.splitlines()


class DummyRenderer:
    """Renderer stub that records how often it was asked to render."""

    def __init__(self):
        self.calls = 0

    def render(self, model):
        self.calls += 1
        return "<rendered model>"


@pytest.fixture
def scripted():
    """Factory building a ScriptedIO from input lines."""
    return ScriptedIO


@pytest.fixture
def dummy_renderer():
    return DummyRenderer()


@pytest.fixture
def builder():
    return FSMBuilder()


@pytest.fixture
def linear_model():
    """s1 (initial) --t1--> s2 --t1--> s3 (final)."""
    return (
        FSMBuilder()
        .add_state("s1", "S1", "INITIAL")
        .add_state("s2", "S2", "SIMPLE")
        .add_state("s3", "S3", "FINAL")
        .add_trigger("t1", "T1")
        .add_transition("tr1", "s1", "s2", "t1")
        .add_transition("tr2", "s2", "s3", "t1")
        .build()
    )


@pytest.fixture
def nested_model():
    """
    idle (initial) --start--> working, nested in the compound 'active'.
    active --stop--> stopped is only defined on the compound.
    working --done--> finished (final).
    """
    return (
        FSMBuilder()
        .add_state("idle", "Idle", "INITIAL")
        .add_state("active", "Active", "COMPOUND")
        .add_state("working", "Working", "SIMPLE", "active")
        .add_state("stopped", "Stopped", "SIMPLE")
        .add_state("finished", "Finished", "FINAL")
        .add_trigger("start", "Start")
        .add_trigger("stop", "Stop")
        .add_trigger("done", "Done")
        .add_transition("tr_start", "idle", "working", "start")
        .add_transition("tr_stop", "active", "stopped", "stop")
        .add_transition("tr_done", "working", "finished", "done")
        .build()
    )
