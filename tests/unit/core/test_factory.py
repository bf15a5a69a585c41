# tests/unit/core/test_factory.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import pytest

from fsmview.core.errors import UnknownKindError
from fsmview.core.factory import StateFactory, create_state
from fsmview.core.states import CompoundState, FinalState, InitialState, SimpleState, StateKind


def test_factory_creates_correct_variants():
    factory = StateFactory()

    assert isinstance(factory.create_state("i1", "InitState", StateKind.INITIAL), InitialState)
    assert isinstance(factory.create_state("s1", "SimpleState", StateKind.SIMPLE), SimpleState)
    assert isinstance(factory.create_state("c1", "CompoundState", StateKind.COMPOUND), CompoundState)
    assert isinstance(factory.create_state("f1", "FinalState", StateKind.FINAL), FinalState)


def test_factory_accepts_kind_names():
    state = create_state("c1", "Compound", "compound")
    assert isinstance(state, CompoundState)
    assert state.id == "c1"
    assert state.name == "Compound"


def test_factory_rejects_unknown_kind():
    with pytest.raises(UnknownKindError, match="HISTORY"):
        StateFactory().create_state("h", "History", "HISTORY")


def test_factory_returns_fresh_instances():
    factory = StateFactory()
    assert factory.create_state("s", "S", "SIMPLE") is not factory.create_state("s", "S", "SIMPLE")
