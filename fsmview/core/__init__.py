"""
Core package: the state model, its construction and its validation.
"""

from .actions import Action, ActionKind
from .builder import FSMBuilder
from .errors import (
    DefinitionDecodeError,
    DefinitionNotFoundError,
    FSMError,
    InvalidReferenceError,
    UnknownKindError,
)
from .factory import StateFactory, create_state
from .model import FSMModel, SimulationCursor
from .states import CompoundState, FinalState, InitialState, SimpleState, State, StateKind
from .transitions import Transition
from .triggers import Trigger
from .validations import Validator, validate

__all__ = [
    # State classes
    "State",
    "StateKind",
    "InitialState",
    "SimpleState",
    "CompoundState",
    "FinalState",
    "StateFactory",
    "create_state",
    # Other model classes
    "Action",
    "ActionKind",
    "Trigger",
    "Transition",
    "FSMModel",
    "SimulationCursor",
    # Construction and validation
    "FSMBuilder",
    "Validator",
    "validate",
    # Errors
    "FSMError",
    "UnknownKindError",
    "InvalidReferenceError",
    "DefinitionNotFoundError",
    "DefinitionDecodeError",
]
