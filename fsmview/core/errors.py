# fsmview/core/errors.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details


class FSMError(Exception):
    """
    Base exception class for errors raised while building or loading a state machine.
    """


class UnknownKindError(FSMError):
    """
    Raised when a state or action kind tag is not one of the recognized kinds.
    """


class InvalidReferenceError(FSMError):
    """
    Raised when a transition references a state or trigger that has not been registered.
    """


class DefinitionNotFoundError(FSMError, FileNotFoundError):
    """
    Raised when a DSL definition file cannot be found.
    """


class DefinitionDecodeError(FSMError, ValueError):
    """
    Raised when a DSL definition file is not valid UTF-8 text.
    """
