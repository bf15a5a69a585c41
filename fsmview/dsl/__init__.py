"""
The FSM definition language: parsing text and loading definition files.
"""

from .loader import find_definition, load_model, read_definition
from .parser import FSMParser, parse, split_statements

__all__ = ["FSMParser", "parse", "split_statements", "load_model", "read_definition", "find_definition"]
