"""fsmview: define, validate and simulate hierarchical finite state machines

A definition is written in a small text language, parsed into a model of
nested states, transitions, triggers and actions, checked by a static
validator and then stepped through interactively by the simulator.

Responsibilities:
    - Parsing definition text (``fsmview.dsl``)
    - Building and validating the model (``fsmview.core``)
    - Interactive simulation with hierarchical trigger resolution (``fsmview.runtime``)
    - Plain text rendering (``fsmview.render``)

Error Handling:
    - Construction errors derive from ``FSMError``
    - Parse problems are collected as warnings, never raised
    - Validation findings are returned as strings
"""

__version__ = "0.1.0"
