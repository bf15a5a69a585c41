"""
Optional post-build rules that can be handed to ``FSMBuilder``.
"""

from .injection_rules import DuplicateOntoCompoundRule, legacy_power_on_rule

__all__ = ["DuplicateOntoCompoundRule", "legacy_power_on_rule"]
