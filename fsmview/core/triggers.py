# fsmview/core/triggers.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from dataclasses import dataclass


@dataclass(frozen=True)
class Trigger:
    """
    Represents a named event that transitions listen for. Triggers are
    immutable after creation and identified primarily by id.
    """

    id: str
    name: str

    def matches(self, token: str) -> bool:
        """
        Check whether a user-supplied token selects this trigger.

        :param token: Trigger id or name, compared case-insensitively.
        :return: True if the token equals the id or the (non-empty) name.
        """
        wanted = token.strip().lower()
        if not wanted:
            return False
        return wanted == self.id.lower() or wanted == self.name.lower()
