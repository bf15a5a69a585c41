# fsmview/interfaces/types.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
from typing import List

StateID = str
TriggerID = str

# Validator output: ordered, human readable findings.
Diagnostics = List[str]
