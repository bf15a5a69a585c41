# fsmview/render/__init__.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from .text import TextRenderer

__all__ = ["TextRenderer"]
