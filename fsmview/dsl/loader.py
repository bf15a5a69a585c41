# fsmview/dsl/loader.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import logging
import os
from typing import List, Optional, Sequence, Tuple

from fsmview.core.builder import FSMBuilder
from fsmview.core.errors import DefinitionDecodeError, DefinitionNotFoundError
from fsmview.core.model import FSMModel
from fsmview.dsl.parser import FSMParser
from fsmview.interfaces.protocols import InjectionRule

logger = logging.getLogger(__name__)


def find_definition(name: str, root: Optional[str] = None) -> Optional[str]:
    """
    Locate a definition file. An existing path is returned as is; otherwise
    the tree below ``root`` is searched for a file with that name.

    :param name: A path, or a bare file name to search for.
    :param root: Directory to search; the working directory if omitted.
    :return: The first match in sorted walk order, or None.
    """
    if os.path.isfile(name):
        return name

    wanted = os.path.basename(name)
    for dirpath, dirnames, filenames in os.walk(root or os.getcwd()):
        dirnames.sort()
        if wanted in filenames:
            return os.path.join(dirpath, wanted)
    return None


def read_definition(path: str) -> str:
    """
    Read a definition file.

    :param path: Path to the file.
    :raises DefinitionNotFoundError: If no file exists at ``path``.
    :raises DefinitionDecodeError: If the file is not valid UTF-8.
    """
    if not os.path.isfile(path):
        raise DefinitionNotFoundError(f"File not found: {path}")
    try:
        with open(path, encoding="utf-8") as f:
            return f.read()
    except UnicodeDecodeError as e:
        raise DefinitionDecodeError(f"File is not valid UTF-8: {path} ({e.reason} at byte {e.start})") from e


def load_model(path: str, rules: Sequence[InjectionRule] = ()) -> Tuple[FSMModel, List[str]]:
    """
    Read and parse a definition file.

    :return: The built model and the parser warnings.
    """
    logger.debug("Loading FSM definition from %s", path)
    parser = FSMParser(FSMBuilder(rules=rules))
    model = parser.parse(read_definition(path))
    return model, parser.warnings
