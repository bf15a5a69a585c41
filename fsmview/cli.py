# fsmview/cli.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

"""
Command line front end: a small menu to load a definition file and run the
simulator on it, or a one-shot ``--validate`` mode for scripts.
"""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional, Sequence

from fsmview import __version__
from fsmview.core.errors import FSMError
from fsmview.core.model import FSMModel
from fsmview.core.validations import Validator
from fsmview.dsl.loader import find_definition, load_model
from fsmview.interfaces.protocols import InjectionRule, LineReader, LineWriter, Renderer
from fsmview.plugins.injection_rules import legacy_power_on_rule
from fsmview.render.text import TextRenderer
from fsmview.runtime.console import ConsoleReader, ConsoleWriter
from fsmview.runtime.simulator import Simulator

logger = logging.getLogger(__name__)


class MenuApp:
    """
    The interactive menu: ``1`` runs the simulator on the loaded model,
    ``2`` loads a file, ``3`` exits.
    """

    def __init__(
        self,
        reader: Optional[LineReader] = None,
        writer: Optional[LineWriter] = None,
        rules: Sequence[InjectionRule] = (),
        renderer: Optional[Renderer] = None,
        validator: Optional[Validator] = None,
    ) -> None:
        self._reader = reader or ConsoleReader()
        self._writer = writer or ConsoleWriter()
        self._rules = list(rules)
        self._renderer = renderer or TextRenderer()
        self._validator = validator or Validator()
        self.model: Optional[FSMModel] = None

    def load(self, path: str) -> List[str]:
        """
        Load, validate and display a definition file.

        :return: The validation diagnostics; empty when the model is valid.
        :raises FSMError: If the file is missing.
        :raises OSError: If the file cannot be read.
        """
        self._write(f"Attempting to load FSM from: {path}")
        model, warnings = load_model(path, self._rules)
        for warning in warnings:
            self._write(f"WARNING: {warning}")

        diagnostics = self._validator.validate(model)
        if diagnostics:
            self._write("=== VALIDATION ERRORS ===")
            for message in diagnostics:
                self._write(f"ERROR: {message}")
            self._write()

        self._write(self._renderer.render(model))
        self.model = model
        return diagnostics

    def run(self) -> None:
        while True:
            self._write()
            self._write("Options:")
            self._write("1. Run simulator")
            self._write("2. Load from file")
            self._write("3. Exit")
            choice = self._reader.read_line("Choose option (1-3): ")
            self._write()
            if choice is None:
                return
            choice = choice.strip()

            if choice == "1":
                if self.model is None:
                    self._write("No FSM loaded, choose option 2 first.")
                    continue
                Simulator(self.model, self._renderer, self._reader, self._writer).run()
            elif choice == "2":
                self._prompt_load()
            elif choice == "3":
                return
            else:
                self._write("Invalid choice, try again.")

    def _prompt_load(self) -> None:
        path = (self._reader.read_line("Enter file name: ") or "").strip().strip('"').strip()
        if not path:
            self._write("No file name given.")
            return
        self.try_load(find_definition(path) or path)

    def try_load(self, path: str) -> bool:
        """Load a file, reporting failures to the user instead of raising."""
        try:
            self.load(path)
        except (FSMError, OSError) as e:
            logger.debug("Loading %s failed", path, exc_info=True)
            self._write(f"Error while loading: {e}")
            return False
        self._write(">> FSM loaded. Choose option 1 to simulate.")
        return True

    def _write(self, text: str = "") -> None:
        self._writer.write_line(text)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="fsmview", description="View, validate and simulate FSM definitions.")
    parser.add_argument("file", nargs="?", help="FSM definition file to load on start")
    parser.add_argument(
        "--validate",
        action="store_true",
        help="load FILE, print diagnostics and the model, then exit (status 1 when diagnostics exist)",
    )
    parser.add_argument(
        "--power-on-rule",
        action="store_true",
        help="mirror 'power_on' transitions of the initial state onto the 'powered_on' compound state",
    )
    parser.add_argument(
        "--log-level",
        default="ERROR",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="logging level for diagnostics on stderr (default: ERROR)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    rules = [legacy_power_on_rule()] if args.power_on_rule else []
    app = MenuApp(rules=rules)

    if args.validate:
        if not args.file:
            build_arg_parser().error("--validate requires FILE")
        try:
            diagnostics = app.load(args.file)
        except (FSMError, OSError) as e:
            print(f"Error while loading: {e}")
            return 2
        return 1 if diagnostics else 0

    if args.file:
        app.try_load(args.file)
    app.run()
    return 0
