"""
Runtime package: the interactive simulator and its line based I/O.
"""

from .console import ConsoleReader, ConsoleWriter, StreamReader, StreamWriter
from .simulator import Simulator

__all__ = ["Simulator", "ConsoleReader", "ConsoleWriter", "StreamReader", "StreamWriter"]
