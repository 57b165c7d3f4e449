"""Compile an asset directory into a C header."""

from .config import FinchConfig
from .errors import FinchError, InvalidDirectory, NotADirectory, OutputCreateError
from .header import render_header
from .impl import render_impl
from .tree import Asset, Directory, OutputKind, classify, identifier, scan

__version__ = "0.1.0"

__all__ = [
    "Asset",
    "Directory",
    "FinchConfig",
    "FinchError",
    "InvalidDirectory",
    "NotADirectory",
    "OutputCreateError",
    "OutputKind",
    "classify",
    "identifier",
    "render_header",
    "render_impl",
    "scan",
]
