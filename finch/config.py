"""Command line configuration and output path resolution."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .errors import InvalidDirectory, NotADirectory, OutputCreateError


@dataclass
class OutputPaths:
    header: Path
    source: Optional[Path] = None


@dataclass
class ResolvedConfig:
    directory: Path
    base_name: str
    paths: OutputPaths

    @property
    def single_file(self) -> bool:
        return self.paths.source is None


@dataclass
class FinchConfig:
    directory: str
    output: Optional[str] = None
    c_file: bool = False

    @classmethod
    def from_args(cls, args) -> "FinchConfig":
        return cls(directory=args.directory, output=args.output, c_file=args.c_file)

    def resolve(self) -> ResolvedConfig:
        directory = resolve_directory(self.directory)
        base = derive_base_name(directory, self.output)
        return ResolvedConfig(directory, base, output_paths(base, self.c_file))


def resolve_directory(path) -> Path:
    try:
        directory = Path(path).resolve(strict=True)
    except (OSError, RuntimeError):
        raise InvalidDirectory(path)

    if not directory.is_dir():
        raise NotADirectory(directory)

    return directory


def derive_base_name(directory: Path, output: Optional[str] = None) -> str:
    if output:
        return output
    if not directory.stem:
        raise ValueError(f"cannot derive an output name from {directory}")
    return directory.stem


def output_paths(base: str, c_file: bool) -> OutputPaths:
    header = Path(f"{base}.h")
    source = Path(f"{base}.c") if c_file else None
    return OutputPaths(header, source)


def open_output(path):
    try:
        return open(path, "w", encoding="utf-8", newline="\n")
    except OSError:
        raise OutputCreateError(path)
