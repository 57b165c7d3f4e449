"""
Asset tree snapshot.

The input directory is walked exactly once and captured as a tree of
``Directory`` and ``Asset`` nodes. Header and implementation are both rendered
from this snapshot, so their field order always agrees.
"""

import enum
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, List, Union

log = logging.getLogger(__name__)

STRING_EXTENSIONS = frozenset({
    "txt", "json", "xml", "csv", "html", "htm", "css", "js",
    "md", "toml", "rs", "glsl", "frag", "vert",
})


class OutputKind(enum.Enum):
    STRING = "string"
    BYTES = "bytes"


def classify(path) -> OutputKind:
    ext = Path(path).suffix[1:]
    if ext in STRING_EXTENSIONS:
        return OutputKind.STRING
    return OutputKind.BYTES


def identifier(name: str) -> str:
    return Path(name).stem.replace("-", "_")


@dataclass
class Asset:
    name: str
    path: Path
    kind: OutputKind
    size: int

    @property
    def ident(self) -> str:
        return identifier(self.name)


@dataclass
class Directory:
    name: str
    children: List[Union["Directory", Asset]] = field(default_factory=list)

    @property
    def ident(self) -> str:
        return identifier(self.name)

    def iter_assets(self) -> Iterator[Asset]:
        for child in self.children:
            if isinstance(child, Directory):
                yield from child.iter_assets()
            else:
                yield child

    @property
    def total_size(self) -> int:
        return sum(asset.size for asset in self.iter_assets())


def scan(directory) -> Directory:
    """Snapshot ``directory`` recursively, keeping filesystem iteration order."""
    directory = Path(directory)
    node = Directory(directory.name)

    with os.scandir(directory) as entries:
        paths = [Path(entry.path) for entry in entries]

    for path in paths:
        if path.is_dir():
            node.children.append(scan(path))
        else:
            kind = classify(path)
            size = path.stat().st_size
            log.debug("asset %s: %s, %d bytes", path, kind.value, size)
            node.children.append(Asset(path.name, path, kind, size))

    return node
