"""
Implementation emission: the initializer for the struct declared in the header.

Text assets become escaped C string literals, everything else a brace list of
hex byte literals.
"""

from typing import List

from .tree import Asset, Directory, OutputKind

BYTES_PER_LINE = 16

ESCAPES = (
    ("\n", "\\n"),
    ("\r", "\\r"),
    ("\t", "\\t"),
    ('"', '\\"'),
)

def escape_string(text: str) -> str:
    for raw, escaped in ESCAPES:
        text = text.replace(raw, escaped)
    return text

def format_bytes(data: bytes, per_line: int = BYTES_PER_LINE) -> List[str]:
    lines = []
    for i in range(0, len(data), per_line):
        chunk = data[i:i + per_line]
        hex_str = ", ".join(f"0x{b:02x}" for b in chunk)
        lines.append(f"{hex_str},")
    return lines

def asset_values(asset: Asset) -> List[str]:
    if asset.kind is OutputKind.STRING:
        # read_bytes keeps \r\n untranslated; bad UTF-8 raises UnicodeDecodeError
        contents = escape_string(asset.path.read_bytes().decode("utf-8"))
        # length of the escaped literal, not of the file
        return [f'"{contents}",', f"{len(contents.encode('utf-8'))},"]

    data = asset.path.read_bytes()
    return ["{", *format_bytes(data), "},", f"{len(data)},"]

def initializer_values(node: Directory) -> List[str]:
    lines = []
    for child in node.children:
        if isinstance(child, Directory):
            lines.append("{")
            lines.extend(initializer_values(child))
            lines.append("},")
        else:
            lines.extend(asset_values(child))
    return lines

def render_impl(tree: Directory, base: str, single_file: bool) -> str:
    upper = base.upper()
    if single_file:
        lines = [f"#ifdef {upper}_IMPLEMENTATION"]
    else:
        lines = [f'#include "{base}.h"']

    lines += [
        "#include <stddef.h>",
        "#include <stdint.h>",
        "#ifdef __cplusplus",
        'extern "C" {',
        "#endif",
        f"const __{base}_t {base} = {{",
    ]
    lines.extend(initializer_values(tree))
    lines += [
        "};",
        "#ifdef __cplusplus",
        "}",
        "#endif",
    ]

    if single_file:
        lines += [f"#undef {upper}_IMPLEMENTATION", "#endif"]

    return "\n".join(lines) + "\n"

def write_impl(tree: Directory, base: str, stream, single_file: bool) -> None:
    stream.write(render_impl(tree, base, single_file))
