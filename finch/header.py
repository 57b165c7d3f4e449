"""Header emission: the nested struct type and its ``extern`` declaration."""

from typing import List

from .tree import Directory, OutputKind


def struct_fields(node: Directory) -> List[str]:
    lines = []
    for child in node.children:
        if isinstance(child, Directory):
            lines.append("struct {")
            lines.extend(struct_fields(child))
            lines.append(f"}} {child.ident};")
        elif child.kind is OutputKind.STRING:
            # room for the terminating null
            lines.append(f"const char {child.ident}[{child.size} + 1];")
            lines.append(f"const size_t {child.ident}_len;")
        else:
            lines.append(f"const uint8_t {child.ident}[{child.size}];")
            lines.append(f"const size_t {child.ident}_len;")
    return lines


def render_header(tree: Directory, base: str) -> str:
    upper = base.upper()
    lines = [
        f"#ifndef {upper}_H",
        f"#define {upper}_H",
        "#include <stdint.h>",
        "#include <stddef.h>",
        "#ifdef __cplusplus",
        'extern "C" {',
        "#endif",
        "typedef struct {",
    ]
    lines.extend(struct_fields(tree))
    lines += [
        f"}} __{base}_t;",
        f"extern const __{base}_t {base};",
        "#ifdef __cplusplus",
        "}",
        "#endif",
        "#endif",
    ]
    return "\n".join(lines) + "\n"


def write_header(tree: Directory, base: str, stream) -> None:
    stream.write(render_header(tree, base))
