"""finch: compile an asset directory into a C header file."""

import argparse
import logging
import sys

from .config import FinchConfig, open_output
from .errors import FinchError
from .header import write_header
from .impl import write_impl
from .tree import scan

log = logging.getLogger(__name__)


def _args(argv=None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="finch",
        description="A small CLI program to compile an asset directory into a C header file.",
    )
    p.add_argument("directory", help="asset directory to embed")
    p.add_argument("output", nargs="?", default=None,
                   help="base name of the generated files (default: directory name)")
    p.add_argument("-c", "--c-file", action="store_true",
                   help="write the implementation to a separate .c file")
    return p.parse_args(argv)


def generate(config: FinchConfig) -> None:
    resolved = config.resolve()
    base = resolved.base_name
    tree = scan(resolved.directory)

    output = open_output(resolved.paths.header)
    try:
        write_header(tree, base, output)
        if not resolved.single_file:
            output.close()
            log.info("Wrote %s", resolved.paths.header)
            output = open_output(resolved.paths.source)
        write_impl(tree, base, output, resolved.single_file)
    finally:
        output.close()

    log.info("Wrote %s", resolved.paths.source or resolved.paths.header)
    log.info("Embedded %d assets, total %d bytes, from %s",
             sum(1 for _ in tree.iter_assets()), tree.total_size, resolved.directory)


def main(argv=None) -> int:
    logging.basicConfig(level=logging.INFO, format="%(levelname)-8s  %(message)s")
    config = FinchConfig.from_args(_args(argv))
    try:
        generate(config)
    except FinchError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
