"""levelgen CLI entry point for a source checkout.

Same interface as the installed `levelgen` console script.

Run `python run.py --help` for details.
"""

import sys

from levelgen.cli import __version__, main, parse_args  # noqa: F401

if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
