# Path: hashify_cli/__main__.py
"""Allow `python -m hashify_cli`."""

import sys

from hashify_cli.main import main


if __name__ == '__main__':
    sys.exit(main())
