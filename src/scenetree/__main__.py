"""Allow ``python -m scenetree``."""

import sys

from scenetree.cli import main

if __name__ == "__main__":
    sys.exit(main())
