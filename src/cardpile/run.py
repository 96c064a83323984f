"""Direct entry point for the cardpile command.

This file is used as the entry point for the cardpile command line tool.
It imports and executes the main function from __main__.py.
"""

import sys


def main() -> int:
    """Entry point for cardpile command.

    Returns:
        Exit code
    """
    # Import main function from __main__ module
    from cardpile.__main__ import main as _main
    return _main()


if __name__ == "__main__":
    sys.exit(main())
