#!/usr/bin/env python3
"""Run cardpile from a source checkout without installing it."""

import sys
from pathlib import Path

src_path = Path(__file__).parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from cardpile.__main__ import main

if __name__ == "__main__":
    sys.exit(main())
