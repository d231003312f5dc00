#!/usr/bin/env .venv/bin/python3
"""
Command-line script to print statistics for a TCX activity file.

Usage:
    ./analyze.py "data/PF 08-05-25.tcx"
    ./analyze.py "data/PF 08-05-25.tcx" --units metric
    ./analyze.py            # prompts for the file path

Or with explicit python:
    .venv/bin/python3 analyze.py "data/PF 08-05-25.tcx"
"""

import sys
from pathlib import Path

# Add src to path for imports
src_path = Path(__file__).parent / "src"
sys.path.insert(0, str(src_path))

from tcxstats.report import main

if __name__ == "__main__":
    main()
