#!/usr/bin/env python3
"""
Pairing Bid Planner

Main entry point: ranks a month of pairings against pilot preferences
and builds three candidate schedules.
"""

import sys
from pathlib import Path

# Ensure the package is in the path
sys.path.insert(0, str(Path(__file__).parent))

from api.cli.main import main

if __name__ == "__main__":
    sys.exit(main())
