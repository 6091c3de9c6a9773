#!/usr/bin/env python3
"""Run the wave spawner headless and print a spawn summary.

Usage:
    python3 scripts/simulate_waves.py --seconds 600 --seed 3
    python3 scripts/simulate_waves.py --swap-every 30 --json
"""

import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from horde.simulate import main

if __name__ == "__main__":
    sys.exit(main())
