#!/usr/bin/env python3
"""
run.py - Main entry point for Connect Four against the Monte Carlo engine

Examples:

    # Play against the engine (you are X and move first)
    python run.py play

    # Stronger, reproducible engine
    python run.py play --simulations 5000 --seed 7

    # Inspect a position and get the engine's suggestion for O
    python run.py test --position 0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,1,1,1,0,2,2,0

    # Time 5000 rollouts from the empty board
    python run.py benchmark --iterations 5000

    # Log every engine decision
    python run.py --debug_level debug play
"""

import os
import sys

# Add the project root to Python path to ensure imports work
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from mc_connect4.interfaces.cli import main

if __name__ == "__main__":
    sys.exit(main())
