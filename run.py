#!/usr/bin/env python3
"""
run.py - Main entry point for the Connect Four engine

Examples:
    python run.py play
    python run.py play --height 5 --width 5
    python run.py check --moves 3,0,3,0,3,0,3
"""

import os
import sys

# Add the project root to Python path so the package imports without installing
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from connectfour.interfaces.cli import main


if __name__ == "__main__":
    sys.exit(main())
