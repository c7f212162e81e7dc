#!/usr/bin/env python3
"""
run.py - Main entry point for console Connect Four

Examples:

    # Play, answering the board size and opponent prompts
    python run.py

    # Play a 6x7 game against the random computer opponent
    python run.py play --rows 6 --cols 7 --ai random

    # Two human players with debug logging on stderr
    python run.py play --ai none --debug

    # Time 500 random-vs-random games
    python run.py benchmark --iterations 500
"""

import sys

from connect_four.interfaces.cli import main

if __name__ == "__main__":
    sys.exit(main())
