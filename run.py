#!/usr/bin/env python3
"""
run.py - Main entry point for the connectn terminal game

Usage:
    python run.py play --players R,Y,B
    python run.py replay --moves 0,0,1,1,2,2,3
"""

import sys

from connectn.interfaces.cli import main

if __name__ == "__main__":
    sys.exit(main())
