#!/usr/bin/env python3
"""
PlayerDev - Main Entry Point
Athletic development report for youth football players
"""

import sys
import os

# Add the project root to the path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from playerdev.main import main

if __name__ == '__main__':
    sys.exit(main())
