#!/usr/bin/env python3
"""
Main entry point for Shot Assist.
This script enables running the app from the root directory.
"""

import os
import sys

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))

from shot_assist.main import main


if __name__ == "__main__":
    sys.exit(main())
