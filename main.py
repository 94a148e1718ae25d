#!/usr/bin/env python3
"""
ASCII Webcam - Live camera feed rendered as ASCII art in the terminal.

Quick start:
    python main.py                    # Start with camera 0
    python main.py --mock             # Test without camera
    python main.py -c                 # Start in color mode

Keys: q/ESC quit, c color, s screenshot, +/- brightness.
For more options: python main.py --help
"""

import sys

from ascii_webcam.cli import main

if __name__ == "__main__":
    sys.exit(main())
