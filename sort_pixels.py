"""Command-line entry point for pixel sorter.

    python sort_pixels.py input.png output.png [--preview] [--timing] [--debug]
    python sort_pixels.py --gui
"""
from __future__ import annotations

import sys

from pixel_sorter import main

if __name__ == "__main__":
    sys.exit(main(sys.argv))
