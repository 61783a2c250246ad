"""
Run with: python -m lissajousgrid
"""
import sys

from lissajousgrid.main import main

if __name__ == "__main__":
    sys.exit(main())
