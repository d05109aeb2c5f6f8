"""
Run with: python -m regressionplayground
"""
import sys

from regressionplayground.main import main

if __name__ == "__main__":
    sys.exit(main())
