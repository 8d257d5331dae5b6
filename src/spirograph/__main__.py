"""Run with: python -m spirograph"""
import sys

from spirograph.app.main import main

if __name__ == "__main__":
    sys.exit(main())
