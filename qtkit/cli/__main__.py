"""
Entry point for running qtkit CLI as a module.

Usage: python -m qtkit.cli [command] [options]
"""

from .parser import main

if __name__ == "__main__":
    main()
