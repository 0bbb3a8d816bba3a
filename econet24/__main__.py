"""
Main entry point for the econet24 package.

Allows running the client as: python -m econet24
"""

from econet24.cli import main

if __name__ == "__main__":
    main()
