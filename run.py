"""
Main script to play or replay Othello games from a source checkout.
"""
import sys
from pathlib import Path

# Add src directory to path
sys.path.append(str(Path(__file__).parent.absolute() / "src"))

from othello.cli import main

if __name__ == "__main__":
    sys.exit(main())
