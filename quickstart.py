#!/usr/bin/env python3
# quickstart.py
"""
Quick start script for vfsreplicator development.
"""

import subprocess
import sys


def main():
    print("vfsreplicator Quick Start\n")

    # Python 3.11+ is required
    print(f"Using Python {sys.version}")

    print("Installing vfsreplicator in development mode...")
    subprocess.run([sys.executable, "-m", "pip", "install", "-e", ".[dev]"])

    print("Testing installation...")
    subprocess.run([sys.executable, "-m", "vfsreplicator.cli", "diagnose"])

    print("Ready to replicate!")
    print("\nTry these commands:")
    print("  vfsreplicator diagnose                        # Check environment")
    print("  vfsreplicator sanitize 'weird?name*.jar'      # Show the safe temp-name suffix")
    print("  python -m pytest tests                        # Run the test suite")
    print("\nReplicate a directory, keeping only jars:")
    print("  vfsreplicator replicate ./lib --temp-dir /tmp/vfsr --pattern '**/*.jar' --keep")


if __name__ == "__main__":
    main()
