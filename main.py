#!/usr/bin/env python3
"""Launch the endless runner. Optional first argument: the level seed."""
from endless_runner.app import main

if __name__ == "__main__":
    main()
