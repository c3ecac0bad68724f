#!/usr/bin/env python3
"""Entry point for playing Connect-4 against the Monte Carlo player."""

from c4rollout.cli import main


if __name__ == "__main__":
    main()
