"""Main entry point for the work timer CLI."""

from worktimer.cli import main

if __name__ == "__main__":
    main()
