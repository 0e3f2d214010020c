"""Allow running as ``python -m thread_grep``."""

from thread_grep.cli import main

if __name__ == "__main__":
    main()
