"""Allow ``python -m word_drill``."""

from word_drill.cli.main import main

if __name__ == "__main__":
    main()
