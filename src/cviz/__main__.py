"""Allow ``python -m cviz``."""

from cviz.cli import run

if __name__ == "__main__":
    run()
