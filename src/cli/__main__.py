"""`python -m cli` runs the same app as the `deposit-callback` script."""

from cli.main import run

if __name__ == "__main__":
    run()
