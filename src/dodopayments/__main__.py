"""`python -m dodopayments` runs the CLI."""

from dodopayments.cli.main import run

if __name__ == "__main__":
    run()
