"""Allow ``python -m hostprep``."""

from hostprep.main import cli

if __name__ == "__main__":
    cli()
