"""Entry point for ``python -m gh_lol``."""

from gh_lol.cli.main import app

if __name__ == "__main__":
    app()
