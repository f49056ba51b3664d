"""Entry point for ``python -m mediatitle``."""

from mediatitle.cli.typer_app import app

if __name__ == "__main__":
    app()
