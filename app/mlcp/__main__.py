"""Allow running mlcp as ``python -m mlcp``."""

from mlcp.cli.main import app

if __name__ == "__main__":
    app()
