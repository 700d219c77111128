"""Module entry-point so the package can be executed via `python -m ebolg`."""

from .cli import app

if __name__ == "__main__":  # pragma: no cover
    app()
