from __future__ import annotations

import typer

from src.allocation.cli import allocation_app

app = typer.Typer(help="Portfolio allocation CLI")
app.add_typer(allocation_app, name="allocation")


if __name__ == "__main__":
    app()
