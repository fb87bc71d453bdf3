"""Schema bootstrap command."""

from __future__ import annotations

import logging

import click
from flask.cli import with_appcontext

from market.core.extensions import db

LOGGER = logging.getLogger(__name__)


@click.command("db-init")
@click.option("--drop", is_flag=True, help="Drop existing tables first (destructive).")
@with_appcontext
def db_init_command(drop: bool) -> None:
    """Create every table declared by the models."""
    if drop:
        click.confirm("This will DROP all application tables. Continue?", abort=True)
        LOGGER.info("Dropping database schema...")
        db.drop_all()
    db.create_all()
    click.echo("Database schema ready.")
