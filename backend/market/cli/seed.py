"""Flask CLI commands for idempotent reference-data seeding."""

from __future__ import annotations

import logging

import click
from flask.cli import with_appcontext
from sqlalchemy.exc import SQLAlchemyError

from market.core.extensions import db
from market.repositories import BreedRepository

LOGGER = logging.getLogger(__name__)

DEFAULT_BREEDS = ("nelore", "angus", "brahman", "gir", "girolando", "guzerá", "senepol")


def seed_breeds(names: tuple[str, ...] = DEFAULT_BREEDS) -> dict[str, int]:
    """Insert the breeds that are not present yet.

    :returns: Counters ``{"created": n, "existing": m}``.
    """
    repo = BreedRepository(session=db.session)
    existing = {breed.name.lower() for breed in repo.list()}
    created = 0
    for name in names:
        if name.lower() in existing:
            continue
        repo.add(repo.model(name=name))
        created += 1
    db.session.commit()
    return {"created": created, "existing": len(names) - created}


@click.group("seed")
def seed_cli() -> None:
    """Collection of database seeding commands."""


@seed_cli.command("breeds")
@with_appcontext
def breeds_command() -> None:
    """Populate the breed catalogue with common cattle breeds."""
    try:
        summary = seed_breeds()
    except SQLAlchemyError as exc:
        db.session.rollback()
        raise click.ClickException(f"Seeding failed: {exc}") from exc
    LOGGER.info("Seeded breeds: %s", summary)
    click.echo(f"breeds  created={summary['created']:>2}  existing={summary['existing']:>2}")
