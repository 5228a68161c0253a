"""Database seeders and the runner used by ``flask seed`` and ``scripts/seed_db.py``."""
from flask import current_app

from models import db, without_model_events
from seeders.base import Seeder
from seeders.about_page import AboutPageSeeder
from seeders.solution import SolutionSeeder
from seeders.client import ClientSeeder
from seeders.contact import ContactSeeder
from seeders.insight import InsightSeeder
from seeders.project import ProjectSeeder
from seeders.database_seeder import DatabaseSeeder, CONTENT_SEEDERS

SEEDERS = {
    cls.__name__: cls
    for cls in (DatabaseSeeder, *CONTENT_SEEDERS)
}


class UnknownSeederError(LookupError):
    """Raised when a seeder name is not in :data:`SEEDERS`."""


def resolve_seeder(name: str | None = None):
    name = (name or 'DatabaseSeeder').strip()
    try:
        return SEEDERS[name]
    except KeyError:
        raise UnknownSeederError(name) from None


def run_seeder(name: str | None = None, echo=None) -> str:
    """Run a seeder in one transaction with model events muted.

    Commits on success; rolls back and re-raises on failure.  Returns the
    name of the seeder that ran.
    """
    seeder_cls = resolve_seeder(name)
    current_app.logger.info('SEED_START seeder=%s', seeder_cls.__name__)
    try:
        with without_model_events():
            seeder_cls(echo=echo).run()
        db.session.commit()
    except Exception:
        db.session.rollback()
        current_app.logger.exception('SEED_FAIL seeder=%s', seeder_cls.__name__)
        raise
    current_app.logger.info('SEED_END seeder=%s', seeder_cls.__name__)
    return seeder_cls.__name__


__all__ = [
    'Seeder',
    'DatabaseSeeder',
    'AboutPageSeeder',
    'SolutionSeeder',
    'ClientSeeder',
    'ContactSeeder',
    'InsightSeeder',
    'ProjectSeeder',
    'CONTENT_SEEDERS',
    'SEEDERS',
    'UnknownSeederError',
    'resolve_seeder',
    'run_seeder',
]
