"""Seeder base class.

A seeder populates one slice of the database.  ``run`` does the work;
``call`` lets a seeder delegate to others in a fixed order, the way the
root :class:`~seeders.database_seeder.DatabaseSeeder` chains the content
seeders.
"""
import time

from flask import current_app

from models import db


class Seeder:
    """Base class for every seeder."""

    def __init__(self, echo=None):
        # ``echo`` receives one progress line per delegated seeder (CLI output).
        self.echo = echo

    def run(self) -> None:
        raise NotImplementedError

    def call(self, seeders) -> list[str]:
        """Run ``seeders`` (a class or a list of classes) in order.

        Returns the names of the seeders that ran.  Errors propagate to the
        caller untouched.
        """
        if not isinstance(seeders, (list, tuple)):
            seeders = [seeders]
        ran = []
        for seeder_cls in seeders:
            name = seeder_cls.__name__
            self._note(f'Seeding: {name}')
            started = time.perf_counter()
            seeder_cls(echo=self.echo).run()
            elapsed_ms = int((time.perf_counter() - started) * 1000)
            self._note(f'Seeded: {name} ({elapsed_ms} ms)')
            ran.append(name)
        return ran

    def _note(self, message: str) -> None:
        current_app.logger.info(message)
        if self.echo:
            self.echo(message)

    @staticmethod
    def first_or_create(model, lookup: dict, values: dict | None = None):
        """Return ``(instance, created)`` for the row matching ``lookup``.

        Existing rows are returned unchanged; ``values`` only apply when a
        new row is built.
        """
        instance = model.query.filter_by(**lookup).first()
        if instance is not None:
            return instance, False
        instance = model(**{**lookup, **(values or {})})
        db.session.add(instance)
        db.session.flush()
        return instance, True

    def seed_rows(self, model, key_fields, rows) -> int:
        """``first_or_create`` every row keyed on ``key_fields``; return how many were new."""
        created = 0
        for row in rows:
            lookup = {field: row[field] for field in key_fields}
            values = {k: v for k, v in row.items() if k not in lookup}
            _, was_created = self.first_or_create(model, lookup, values)
            created += int(was_created)
        current_app.logger.info(
            '%s: %s new %s row(s), %s already present',
            type(self).__name__,
            created,
            model.__tablename__,
            len(rows) - created,
        )
        return created
