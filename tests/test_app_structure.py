import os
import sys
import pytest

sys.path.append(os.path.dirname(os.path.dirname(__file__)))
from app import app


def test_blueprint_registration():
    assert 'auth' in app.blueprints
    assert 'content' in app.blueprints


def test_migrate_extension_present():
    try:
        import flask_migrate  # noqa: F401
    except ModuleNotFoundError:  # pragma: no cover
        pytest.skip('Flask-Migrate not installed')
    assert 'migrate' in app.extensions
    assert app.extensions['migrate'].directory.endswith('migrations')


def test_seed_commands_registered():
    assert 'seed' in app.cli.commands
    assert 'seed-list' in app.cli.commands
