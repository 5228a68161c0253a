import importlib.util
import os
import sys
from pathlib import Path

import pytest

sys.path.append(os.path.dirname(os.path.dirname(__file__)))
import app as app_module
from app import create_app, prepare_database
from flask_migrate import upgrade
from models import db, User, Project
from sqlalchemy import inspect, text

SCRIPTS_DIR = Path(__file__).resolve().parents[1] / 'scripts'


def _load_script(name):
    spec = importlib.util.spec_from_file_location(name, SCRIPTS_DIR / f'{name}.py')
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def flask_app(tmp_path):
    db_path = tmp_path / 'test.sqlite'
    application = create_app('config.TestingConfig', SQLALCHEMY_DATABASE_URI=f'sqlite:///{db_path}')
    yield application
    with application.app_context():
        db.drop_all()
    if db_path.exists():
        db_path.unlink()


def test_seed_db_script_prepares_schema_and_seeds(flask_app, monkeypatch, capsys):
    seed_db = _load_script('seed_db')
    monkeypatch.setattr(seed_db, 'app', flask_app)

    seed_db.main()
    seed_db.main()

    with flask_app.app_context():
        assert User.query.count() == 1
        assert Project.query.count() > 0
    out = capsys.readouterr().out
    assert 'DatabaseSeeder finished' in out


def _current_revision(application):
    with application.app_context():
        with db.engine.connect() as connection:
            return connection.execute(text('SELECT version_num FROM alembic_version')).scalar()


def test_prepare_database_is_repeatable(flask_app):
    prepare_database(flask_app)
    prepare_database(flask_app)
    with flask_app.app_context():
        inspector = inspect(db.engine)
        assert inspector.has_table('alembic_version')
        assert inspector.has_table('audit_log')
    assert _current_revision(flask_app) == '7d4e0b5a2c81'


def test_migrations_upgrade_to_head(flask_app):
    with flask_app.app_context():
        upgrade()
        inspector = inspect(db.engine)
        for table in ('user', 'about_page', 'solution', 'client', 'contact', 'insight', 'project', 'audit_log'):
            assert inspector.has_table(table)
    assert _current_revision(flask_app) == '7d4e0b5a2c81'


def test_prepare_database_raises_when_testing(flask_app, monkeypatch):
    def broken_upgrade():
        raise RuntimeError('env.py is broken')

    monkeypatch.setattr(app_module, 'upgrade', broken_upgrade)
    with pytest.raises(RuntimeError, match='env.py is broken'):
        prepare_database(flask_app)


def test_prepare_database_falls_back_outside_tests(flask_app, monkeypatch):
    def broken_upgrade():
        raise RuntimeError('no migrations here')

    monkeypatch.setattr(app_module, 'upgrade', broken_upgrade)
    flask_app.config['TESTING'] = False
    prepare_database(flask_app)
    with flask_app.app_context():
        inspector = inspect(db.engine)
        assert inspector.has_table('user')
        assert not inspector.has_table('alembic_version')


def test_mysql_schema_lists_every_table(flask_app):
    schema_script = _load_script('generate_mysql_schema')
    with flask_app.app_context():
        sql = schema_script.render_schema()
    for table in ('user', 'about_page', 'solution', 'client', 'contact', 'insight', 'project', 'audit_log'):
        assert f'CREATE TABLE {table}' in sql or f'CREATE TABLE `{table}`' in sql
