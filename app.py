from flask import (
    Flask,
    render_template,
    request,
    redirect,
    url_for,
    g,
    current_app,
)
from flask_migrate import upgrade
import logging
from logging.handlers import RotatingFileHandler
from urllib.parse import quote_plus
from werkzeug.exceptions import HTTPException
import os
import time
import uuid

import click
from flask.cli import with_appcontext
from dotenv import load_dotenv

from models import db, migrate
from auth import auth_bp
from content import content_bp
from config import DevelopmentConfig, TestingConfig, ProductionConfig, validate_runtime_config
from seeders import SEEDERS, UnknownSeederError, resolve_seeder, run_seeder

load_dotenv()

APP_ENV = os.getenv('APP_ENV', 'development').strip().lower()
MIGRATIONS_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'migrations')


def _normalized_database_url(url: str | None) -> str | None:
    """Normalize DB URL so cPanel/MySQL strings work with SQLAlchemy.

    cPanel users often set `mysql://...`; SQLAlchemy expects an explicit driver
    such as `mysql+pymysql://...`.
    """
    if not url:
        return url
    if url.startswith('mysql://'):
        return url.replace('mysql://', 'mysql+pymysql://', 1)
    return url


def _database_url_from_parts() -> str | None:
    """Build DATABASE_URL from simple DB_* env vars for easier hosting setup."""
    db_name = (os.getenv('DB_NAME') or '').strip()
    db_user = (os.getenv('DB_USER') or '').strip()
    db_password = os.getenv('DB_PASSWORD')
    if not db_name or not db_user or db_password is None:
        return None

    db_driver = (os.getenv('DB_DRIVER', 'mysql+pymysql') or 'mysql+pymysql').strip()
    db_host = (os.getenv('DB_HOST', 'localhost') or 'localhost').strip()
    db_port = (os.getenv('DB_PORT') or '').strip()

    host_part = db_host
    if db_port:
        host_part = f"{db_host}:{db_port}"

    quoted_user = quote_plus(db_user)
    quoted_password = quote_plus(db_password)
    quoted_db_name = quote_plus(db_name)
    return f"{db_driver}://{quoted_user}:{quoted_password}@{host_part}/{quoted_db_name}?charset=utf8mb4"


def _resolve_database_url() -> tuple[str | None, str]:
    database_url = os.getenv('DATABASE_URL')
    source = 'DATABASE_URL'
    if not database_url:
        database_url = _database_url_from_parts()
        source = 'DB_* variables' if database_url else 'default config'
    return _normalized_database_url(database_url), source


def _apply_database_uri_override(config: dict, resolved_url: str | None):
    """Ensure runtime config uses resolved DB URL even after class import-time defaults."""
    if resolved_url:
        config['SQLALCHEMY_DATABASE_URI'] = resolved_url


config_map = {
    'development': DevelopmentConfig,
    'testing': TestingConfig,
    'production': ProductionConfig,
}

SENSITIVE_PATHS = {
    'app.py',
    'auth.py',
    'config.py',
    'content.py',
    'models.py',
    'pyproject.toml',
    '.env',
    '.env.example',
    'database.sqlite',
}
SENSITIVE_EXTENSIONS = (
    '.py', '.pyc', '.sqlite', '.db', '.env', '.ini', '.pem', '.key', '.log',
)

LOG_FORMAT = '%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]'
LOG_FILE = os.path.join('logs', 'app.log')


def _configure_logging(app_obj: Flask) -> None:
    if not os.path.exists('logs'):
        os.makedirs('logs')
    target = os.path.abspath(LOG_FILE)
    already = any(
        isinstance(h, RotatingFileHandler) and getattr(h, 'baseFilename', None) == target
        for h in app_obj.logger.handlers
    )
    if not already:
        file_handler = RotatingFileHandler(LOG_FILE, maxBytes=10240, backupCount=10)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        file_handler.setLevel(logging.INFO)
        app_obj.logger.addHandler(file_handler)
    app_obj.logger.setLevel(logging.INFO)


def _register_request_hooks(app_obj: Flask) -> None:
    @app_obj.before_request
    def block_sensitive_paths():
        requested = request.path.lstrip('/').lower()
        if not requested:
            return None
        if requested in SENSITIVE_PATHS or requested.endswith(SENSITIVE_EXTENSIONS):
            return ('Not Found', 404)
        return None

    @app_obj.before_request
    def attach_request_context_log():
        g.request_id = uuid.uuid4().hex[:12]
        g.request_started_at = time.time()
        app_obj.logger.info(
            'REQ_START id=%s method=%s path=%s ip=%s',
            g.request_id,
            request.method,
            request.full_path,
            request.remote_addr,
        )

    @app_obj.after_request
    def log_response_result(response):
        rid = getattr(g, 'request_id', '-')
        started = getattr(g, 'request_started_at', None)
        duration_ms = int((time.time() - started) * 1000) if started else -1
        app_obj.logger.info(
            'REQ_END id=%s status=%s duration_ms=%s',
            rid,
            response.status_code,
            duration_ms,
        )
        return response

    @app_obj.errorhandler(Exception)
    def handle_unexpected_error(exc):
        if isinstance(exc, HTTPException):
            return exc
        rid = getattr(g, 'request_id', '-')
        app_obj.logger.exception('REQ_FAIL id=%s method=%s path=%s err=%s', rid, request.method, request.path, exc)
        return render_template('error.html', request_id=rid), 500

    @app_obj.route('/')
    def index():
        return redirect(url_for('content.about'))


@click.command('seed')
@click.option('--class', 'seeder_name', default='DatabaseSeeder', show_default=True,
              help='Name of the seeder to run.')
@click.option('--force', is_flag=True, help='Allow seeding when APP_ENV is production.')
@with_appcontext
def seed_command(seeder_name, force):
    """Seed the database with the default admin and site content."""
    if current_app.config.get('APP_ENV') == 'production' and not force:
        raise click.ClickException('Application is in production; rerun with --force to seed.')
    try:
        resolve_seeder(seeder_name)
    except UnknownSeederError:
        raise click.UsageError(
            f'Unknown seeder "{seeder_name}". Run "flask seed-list" to see the available seeders.'
        ) from None
    run_seeder(seeder_name, echo=click.echo)
    click.echo('Database seeding completed successfully.')


@click.command('seed-list')
@with_appcontext
def seed_list_command():
    """List the registered seeders."""
    for name in SEEDERS:
        click.echo(name)


def create_app(config_object=None, **overrides) -> Flask:
    """Build the Flask application.

    ``config_object`` defaults to the class selected by ``APP_ENV``;
    ``overrides`` are applied last (tests use them for the database URL).
    """
    app_obj = Flask(__name__)
    app_obj.config.from_object(config_object or config_map.get(APP_ENV, DevelopmentConfig))
    database_url, database_url_source = _resolve_database_url()
    _apply_database_uri_override(app_obj.config, database_url)
    app_obj.config['APP_ENV'] = APP_ENV
    app_obj.config.update(overrides)
    validate_runtime_config(app_obj.config)

    _configure_logging(app_obj)
    app_obj.logger.info('Atlas Digitalize startup env=%s', app_obj.config['APP_ENV'])
    if database_url and 'SQLALCHEMY_DATABASE_URI' not in overrides:
        app_obj.logger.info('Database configuration loaded from %s', database_url_source)
    else:
        app_obj.logger.info('Database configuration loaded from config')

    db.init_app(app_obj)
    migrate.init_app(app_obj, db, directory=MIGRATIONS_DIR)
    app_obj.register_blueprint(auth_bp)
    app_obj.register_blueprint(content_bp)
    _register_request_hooks(app_obj)
    app_obj.cli.add_command(seed_command)
    app_obj.cli.add_command(seed_list_command)
    return app_obj


def prepare_database(app_obj: Flask) -> None:
    """Apply Alembic migrations or fall back to ``create_all``."""
    with app_obj.app_context():
        try:
            upgrade()
        except Exception as exc:
            if app_obj.config.get('TESTING'):
                raise
            app_obj.logger.warning('Migrations could not be applied (%s); using create_all', exc)
            db.create_all()


app = create_app()


if __name__ == '__main__':
    debug = os.environ.get('FLASK_DEBUG', '').strip().lower() in {'1', 'true', 'yes', 'on'}
    host = os.environ.get('HOST', '127.0.0.1')
    port = int(os.environ.get('PORT', 5000))
    app.run(host=host, port=port, debug=debug)
