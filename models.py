from contextlib import contextmanager
from datetime import datetime
from zoneinfo import ZoneInfo
import re
import unicodedata

from flask import current_app, has_app_context
from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate
from sqlalchemy import event
from werkzeug.security import generate_password_hash, check_password_hash

# Initialize extensions without app; configured in app.py

db = SQLAlchemy()
migrate = Migrate()


def app_now():
    """Return current datetime in the configured application timezone (naive)."""
    tz_name = 'UTC'
    if has_app_context():
        tz_name = current_app.config.get('APP_TIMEZONE') or 'UTC'
    return datetime.now(ZoneInfo(tz_name)).replace(tzinfo=None)


def slugify(value: str) -> str:
    """Lowercase ASCII slug: ``"Cloud & Data"`` -> ``"cloud-data"``."""
    normalized = unicodedata.normalize('NFKD', value or '').encode('ascii', 'ignore').decode('ascii')
    slug = re.sub(r'[^a-z0-9]+', '-', normalized.lower()).strip('-')
    return slug


class TimestampMixin:
    created_at = db.Column(db.DateTime, default=app_now, nullable=False)
    updated_at = db.Column(db.DateTime, default=app_now, onupdate=app_now, nullable=False)


class User(TimestampMixin, db.Model):
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(120), nullable=False)
    email = db.Column(db.String(120), unique=True, nullable=False)
    password = db.Column(db.String(255), nullable=False)
    email_verified_at = db.Column(db.DateTime)

    def set_password(self, password: str) -> None:
        self.password = generate_password_hash(password)

    def check_password(self, password: str) -> bool:
        return check_password_hash(self.password, password)

    @property
    def is_verified(self) -> bool:
        return self.email_verified_at is not None


class AboutPage(TimestampMixin, db.Model):
    id = db.Column(db.Integer, primary_key=True)
    section = db.Column(db.String(50), unique=True, nullable=False)
    title = db.Column(db.String(180), nullable=False)
    subtitle = db.Column(db.String(255))
    body = db.Column(db.Text, nullable=False)
    image = db.Column(db.String(255))
    sort_order = db.Column(db.Integer, default=0, nullable=False)


class Solution(TimestampMixin, db.Model):
    id = db.Column(db.Integer, primary_key=True)
    slug = db.Column(db.String(120), unique=True, nullable=False)
    title = db.Column(db.String(180), nullable=False)
    summary = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text)
    icon = db.Column(db.String(50))
    features = db.Column(db.Text)  # one feature per line
    sort_order = db.Column(db.Integer, default=0, nullable=False)
    is_active = db.Column(db.Boolean, default=True, nullable=False)

    @property
    def feature_list(self) -> list[str]:
        return [line.strip() for line in (self.features or '').splitlines() if line.strip()]


class Client(TimestampMixin, db.Model):
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(120), unique=True, nullable=False)
    industry = db.Column(db.String(80))
    logo = db.Column(db.String(255))
    website = db.Column(db.String(255))
    testimonial = db.Column(db.Text)
    sort_order = db.Column(db.Integer, default=0, nullable=False)
    is_featured = db.Column(db.Boolean, default=False, nullable=False)


class Contact(TimestampMixin, db.Model):
    __table_args__ = (
        db.UniqueConstraint('email', 'subject', name='uq_contact_email_subject'),
    )
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(120), nullable=False)
    email = db.Column(db.String(120), nullable=False)
    phone = db.Column(db.String(50))
    company = db.Column(db.String(120))
    subject = db.Column(db.String(180), nullable=False)
    message = db.Column(db.Text, nullable=False)
    status = db.Column(db.String(20), default='new', nullable=False)  # new, read, replied


class Insight(TimestampMixin, db.Model):
    id = db.Column(db.Integer, primary_key=True)
    slug = db.Column(db.String(180), unique=True, nullable=False)
    title = db.Column(db.String(180), nullable=False)
    category = db.Column(db.String(80))
    excerpt = db.Column(db.String(255))
    body = db.Column(db.Text, nullable=False)
    author = db.Column(db.String(120))
    published_at = db.Column(db.DateTime)
    is_published = db.Column(db.Boolean, default=True, nullable=False)


class Project(TimestampMixin, db.Model):
    id = db.Column(db.Integer, primary_key=True)
    slug = db.Column(db.String(180), unique=True, nullable=False)
    title = db.Column(db.String(180), nullable=False)
    client_name = db.Column(db.String(120))
    category = db.Column(db.String(80))
    summary = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text)
    image = db.Column(db.String(255))
    completed_at = db.Column(db.Date)
    is_featured = db.Column(db.Boolean, default=False, nullable=False)


class AuditLog(db.Model):
    id = db.Column(db.Integer, primary_key=True)
    created_at = db.Column(db.DateTime, default=app_now, nullable=False)
    action = db.Column(db.String(80), nullable=False)
    entity = db.Column(db.String(80), nullable=False)
    entity_id = db.Column(db.String(80))
    details = db.Column(db.Text)


# Model events ---------------------------------------------------------------

_events_muted = 0


def model_events_enabled() -> bool:
    return _events_muted == 0


@contextmanager
def without_model_events():
    """Mute model event listeners (audit trail) for the enclosed block."""
    global _events_muted
    _events_muted += 1
    try:
        yield
    finally:
        _events_muted -= 1


AUDITED_MODELS = (User, AboutPage, Solution, Client, Contact, Insight, Project)


def _record_created(mapper, connection, target):
    if not model_events_enabled():
        return
    entity = mapper.local_table.name
    connection.execute(
        AuditLog.__table__.insert().values(
            created_at=app_now(),
            action='created',
            entity=entity,
            entity_id=str(target.id),
            details='',
        )
    )
    if has_app_context():
        current_app.logger.info('MODEL_CREATED entity=%s id=%s', entity, target.id)


for _model in AUDITED_MODELS:
    event.listen(_model, 'after_insert', _record_created)
