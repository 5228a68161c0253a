from flask import current_app
from sqlalchemy import func
from werkzeug.security import generate_password_hash

from models import User, app_now
from seeders.base import Seeder
from seeders.about_page import AboutPageSeeder
from seeders.solution import SolutionSeeder
from seeders.client import ClientSeeder
from seeders.contact import ContactSeeder
from seeders.insight import InsightSeeder
from seeders.project import ProjectSeeder

# Run order is fixed.
CONTENT_SEEDERS = [
    AboutPageSeeder,
    SolutionSeeder,
    ClientSeeder,
    ContactSeeder,
    InsightSeeder,
    ProjectSeeder,
]


class DatabaseSeeder(Seeder):
    """Seed the application's database."""

    def run(self) -> None:
        self.ensure_admin()
        self.call(CONTENT_SEEDERS)

    def ensure_admin(self) -> User:
        """Create the default administrator unless its email already exists.

        Emails match case-insensitively; an existing row keeps its name
        and password.
        """
        config = current_app.config
        email = config['ADMIN_EMAIL'].strip().lower()
        user = User.query.filter(func.lower(User.email) == email).first()
        if user is not None:
            current_app.logger.info('Admin user %s already exists; left untouched', user.email)
            return user
        user, _ = self.first_or_create(
            User,
            {'email': email},
            {
                'name': config.get('ADMIN_NAME') or 'Admin',
                'password': generate_password_hash(config['ADMIN_PASSWORD']),
                'email_verified_at': app_now(),
            },
        )
        current_app.logger.info('Admin user %s created', email)
        return user
