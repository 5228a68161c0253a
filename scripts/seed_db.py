"""Database seeding script.

Brings the schema up to date via Flask-Migrate (falling back to
``create_all`` when migrations are unavailable) and runs the seeders.

Usage:
  python scripts/seed_db.py [SeederName]
"""
from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from app import app, db, prepare_database
from seeders import run_seeder


def main(seeder_name: str | None = None) -> None:
    """Initialize database and seed default data."""
    prepare_database(app)
    with app.app_context():
        ran = run_seeder(seeder_name, echo=print)
        db.session.remove()
    print(f'{ran} finished')


if __name__ == "__main__":
    main(sys.argv[1] if len(sys.argv) > 1 else None)
