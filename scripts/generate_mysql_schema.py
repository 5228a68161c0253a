"""Generate MySQL schema SQL from SQLAlchemy models.

Usage:
  python scripts/generate_mysql_schema.py
"""
from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from sqlalchemy.schema import CreateTable
from sqlalchemy.dialects import mysql

from app import app
from models import db

OUT_FILE = Path('MYSQL_FULL_SCHEMA.sql')


def render_schema() -> str:
    dialect = mysql.dialect()
    lines = [
        '-- Atlas Digitalize full schema for MySQL',
        '-- Generated automatically from SQLAlchemy models.',
        'SET NAMES utf8mb4;',
        "SET time_zone = '+00:00';",
        '',
    ]
    for table in db.metadata.sorted_tables:
        stmt = str(CreateTable(table).compile(dialect=dialect)).rstrip() + ';'
        lines.append(stmt)
        lines.append('')
    lines.extend([
        '-- Notes:',
        '-- 1) Import this SQL with the target DB selected.',
        '-- 2) Then run: flask db stamp head && flask seed',
        '',
    ])
    return '\n'.join(lines)


def main() -> None:
    with app.app_context():
        OUT_FILE.write_text(render_schema(), encoding='utf-8')
        print(f'Wrote {OUT_FILE}')


if __name__ == '__main__':
    main()
