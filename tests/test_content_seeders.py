import os
import sys
import pytest

sys.path.append(os.path.dirname(os.path.dirname(__file__)))
from app import create_app
from models import db, slugify, AboutPage, Solution, Client, Contact, Insight, Project
from seeders import run_seeder
from seeders.about_page import SECTIONS
from seeders.solution import SOLUTIONS
from seeders.client import CLIENTS
from seeders.contact import CONTACTS
from seeders.insight import INSIGHTS
from seeders.project import PROJECTS


@pytest.fixture
def flask_app(tmp_path):
    db_path = tmp_path / 'test.sqlite'
    application = create_app('config.TestingConfig', SQLALCHEMY_DATABASE_URI=f'sqlite:///{db_path}')
    with application.app_context():
        db.create_all()
    yield application
    with application.app_context():
        db.drop_all()
    if db_path.exists():
        db_path.unlink()


@pytest.mark.parametrize('seeder_name, model, rows', [
    ('AboutPageSeeder', AboutPage, SECTIONS),
    ('SolutionSeeder', Solution, SOLUTIONS),
    ('ClientSeeder', Client, CLIENTS),
    ('ContactSeeder', Contact, CONTACTS),
    ('InsightSeeder', Insight, INSIGHTS),
    ('ProjectSeeder', Project, PROJECTS),
])
def test_content_seeder_is_idempotent(flask_app, seeder_name, model, rows):
    with flask_app.app_context():
        run_seeder(seeder_name)
        assert model.query.count() == len(rows)
        run_seeder(seeder_name)
        assert model.query.count() == len(rows)


def test_single_seeder_only_touches_its_table(flask_app):
    with flask_app.app_context():
        run_seeder('ClientSeeder')
        assert Client.query.count() == len(CLIENTS)
        assert Solution.query.count() == 0
        assert Project.query.count() == 0


def test_existing_solution_is_left_untouched(flask_app):
    with flask_app.app_context():
        db.session.add(Solution(slug='cloud-devops', title='Edited by hand', summary='Custom summary'))
        db.session.commit()

        run_seeder('SolutionSeeder')

        solution = Solution.query.filter_by(slug='cloud-devops').one()
        assert solution.title == 'Edited by hand'
        assert solution.summary == 'Custom summary'
        assert Solution.query.count() == len(SOLUTIONS)


def test_solutions_keep_list_order_and_features(flask_app):
    with flask_app.app_context():
        run_seeder('SolutionSeeder')
        ordered = Solution.query.order_by(Solution.sort_order).all()
        assert [s.title for s in ordered] == [s['title'] for s in SOLUTIONS]
        assert ordered[0].slug == 'custom-software-development'
        assert 'API integrations' in ordered[0].feature_list


def test_contacts_keyed_on_email_and_subject(flask_app):
    with flask_app.app_context():
        db.session.add(Contact(
            name='Laura Medina',
            email='laura.medina@example.com',
            subject='Something else',
            message='Different subject, same sender.',
        ))
        db.session.commit()
        run_seeder('ContactSeeder')
        assert Contact.query.filter_by(email='laura.medina@example.com').count() == 2


def test_full_seed_populates_every_table(flask_app):
    with flask_app.app_context():
        run_seeder()
        assert AboutPage.query.count() == len(SECTIONS)
        assert Solution.query.count() == len(SOLUTIONS)
        assert Client.query.count() == len(CLIENTS)
        assert Contact.query.count() == len(CONTACTS)
        assert Insight.query.count() == len(INSIGHTS)
        assert Project.query.count() == len(PROJECTS)
        insight = Insight.query.filter_by(slug='a-pragmatic-path-to-the-cloud').one()
        assert insight.is_published
        assert insight.created_at is not None


def test_slugify():
    assert slugify('Cloud & DevOps') == 'cloud-devops'
    assert slugify('  Clínica Santa Elena ') == 'clinica-santa-elena'
    assert slugify('') == ''
