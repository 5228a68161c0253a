import os
import sys
import pytest

sys.path.append(os.path.dirname(os.path.dirname(__file__)))
from app import create_app
from models import db, Solution, Insight
from seeders import run_seeder


@pytest.fixture
def client(tmp_path):
    db_path = tmp_path / 'test.sqlite'
    application = create_app('config.TestingConfig', SQLALCHEMY_DATABASE_URI=f'sqlite:///{db_path}')
    with application.app_context():
        db.create_all()
        run_seeder()
        Solution.query.filter_by(slug='digital-strategy').one().is_active = False
        Insight.query.filter_by(slug='dashboards-people-actually-open').one().is_published = False
        db.session.commit()
    with application.test_client() as client:
        yield client
    with application.app_context():
        db.drop_all()
    if db_path.exists():
        db_path.unlink()


def test_health(client):
    assert client.get('/api/health').get_json() == {'status': 'ok'}


def test_index_redirects_to_about(client):
    resp = client.get('/')
    assert resp.status_code == 302
    assert resp.headers['Location'].endswith('/api/about')


def test_about_sections_in_order(client):
    sections = client.get('/api/about').get_json()['sections']
    assert [s['section'] for s in sections] == ['hero', 'mission', 'vision', 'values']


def test_solutions_hide_inactive(client):
    solutions = client.get('/api/solutions').get_json()['solutions']
    slugs = [s['slug'] for s in solutions]
    assert 'digital-strategy' not in slugs
    assert slugs[0] == 'custom-software-development'
    assert isinstance(solutions[0]['features'], list)


def test_clients_listing(client):
    clients = client.get('/api/clients').get_json()['clients']
    assert clients[0]['name'] == 'Banco Meridiano'
    assert len(clients) == 5


def test_insights_only_published(client):
    insights = client.get('/api/insights').get_json()['insights']
    slugs = [i['slug'] for i in insights]
    assert 'dashboards-people-actually-open' not in slugs
    assert slugs[0] == 'a-pragmatic-path-to-the-cloud'
    assert 'body' not in insights[0]


def test_insight_detail_and_missing(client):
    resp = client.get('/api/insights/a-pragmatic-path-to-the-cloud')
    assert resp.status_code == 200
    assert 'body' in resp.get_json()
    assert client.get('/api/insights/dashboards-people-actually-open').status_code == 404
    missing = client.get('/api/insights/nothing-here')
    assert missing.status_code == 404
    assert missing.get_json() == {'error': 'insight not found'}


def test_projects_newest_first(client):
    projects = client.get('/api/projects').get_json()['projects']
    assert projects[0]['slug'] == 'cloud-migration-for-instituto-horizonte'
    assert projects[0]['completed_at'] == '2025-01-20'


def test_project_detail(client):
    resp = client.get('/api/projects/fleet-visibility-platform')
    assert resp.status_code == 200
    data = resp.get_json()
    assert data['client_name'] == 'Grupo Caribe Logistics'
    assert 'description' in data
    assert client.get('/api/projects/unknown').status_code == 404
