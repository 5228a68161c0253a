from datetime import datetime

from models import Insight, slugify
from seeders.base import Seeder

INSIGHTS = [
    {
        'title': 'Five signs your business has outgrown spreadsheets',
        'category': 'Digital Strategy',
        'excerpt': 'When shared workbooks start slowing decisions down, it is time to look at purpose-built tools.',
        'body': (
            'Spreadsheets are a great place to start. Version conflicts, manual '
            'consolidation and missing audit trails are the usual signals that a '
            'dedicated system will pay for itself.'
        ),
        'author': 'Atlas Digitalize Team',
        'published_at': datetime(2024, 3, 4, 9, 0),
    },
    {
        'title': 'A pragmatic path to the cloud',
        'category': 'Cloud',
        'excerpt': 'Lift-and-shift is rarely the end goal. Plan the migration in waves.',
        'body': (
            'Start with workloads that are easy to move and easy to measure, automate '
            'the environment from day one, and review costs monthly.'
        ),
        'author': 'Atlas Digitalize Team',
        'published_at': datetime(2024, 6, 17, 9, 0),
    },
    {
        'title': 'Dashboards people actually open',
        'category': 'Data & Analytics',
        'excerpt': 'Good dashboards answer one question well.',
        'body': (
            'Begin with the decision the dashboard supports, pick three metrics, and '
            'retire anything nobody has viewed in a quarter.'
        ),
        'author': 'Atlas Digitalize Team',
        'published_at': datetime(2024, 9, 2, 9, 0),
    },
]


class InsightSeeder(Seeder):
    def run(self) -> None:
        rows = [
            {'slug': slugify(item['title']), 'is_published': True, **item}
            for item in INSIGHTS
        ]
        self.seed_rows(Insight, ('slug',), rows)
