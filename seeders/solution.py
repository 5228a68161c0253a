from models import Solution, slugify
from seeders.base import Seeder

SOLUTIONS = [
    {
        'title': 'Custom Software Development',
        'summary': 'Web and mobile applications designed around your processes.',
        'description': (
            'From discovery workshops to production support, we design, build and '
            'maintain software that fits the way your team works.'
        ),
        'icon': 'code',
        'features': 'Discovery and UX research\nWeb and mobile apps\nAPI integrations\nOngoing support',
    },
    {
        'title': 'Cloud & DevOps',
        'summary': 'Reliable infrastructure with automated delivery pipelines.',
        'description': 'Migrations, infrastructure as code, monitoring and cost optimisation.',
        'icon': 'cloud',
        'features': 'Cloud migration\nCI/CD pipelines\nMonitoring and alerting\nCost optimisation',
    },
    {
        'title': 'Data & Analytics',
        'summary': 'Dashboards and pipelines that turn data into decisions.',
        'description': 'We consolidate scattered data sources and deliver reporting your managers trust.',
        'icon': 'chart',
        'features': 'Data warehousing\nBI dashboards\nETL pipelines',
    },
    {
        'title': 'Digital Strategy',
        'summary': 'A practical roadmap for your digital transformation.',
        'description': 'Assessments, technology roadmaps and vendor selection.',
        'icon': 'compass',
        'features': 'Maturity assessment\nTechnology roadmap\nVendor selection',
    },
]


def _rows():
    for position, solution in enumerate(SOLUTIONS, start=1):
        yield {
            'slug': solution.get('slug') or slugify(solution['title']),
            'sort_order': position,
            'is_active': True,
            **solution,
        }


class SolutionSeeder(Seeder):
    def run(self) -> None:
        self.seed_rows(Solution, ('slug',), list(_rows()))
