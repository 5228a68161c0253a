from models import AboutPage
from seeders.base import Seeder

SECTIONS = [
    {
        'section': 'hero',
        'title': 'We build digital foundations for growing companies',
        'subtitle': 'Strategy, engineering and data under one roof',
        'body': (
            'Atlas Digitalize helps organizations modernize their operations with '
            'custom software, cloud infrastructure and analytics that teams actually use.'
        ),
        'image': 'images/about/hero.jpg',
        'sort_order': 1,
    },
    {
        'section': 'mission',
        'title': 'Our mission',
        'subtitle': None,
        'body': (
            'Make digital transformation practical: small, measurable steps that '
            'deliver value from the first sprint.'
        ),
        'image': None,
        'sort_order': 2,
    },
    {
        'section': 'vision',
        'title': 'Our vision',
        'subtitle': None,
        'body': 'To be the technology partner regional businesses trust to scale.',
        'image': None,
        'sort_order': 3,
    },
    {
        'section': 'values',
        'title': 'What we value',
        'subtitle': 'How we work with every client',
        'body': 'Transparency\nOwnership\nCraftsmanship\nLong-term partnerships',
        'image': 'images/about/team.jpg',
        'sort_order': 4,
    },
]


class AboutPageSeeder(Seeder):
    def run(self) -> None:
        self.seed_rows(AboutPage, ('section',), SECTIONS)
