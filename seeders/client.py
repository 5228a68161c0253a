from models import Client
from seeders.base import Seeder

CLIENTS = [
    {
        'name': 'Banco Meridiano',
        'industry': 'Finance',
        'logo': 'images/clients/banco-meridiano.png',
        'website': 'https://bancomeridiano.example.com',
        'testimonial': 'Atlas rebuilt our onboarding flow and cut processing time in half.',
        'is_featured': True,
    },
    {
        'name': 'Grupo Caribe Logistics',
        'industry': 'Logistics',
        'logo': 'images/clients/caribe-logistics.png',
        'website': 'https://caribelogistics.example.com',
        'testimonial': 'Real-time fleet tracking finally gave us one view of operations.',
        'is_featured': True,
    },
    {
        'name': 'Clinica Santa Elena',
        'industry': 'Healthcare',
        'logo': 'images/clients/santa-elena.png',
        'website': None,
        'testimonial': None,
        'is_featured': False,
    },
    {
        'name': 'Verde Retail',
        'industry': 'Retail',
        'logo': 'images/clients/verde-retail.png',
        'website': 'https://verderetail.example.com',
        'testimonial': None,
        'is_featured': False,
    },
    {
        'name': 'Instituto Horizonte',
        'industry': 'Education',
        'logo': 'images/clients/instituto-horizonte.png',
        'website': None,
        'testimonial': 'Our students and teachers adopted the new portal in a week.',
        'is_featured': True,
    },
]


class ClientSeeder(Seeder):
    def run(self) -> None:
        rows = [dict(client, sort_order=i) for i, client in enumerate(CLIENTS, start=1)]
        self.seed_rows(Client, ('name',), rows)
