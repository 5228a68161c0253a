from datetime import date

from models import Project, slugify
from seeders.base import Seeder

PROJECTS = [
    {
        'title': 'Digital onboarding for Banco Meridiano',
        'client_name': 'Banco Meridiano',
        'category': 'Custom Software Development',
        'summary': 'Account opening moved from branch paperwork to a guided web flow.',
        'description': 'Identity checks, document capture and e-signature integrated with the core banking API.',
        'image': 'images/projects/banco-meridiano.jpg',
        'completed_at': date(2023, 11, 30),
        'is_featured': True,
    },
    {
        'title': 'Fleet visibility platform',
        'client_name': 'Grupo Caribe Logistics',
        'category': 'Data & Analytics',
        'summary': 'Live tracking and delivery KPIs for more than 300 vehicles.',
        'description': 'GPS telemetry pipeline feeding operational dashboards and customer notifications.',
        'image': 'images/projects/caribe-fleet.jpg',
        'completed_at': date(2024, 4, 15),
        'is_featured': True,
    },
    {
        'title': 'Patient portal',
        'client_name': 'Clinica Santa Elena',
        'category': 'Custom Software Development',
        'summary': 'Appointments, lab results and billing in a single patient portal.',
        'description': None,
        'image': 'images/projects/santa-elena.jpg',
        'completed_at': date(2024, 8, 1),
        'is_featured': False,
    },
    {
        'title': 'Cloud migration for Instituto Horizonte',
        'client_name': 'Instituto Horizonte',
        'category': 'Cloud & DevOps',
        'summary': 'Learning platform moved to managed cloud services with zero downtime.',
        'description': 'Infrastructure as code, automated backups and a blue/green release process.',
        'image': 'images/projects/horizonte-cloud.jpg',
        'completed_at': date(2025, 1, 20),
        'is_featured': False,
    },
]


class ProjectSeeder(Seeder):
    def run(self) -> None:
        rows = [{'slug': slugify(item['title']), **item} for item in PROJECTS]
        self.seed_rows(Project, ('slug',), rows)
