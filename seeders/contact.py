from models import Contact
from seeders.base import Seeder

CONTACTS = [
    {
        'name': 'Laura Medina',
        'email': 'laura.medina@example.com',
        'phone': '+1 809 555 0101',
        'company': 'Verde Retail',
        'subject': 'E-commerce integration',
        'message': 'We would like a quote to connect our point of sale with an online store.',
        'status': 'new',
    },
    {
        'name': 'Carlos Rivas',
        'email': 'carlos.rivas@example.com',
        'phone': None,
        'company': 'Rivas & Asociados',
        'subject': 'Cloud migration assessment',
        'message': 'Our servers are on premises and we are evaluating a move to the cloud.',
        'status': 'read',
    },
    {
        'name': 'Ana Torres',
        'email': 'ana.torres@example.com',
        'phone': '+1 829 555 0147',
        'company': None,
        'subject': 'Partnership inquiry',
        'message': 'I represent a design studio interested in collaborating on projects.',
        'status': 'replied',
    },
]


class ContactSeeder(Seeder):
    def run(self) -> None:
        self.seed_rows(Contact, ('email', 'subject'), CONTACTS)
