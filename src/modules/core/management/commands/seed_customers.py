from __future__ import annotations

from django.core.management.base import BaseCommand

from modules.customers.dtos import CreateCustomerRequest, CustomerOutputDTO
from modules.customers.exceptions import CustomerEmailUnavailable
from modules.customers.repositories.django_repository import CustomerDjangoRepository
from modules.customers.services import CustomerService

SEED_CUSTOMERS = [
    ("Ana Souza", "ana@example.com", "12 Harbour Road"),
    ("Bruno Lima", "bruno@example.com", "48 Mill Lane"),
    ("Carla Mendes", "carla@example.com", "7 Station Street"),
    ("Daniel Costa", "daniel@example.com", "230 Park Avenue"),
    ("Eduardo Alves", "eduardo@example.com", "5 Orchard Close"),
    ("Fernanda Rocha", "fernanda@example.com", "91 King Street"),
]


class Command(BaseCommand):
    help = "Seed database with development customers."

    def handle(self, *args, **options):
        self.stdout.write("Seeding customers...")
        service = CustomerService(repository=CustomerDjangoRepository())

        created = skipped = 0
        for name, email, address in SEED_CUSTOMERS:
            request = CreateCustomerRequest(name=name, email=email, address=address)
            try:
                customer = service.create_customer(request)
            except CustomerEmailUnavailable:
                skipped += 1
                continue
            created += 1
            self.stdout.write(CustomerOutputDTO.from_entity(customer).model_dump_json())

        self.stdout.write(
            self.style.SUCCESS(f"Seed completed: created={created}, skipped={skipped}")
        )
