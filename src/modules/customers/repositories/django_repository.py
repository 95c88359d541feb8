"""Django ORM implementation of the Customer repository.

Satisfies ``ICustomerRepository`` using Django's QuerySet API.
Look-ups follow the Null Object pattern: they return ``None`` (or
``False``) instead of raising, and the Service Layer decides how to
translate a missing entity into a domain error.
"""

from __future__ import annotations

from typing import List, Optional

import structlog
from django.core.exceptions import ValidationError
from django.db import transaction

from modules.customers.models import Customer
from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)


class CustomerDjangoRepository(ICustomerRepository):
    """Concrete Customer repository backed by Django ORM."""

    def find_all(self) -> List[Customer]:
        return list(Customer.objects.order_by("id"))

    def find_by_id(self, id: int) -> Optional[Customer]:
        """Retrieve a customer by primary key.

        Returns ``None`` for non-existent or malformed IDs.
        """
        try:
            return Customer.objects.filter(id=id).first()
        except (ValueError, TypeError, ValidationError):
            return None

    def find_by_email(self, email: str) -> Optional[Customer]:
        return Customer.objects.filter(email=email).first()

    def exists_by_id(self, id: int) -> bool:
        try:
            return Customer.objects.filter(id=id).exists()
        except (ValueError, TypeError, ValidationError):
            return False

    @transaction.atomic
    def save(self, entity: Customer) -> Customer:
        """Persist (create or update) a customer."""
        is_new = entity._state.adding
        entity.save()
        logger.info("customer.saved", customer_id=entity.id, is_new=is_new)
        return entity

    @transaction.atomic
    def delete_by_id(self, id: int) -> None:
        """Hard-delete a customer.  Unknown IDs are a no-op."""
        deleted, _ = Customer.objects.filter(id=id).delete()
        if deleted:
            logger.info("customer.deleted_row", customer_id=id)
