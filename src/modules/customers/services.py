"""Customer service layer (Use Cases).

Orchestrates business logic for the Customer aggregate, delegating
persistence to the injected ``ICustomerRepository``.

Business rules enforced here:
- A customer must exist before it can be read, updated or deleted.
- Email must be unique among customers.

Domain errors propagate to the caller untouched.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

import structlog

from modules.customers.exceptions import CustomerEmailUnavailable, CustomerNotFound
from modules.customers.models import Customer

if TYPE_CHECKING:
    from modules.customers.dtos import CreateCustomerRequest
    from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)


class CustomerService:
    """Application service for Customer use-cases.

    Receives an ``ICustomerRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: ICustomerRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_customers(self) -> List[Customer]:
        """Return every customer exactly as the repository yields them."""
        return self._repo.find_all()

    def get_customer_by_id(self, id: int) -> Customer:
        """Retrieve a single customer by ID.

        Raises:
            CustomerNotFound: if the customer does not exist.
        """
        customer = self._repo.find_by_id(id)
        if customer is None:
            raise CustomerNotFound.for_lookup(id)
        return customer

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create_customer(self, request: CreateCustomerRequest) -> Customer:
        """Create a new customer after enforcing email uniqueness.

        Raises:
            CustomerEmailUnavailable: if the email is already taken.
        """
        if self._repo.find_by_email(request.email) is not None:
            raise CustomerEmailUnavailable.for_create(request.email)

        customer = Customer(
            name=request.name,
            email=request.email,
            address=request.address,
        )
        customer = self._repo.save(customer)
        logger.info("customer.created", customer_id=customer.id)
        return customer

    def update_customer(
        self, id: int, name: str, email: str, address: str
    ) -> Customer:
        """Overwrite name, email and address of an existing customer.

        Raises:
            CustomerNotFound: if the customer does not exist.
            CustomerEmailUnavailable: if the new email belongs to
                another customer.
        """
        customer = self._repo.find_by_id(id)
        if customer is None:
            raise CustomerNotFound.for_lookup(id)

        if email != customer.email:
            holder = self._repo.find_by_email(email)
            if holder is not None and holder != customer:
                raise CustomerEmailUnavailable.for_update(email)

        customer.name = name
        customer.email = email
        customer.address = address

        customer = self._repo.save(customer)
        logger.info("customer.updated", customer_id=id)
        return customer

    def delete_customer(self, id: int) -> None:
        """Delete a customer.

        Raises:
            CustomerNotFound: if the customer does not exist.
        """
        if not self._repo.exists_by_id(id):
            raise CustomerNotFound.for_delete(id)
        self._repo.delete_by_id(id)
        logger.info("customer.deleted", customer_id=id)
