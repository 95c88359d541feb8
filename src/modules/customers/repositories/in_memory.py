"""In-memory implementation of the Customer repository."""

from __future__ import annotations

from typing import Dict, List, Optional

from modules.customers.models import Customer
from modules.customers.repositories.interfaces import ICustomerRepository


class InMemoryCustomerRepository(ICustomerRepository):
    """Dict-backed Customer repository.

    This implementation is intended for testing and development purposes only.
    It does not persist data and is not suitable for production use.
    Entities keep insertion order; new entities receive sequential integer IDs
    starting at 1.
    """

    def __init__(self) -> None:
        self._customers: Dict[int, Customer] = {}  # id: customer
        self._next_id = 1

    def find_all(self) -> List[Customer]:
        return list(self._customers.values())

    def find_by_id(self, id: int) -> Optional[Customer]:
        return self._customers.get(id)

    def find_by_email(self, email: str) -> Optional[Customer]:
        return next(
            (c for c in self._customers.values() if c.email == email), None
        )

    def exists_by_id(self, id: int) -> bool:
        return id in self._customers

    def save(self, entity: Customer) -> Customer:
        if entity.id is None:
            entity.id = self._next_id
            self._next_id += 1
        else:
            self._next_id = max(self._next_id, entity.id + 1)
        self._customers[entity.id] = entity
        return entity

    def delete_by_id(self, id: int) -> None:
        self._customers.pop(id, None)
