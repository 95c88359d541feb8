"""Customer DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
DTOs are immutable (``frozen=True``).

- ``CreateCustomerRequest``: input for customer creation.
- ``CustomerOutputDTO``: read model handed back to callers.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Optional

from pydantic import BaseModel, ConfigDict

if TYPE_CHECKING:
    from modules.customers.models import Customer


# ---------------------------------------------------------------------------
# Input DTO
# ---------------------------------------------------------------------------


class CreateCustomerRequest(BaseModel):
    """Immutable DTO for customer creation requests.

    ``email`` is kept exactly as given; uniqueness is checked verbatim.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    email: str
    address: str = ""


# ---------------------------------------------------------------------------
# Output DTO
# ---------------------------------------------------------------------------


class CustomerOutputDTO(BaseModel):
    """Immutable DTO for customer responses.

    Timestamps are optional: entities that never went through the ORM
    (e.g. the in-memory repository) have none.
    """

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    email: str
    address: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, customer: Customer) -> CustomerOutputDTO:
        """Build an output DTO from a Customer model instance."""
        return cls(
            id=customer.id,
            name=customer.name,
            email=customer.email,
            address=customer.address,
            created_at=customer.created_at,
            updated_at=customer.updated_at,
        )
