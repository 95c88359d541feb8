"""Customer domain exceptions.

Raised by the Service Layer when business rules are violated.
Every exception carries a ``kind`` tag plus the offending identifier or
email, so callers can branch on data instead of on the class hierarchy.
"""

from __future__ import annotations


class CustomerError(Exception):
    """Base class for customer business-rule violations."""

    kind: str = "customer_error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class CustomerNotFound(CustomerError):
    """The requested customer does not exist."""

    kind = "customer_not_found"

    def __init__(self, message: str, customer_id: object) -> None:
        super().__init__(message)
        self.customer_id = customer_id

    @classmethod
    def for_lookup(cls, customer_id: object) -> CustomerNotFound:
        return cls(f"Customer with id {customer_id} doesn't found", customer_id)

    @classmethod
    def for_delete(cls, customer_id: object) -> CustomerNotFound:
        return cls(f"Customer with id {customer_id} doesn't exist.", customer_id)


class CustomerEmailUnavailable(CustomerError):
    """The email is already associated with another customer."""

    kind = "customer_email_unavailable"

    def __init__(self, message: str, email: str) -> None:
        super().__init__(message)
        self.email = email

    @classmethod
    def for_create(cls, email: str) -> CustomerEmailUnavailable:
        return cls(f"The email {email} unavailable.", email)

    @classmethod
    def for_update(cls, email: str) -> CustomerEmailUnavailable:
        return cls(f'The email "{email}" unavailable to update', email)
