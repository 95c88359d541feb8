"""Customer model.

Business rules implemented:
- Email must be unique in the system (also enforced at the service layer).
- Identifiers are integers assigned by storage.
"""

from __future__ import annotations

from django.db import models

from modules.core.models import TimestampedModel


class Customer(TimestampedModel):
    """Customer aggregate root."""

    name = models.CharField(max_length=255)
    email = models.EmailField(max_length=254, unique=True)
    address = models.TextField(blank=True, default="")

    class Meta:
        db_table = "customers"
        ordering = ["id"]

    def __str__(self) -> str:
        return f"{self.name} ({self.email})"
