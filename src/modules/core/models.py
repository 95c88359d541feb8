"""Base abstract models shared by the domain modules.

Provides ``TimestampedModel``: storage-assigned integer primary key plus
``created_at`` / ``updated_at`` bookkeeping.
"""

from __future__ import annotations

from django.db import models


class TimestampedModel(models.Model):
    """Abstract base with created/updated timestamps."""

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True
