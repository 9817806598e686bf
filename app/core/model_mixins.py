"""
Model mixins providing reusable functionality for Django models.

This module contains abstract mixin classes that can be combined with
BaseModel to add specific functionality. These are generic infrastructure
classes with no domain-specific logic.

Available Mixins:
    UUIDPrimaryKeyMixin: Use UUID as primary key

Usage:
    from core.models import BaseModel
    from core.model_mixins import UUIDPrimaryKeyMixin

    class Document(UUIDPrimaryKeyMixin, BaseModel):
        name = models.CharField(max_length=100)

Note:
    - Always list mixins before BaseModel in inheritance
    - Mixins are abstract and don't create database tables
"""

from __future__ import annotations

import uuid

from django.db import models


class UUIDPrimaryKeyMixin(models.Model):
    """
    Use UUID as primary key instead of auto-increment integer.

    Fields:
        id: UUIDField as primary key (auto-generated)

    Usage:
        class Document(UUIDPrimaryKeyMixin, BaseModel):
            name = models.CharField(max_length=100)

        # ID is generated on instantiation, before the first save
        doc = Document(name="Report")
        print(doc.id)  # UUID like: 550e8400-e29b-41d4-a716-446655440000

    Note:
        Because the id exists before insert, use ``instance._state.adding``
        rather than ``instance.pk is None`` to tell unsaved rows apart.
    """

    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
        help_text="Unique identifier for this record",
    )

    class Meta:
        abstract = True
