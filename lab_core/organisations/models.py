# lab_core/organisations/models.py
from django.db import models

from lab_core.common.models import UUIDModel


class Organisation(UUIDModel):
    """
    Top-level scope. Every profile (and through it every result) belongs to one.
    """

    name = models.CharField(max_length=255)
    code = models.SlugField(max_length=64, unique=True)

    class Meta:
        db_table = "organisations_organisation"
        indexes = [
            models.Index(fields=["code"]),
            models.Index(fields=["created_at"]),
        ]

    def __str__(self) -> str:
        return f"{self.name} ({self.code})"
