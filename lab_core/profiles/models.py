# lab_core/profiles/models.py
from django.db import models

from lab_core.common.models import UUIDModel
from lab_core.organisations.models import Organisation


class Profile(UUIDModel):
    """
    Patient profile registered under an organisation.
    """

    organisation = models.ForeignKey(Organisation, on_delete=models.CASCADE, related_name="profiles")

    name = models.CharField(max_length=255)
    email = models.EmailField(blank=True)
    phone = models.CharField(max_length=32, blank=True)
    date_of_birth = models.DateField(null=True, blank=True)
    gender = models.CharField(max_length=32, blank=True)

    class Meta:
        db_table = "profiles_profile"
        indexes = [
            models.Index(fields=["organisation", "name"]),
        ]

    def __str__(self) -> str:
        return self.name
