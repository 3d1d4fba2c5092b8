# lab_core/results/models.py
from django.db import models
from django.utils import timezone

from lab_core.common.models import UUIDModel
from lab_core.profiles.models import Profile


class Result(UUIDModel):
    profile = models.ForeignKey(Profile, on_delete=models.CASCADE, related_name="results")

    sample_id = models.CharField(max_length=64)
    result_type = models.CharField(max_length=64)

    activate_time = models.DateTimeField(default=timezone.now)
    result_time = models.DateTimeField(blank=True, null=True)

    # raw analyser output; shape depends on result_type
    result = models.JSONField(blank=True, null=True)

    class Meta:
        db_table = "results_result"
        indexes = [
            models.Index(fields=["profile", "activate_time"]),
            models.Index(fields=["sample_id"]),
        ]
        constraints = [
            models.UniqueConstraint(fields=["profile", "sample_id"], name="uq_result_sample_per_profile")
        ]

    def __str__(self) -> str:
        return f"{self.sample_id} ({self.result_type})"
