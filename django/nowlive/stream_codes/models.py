import uuid
from datetime import timedelta

from django.conf import settings
from django.db import models
from django.utils import timezone


def default_expires_at():
    return timezone.now() + timedelta(seconds=settings.STREAM_CODE_TTL_SECONDS)


class StreamCodeQuerySet(models.QuerySet):
    def live(self, now=None):
        return self.filter(is_active=True, expires_at__gt=now or timezone.now())


class StreamCode(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    code = models.CharField(max_length=16, unique=True)
    stream_data = models.JSONField()
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    expires_at = models.DateTimeField(default=default_expires_at)

    objects = StreamCodeQuerySet.as_manager()

    class Meta:
        indexes = [
            models.Index(fields=["is_active", "expires_at"], name="stream_code_live_idx"),
        ]

    def is_live(self, now=None) -> bool:
        return self.is_active and self.expires_at > (now or timezone.now())

    def __str__(self):
        return f"{self.code} active={self.is_active} expires={self.expires_at:%Y-%m-%d %H:%M}"
