import uuid

from django.db import migrations, models

import stream_codes.models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="StreamCode",
            fields=[
                ("id", models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False, serialize=False)),
                ("code", models.CharField(max_length=16, unique=True)),
                ("stream_data", models.JSONField()),
                ("is_active", models.BooleanField(default=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("expires_at", models.DateTimeField(default=stream_codes.models.default_expires_at)),
            ],
            options={
                "indexes": [
                    models.Index(fields=["is_active", "expires_at"], name="stream_code_live_idx"),
                ],
            },
        ),
    ]
