# Generated manually
import django.db.models.deletion
from django.db import migrations, models

import core.fields


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Poll",
            fields=[
                (
                    "address",
                    models.CharField(
                        editable=False,
                        help_text="Derived from poll_id",
                        max_length=64,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("poll_id", core.fields.UnsignedBigIntegerField(db_index=True)),
                ("description", models.CharField(blank=True, max_length=200)),
                ("poll_start", models.PositiveBigIntegerField(help_text="Unix timestamp (seconds)")),
                ("poll_end", models.PositiveBigIntegerField(help_text="Unix timestamp (seconds)")),
                ("candidate_amount", models.PositiveBigIntegerField(default=0)),
                ("total_votes", models.PositiveBigIntegerField(default=0)),
                (
                    "created_by",
                    models.CharField(blank=True, help_text="Identity that created the poll", max_length=128),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "ordering": ["poll_id"],
                "indexes": [
                    models.Index(fields=["poll_start", "poll_end"], name="poll_window_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Candidate",
            fields=[
                (
                    "address",
                    models.CharField(
                        editable=False,
                        help_text="Derived from poll_id and candidate_name",
                        max_length=64,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("candidate_name", models.CharField(max_length=32)),
                ("candidate_votes", models.PositiveBigIntegerField(default=0)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "poll",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="candidates",
                        to="polls.poll",
                    ),
                ),
            ],
            options={
                "ordering": ["created_at", "candidate_name"],
                "constraints": [
                    models.UniqueConstraint(fields=("poll", "candidate_name"), name="unique_poll_candidate_name"),
                ],
            },
        ),
    ]
