# Generated manually
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("polls", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="VoterRecord",
            fields=[
                (
                    "address",
                    models.CharField(
                        editable=False,
                        help_text="Derived from voter_identity and poll_id",
                        max_length=64,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("voter_identity", models.CharField(db_index=True, max_length=128)),
                ("voted", models.BooleanField(default=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "poll",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="voter_records",
                        to="polls.poll",
                    ),
                ),
            ],
            options={
                "ordering": ["-updated_at"],
                "indexes": [
                    models.Index(fields=["voter_identity", "voted"], name="voter_identity_voted_idx"),
                ],
            },
        ),
    ]
