# Generated manually
from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ("votes", "0001_initial"),
    ]

    operations = [
        migrations.AlterField(
            model_name="voterrecord",
            name="voter_identity",
            field=models.CharField(db_index=True, max_length=150),
        ),
    ]
