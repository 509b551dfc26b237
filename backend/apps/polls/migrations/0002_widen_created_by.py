# Generated manually
from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ("polls", "0001_initial"),
    ]

    operations = [
        migrations.AlterField(
            model_name="poll",
            name="created_by",
            field=models.CharField(blank=True, help_text="Identity that created the poll", max_length=150),
        ),
    ]
