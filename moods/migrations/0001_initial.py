from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="MoodRecord",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("journal", models.CharField(help_text="Owner key, e.g. 'user:12' or 'session:<key>'.", max_length=64, verbose_name="Journal")),
                ("position", models.PositiveIntegerField(help_text="0 = newest entry.", verbose_name="Position")),
                ("entry_id", models.BigIntegerField(verbose_name="Entry id")),
                ("mood", models.CharField(choices=[("amazing", "Amazing"), ("happy", "Happy"), ("good", "Good"), ("okay", "Okay"), ("sad", "Sad"), ("angry", "Angry"), ("anxious", "Anxious")], max_length=20, verbose_name="Mood")),
                ("note", models.TextField(blank=True, default="", verbose_name="Note")),
                ("date", models.DateField(verbose_name="Date")),
                ("timestamp", models.CharField(blank=True, default="", max_length=64, verbose_name="Timestamp")),
            ],
            options={
                "verbose_name": "Mood record",
                "verbose_name_plural": "Mood records",
                "ordering": ["journal", "position"],
                "indexes": [models.Index(fields=["journal", "position"], name="idx_journal_position")],
                "constraints": [models.UniqueConstraint(fields=("journal", "entry_id"), name="unique_entry_per_journal")],
            },
        ),
    ]
