import django.db.models.deletion
from django.db import migrations, models


WORKFLOW_STATE_CHOICES = [
    ("created", "Created"),
    ("processed", "Processed"),
    ("retracted", "Retracted"),
    ("removed", "Removed"),
]


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Planning",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("related_eform_id", models.IntegerField()),
                ("workflow_state", models.CharField(choices=WORKFLOW_STATE_CHOICES, default="created", max_length=255)),
            ],
            options={
                "db_table": "Plannings",
            },
        ),
        migrations.CreateModel(
            name="PlanningNameTranslation",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("language_id", models.IntegerField()),
                ("name", models.CharField(blank=True, default="", max_length=255)),
                ("planning", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="name_translations", to="items_planning.planning")),
            ],
            options={
                "db_table": "PlanningNameTranslation",
            },
        ),
        migrations.CreateModel(
            name="PlanningCase",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("microting_sdk_case_id", models.IntegerField()),
                ("microting_sdk_eform_id", models.IntegerField()),
                ("status", models.IntegerField(default=0)),
                ("workflow_state", models.CharField(choices=WORKFLOW_STATE_CHOICES, default="created", max_length=255)),
                ("planning", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="planning_cases", to="items_planning.planning")),
            ],
            options={
                "db_table": "PlanningCases",
            },
        ),
    ]
