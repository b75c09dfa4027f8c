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
            name="CheckList",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("label", models.CharField(blank=True, default="", max_length=255)),
                ("workflow_state", models.CharField(choices=WORKFLOW_STATE_CHOICES, default="created", max_length=255)),
            ],
            options={
                "db_table": "check_lists",
            },
        ),
        migrations.CreateModel(
            name="Site",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(blank=True, default="", max_length=255)),
                ("workflow_state", models.CharField(choices=WORKFLOW_STATE_CHOICES, default="created", max_length=255)),
            ],
            options={
                "db_table": "sites",
            },
        ),
        migrations.CreateModel(
            name="Case",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("workflow_state", models.CharField(choices=WORKFLOW_STATE_CHOICES, default="created", max_length=255)),
                ("done_at", models.DateTimeField(blank=True, null=True)),
                ("done_at_user_modifiable", models.DateTimeField(blank=True, null=True)),
                ("field_value_1", models.CharField(blank=True, max_length=255, null=True)),
                ("is_archived", models.BooleanField(default=False)),
                ("check_list", models.ForeignKey(null=True, on_delete=django.db.models.deletion.CASCADE, related_name="cases", to="sdk.checklist")),
                ("site", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="cases", to="sdk.site")),
            ],
            options={
                "db_table": "cases",
            },
        ),
    ]
