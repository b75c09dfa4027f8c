from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="ReportAccess",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
            ],
            options={
                "managed": False,
                "default_permissions": (),
                "permissions": [
                    ("greate_belt_pn_oresund_reports_get", "Obtain Øresund reports"),
                    ("greate_belt_pn_greate_belt_reports_get", "Obtain Greate Belt reports"),
                ],
            },
        ),
    ]
