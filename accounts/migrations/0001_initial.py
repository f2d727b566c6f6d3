import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("courses", "0001_initial"),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="UserProfile",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("role", models.CharField(choices=[("student", "Student"), ("institution", "Institution"), ("admin", "Admin")], default="student", max_length=16)),
                ("subscription_tier", models.CharField(choices=[("free", "Free"), ("premium", "Premium"), ("institution", "Institution")], default="free", max_length=16)),
                ("current_level", models.CharField(blank=True, max_length=100)),
                ("discovery_source", models.CharField(blank=True, max_length=200)),
                ("goals", models.JSONField(blank=True, default=list)),
                ("target_exam_date", models.DateTimeField(blank=True, null=True)),
                ("completed_onboarding", models.BooleanField(default=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("institution", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="profiles", to="courses.institution")),
                ("programme", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="profiles", to="courses.programme")),
                ("user", models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name="profile", to=settings.AUTH_USER_MODEL)),
            ],
        ),
    ]
