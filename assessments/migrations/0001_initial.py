import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("courses", "0001_initial"),
        ("library", "0001_initial"),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Assessment",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(max_length=200)),
                ("description", models.TextField(blank=True)),
                ("type", models.CharField(choices=[("quiz", "Quiz"), ("test", "Test"), ("exam", "Exam"), ("flashcard", "Flashcard")], max_length=16)),
                ("questions", models.JSONField(default=list)),
                ("time_limit", models.PositiveIntegerField(blank=True, null=True)),
                ("total_points", models.PositiveIntegerField(default=0)),
                ("is_ai_generated", models.BooleanField(default=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("course", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="assessments", to="courses.course")),
                ("created_by", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="assessments", to=settings.AUTH_USER_MODEL)),
                ("source_content", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="assessments", to="library.content")),
            ],
            options={
                "ordering": ["-created_at", "-id"],
            },
        ),
        migrations.CreateModel(
            name="AssessmentAttempt",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("answers", models.JSONField(default=list)),
                ("score", models.PositiveIntegerField()),
                ("percentage", models.PositiveSmallIntegerField()),
                ("time_spent", models.PositiveIntegerField(blank=True, null=True)),
                ("completed_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("assessment", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="attempts", to="assessments.assessment")),
                ("user", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="assessment_attempts", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "ordering": ["-completed_at", "-id"],
            },
        ),
    ]
