import django.core.validators
import django.db.models.deletion
import library.models
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
            name="Content",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(max_length=200)),
                ("description", models.TextField(blank=True)),
                ("type", models.CharField(choices=[("pdf", "PDF"), ("pptx", "PowerPoint"), ("doc", "Word (legacy)"), ("docx", "Word")], max_length=8)),
                ("file", models.FileField(blank=True, upload_to="content/", validators=[library.models.validate_upload])),
                ("file_size", models.PositiveIntegerField(default=0)),
                ("is_public", models.BooleanField(db_index=True, default=True)),
                ("rating", models.PositiveSmallIntegerField(default=0)),
                ("rating_count", models.PositiveIntegerField(default=0)),
                ("download_count", models.PositiveIntegerField(default=0)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("course", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="content", to="courses.course")),
                ("institution", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="content", to="courses.institution")),
                ("programme", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="content", to="courses.programme")),
                ("uploaded_by", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="uploads", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "verbose_name_plural": "content",
                "ordering": ["-created_at", "-id"],
            },
        ),
        migrations.CreateModel(
            name="ContentRating",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("rating", models.PositiveSmallIntegerField(validators=[django.core.validators.MinValueValidator(1), django.core.validators.MaxValueValidator(5)])),
                ("review", models.TextField(blank=True)),
                ("created_at", models.DateTimeField()),
                ("content", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="ratings", to="library.content")),
                ("user", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="content_ratings", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "ordering": ["-created_at", "-id"],
                "constraints": [
                    models.UniqueConstraint(fields=("content", "user"), name="unique_rating_per_user"),
                    models.CheckConstraint(condition=models.Q(("rating__gte", 1), ("rating__lte", 5)), name="rating_between_1_and_5"),
                ],
            },
        ),
    ]
