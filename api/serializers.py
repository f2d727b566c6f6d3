"""Serializers for REST API v1.

Request-only serializers (ratings, attempts, study aid requests) sit
next to the model serializers they feed.
"""
from __future__ import annotations

from django.contrib.auth import get_user_model
from rest_framework import serializers

from accounts.models import UserProfile
from activity.models import StudySession, UserActivity
from assessments.models import Assessment, AssessmentAttempt
from assessments.services import create_assessment
from courses.models import Course, Enrolment, Institution, Programme
from library.models import Content, validate_upload
from studyaids.models import AIGeneratedContent, LearningPath

User = get_user_model()


class UserSerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = ("id", "username")


class ProfileSerializer(serializers.ModelSerializer):
    user = UserSerializer(read_only=True)
    goals = serializers.ListField(child=serializers.CharField(max_length=200), required=False)

    class Meta:
        model = UserProfile
        fields = (
            "id", "user", "role", "subscription_tier", "institution", "programme", "current_level",
            "discovery_source", "goals", "target_exam_date", "completed_onboarding", "created_at", "updated_at",
        )
        read_only_fields = ("role", "subscription_tier", "created_at", "updated_at")

    def validate(self, attrs):
        institution = attrs.get("institution", getattr(self.instance, "institution", None))
        programme = attrs.get("programme", getattr(self.instance, "programme", None))
        if programme and institution and programme.institution_id != institution.id:
            raise serializers.ValidationError({"programme": "Programme does not belong to the selected institution."})
        return attrs


class InstitutionSerializer(serializers.ModelSerializer):
    class Meta:
        model = Institution
        fields = ("id", "name", "type", "country", "website", "created_at")


class ProgrammeSerializer(serializers.ModelSerializer):
    class Meta:
        model = Programme
        fields = ("id", "name", "description", "institution", "created_at")


class CourseSerializer(serializers.ModelSerializer):
    class Meta:
        model = Course
        fields = ("id", "name", "code", "description", "institution", "created_at")


class EnrolmentSerializer(serializers.ModelSerializer):
    course = CourseSerializer(read_only=True)

    class Meta:
        model = Enrolment
        fields = ("id", "course", "progress", "enrolled_at")


class ProgressSerializer(serializers.Serializer):
    progress = serializers.IntegerField(min_value=0, max_value=100)


class ContentSerializer(serializers.ModelSerializer):
    uploaded_by = UserSerializer(read_only=True)
    file = serializers.FileField(write_only=True, validators=[validate_upload])
    is_public = serializers.BooleanField(default=True)
    file_url = serializers.SerializerMethodField()

    class Meta:
        model = Content
        fields = (
            "id", "title", "description", "type", "file", "file_url", "file_size", "uploaded_by",
            "course", "institution", "programme", "is_public", "rating", "rating_count",
            "download_count", "created_at", "updated_at",
        )
        read_only_fields = ("file_size", "rating", "rating_count", "download_count", "created_at", "updated_at")

    def get_file_url(self, obj) -> str:
        if not obj.file:
            return ""
        request = self.context.get("request")
        return request.build_absolute_uri(obj.file.url) if request else obj.file.url


class ContentUpdateSerializer(serializers.ModelSerializer):
    """Metadata edits; derived and file fields are not accepted here."""

    class Meta:
        model = Content
        fields = ("title", "description", "course", "institution", "programme", "is_public")
        extra_kwargs = {"title": {"required": False}}


class RatingSerializer(serializers.Serializer):
    rating = serializers.IntegerField(min_value=1, max_value=5)
    review = serializers.CharField(required=False, allow_blank=True, allow_null=True)


class QuestionSerializer(serializers.Serializer):
    question = serializers.CharField()
    options = serializers.ListField(child=serializers.CharField(), min_length=2)
    correctAnswer = serializers.IntegerField(min_value=0)
    explanation = serializers.CharField(required=False, allow_blank=True)

    def validate(self, attrs):
        if attrs["correctAnswer"] >= len(attrs["options"]):
            raise serializers.ValidationError({"correctAnswer": "Must index one of the options."})
        return attrs


class AssessmentSerializer(serializers.ModelSerializer):
    created_by = UserSerializer(read_only=True)
    questions = QuestionSerializer(many=True)
    total_points = serializers.IntegerField(min_value=0, required=False)
    question_count = serializers.IntegerField(read_only=True)

    class Meta:
        model = Assessment
        fields = (
            "id", "title", "description", "type", "questions", "question_count", "time_limit", "total_points",
            "created_by", "course", "is_ai_generated", "source_content", "created_at",
        )
        read_only_fields = ("is_ai_generated", "created_at")

    def create(self, validated_data):
        questions = [dict(q) for q in validated_data.pop("questions")]
        user = validated_data.pop("created_by")
        return create_assessment(user, questions=questions, **validated_data)


class AttemptSubmitSerializer(serializers.Serializer):
    # Elements are graded, not validated: anything that is not a valid
    # option index simply counts as a wrong answer.
    answers = serializers.ListField(child=serializers.JSONField(allow_null=True), allow_empty=True)
    time_spent = serializers.IntegerField(min_value=0, required=False, allow_null=True)


class AttemptSerializer(serializers.ModelSerializer):
    class Meta:
        model = AssessmentAttempt
        fields = ("id", "assessment", "user", "answers", "score", "percentage", "time_spent", "completed_at")
        read_only_fields = fields


class StudySessionSerializer(serializers.ModelSerializer):
    activities_completed = serializers.ListField(
        child=serializers.CharField(max_length=200), required=False, default=list
    )
    duration = serializers.IntegerField(min_value=1)

    class Meta:
        model = StudySession
        fields = ("id", "course", "content", "duration", "activities_completed", "created_at")
        read_only_fields = ("created_at",)


class UserActivitySerializer(serializers.ModelSerializer):
    class Meta:
        model = UserActivity
        fields = ("id", "activity_type", "description", "metadata", "created_at")
        read_only_fields = fields


class AnalyticsSerializer(serializers.Serializer):
    studyStreak = serializers.IntegerField()
    totalStudyTime = serializers.IntegerField()
    avgScore = serializers.IntegerField()
    bestScore = serializers.IntegerField()
    sessionsThisMonth = serializers.IntegerField()
    learningVelocity = serializers.FloatField()


class StudyAidRequestSerializer(serializers.Serializer):
    content = serializers.CharField(trim_whitespace=True)
    source_content = serializers.PrimaryKeyRelatedField(queryset=Content.objects.all(), required=False, allow_null=True)


class FlashcardRequestSerializer(StudyAidRequestSerializer):
    count = serializers.IntegerField(min_value=1, max_value=50, default=10)


class QuizRequestSerializer(StudyAidRequestSerializer):
    question_count = serializers.IntegerField(min_value=1, max_value=50, default=5)


class AIGeneratedContentSerializer(serializers.ModelSerializer):
    class Meta:
        model = AIGeneratedContent
        fields = ("id", "type", "ai_content", "model", "source_content", "created_at")
        read_only_fields = fields


class LearningPathSerializer(serializers.ModelSerializer):
    class Meta:
        model = LearningPath
        fields = ("id", "title", "description", "target_date", "tasks", "is_completed", "created_at", "updated_at")
        read_only_fields = fields


class LearningPathRequestSerializer(serializers.Serializer):
    goals = serializers.ListField(child=serializers.CharField(max_length=200), min_length=1)
    target_date = serializers.DateTimeField()
    current_level = serializers.CharField(max_length=100, allow_blank=True, default="")
