"""REST API v1 viewsets and endpoints."""
from __future__ import annotations

from django.db.models import Q
from rest_framework import mixins, status, viewsets
from rest_framework.decorators import action, api_view, permission_classes
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.models import UserProfile
from accounts.services import upsert_profile
from activity.analytics import user_analytics
from activity.models import StudySession
from activity.services import recent_activities, record_study_session
from assessments.models import Assessment, AssessmentAttempt
from assessments.services import submit_attempt
from config.conf import studyhub_setting
from courses.models import Course, Enrolment, Institution, Programme
from courses.services import enrol_user, update_progress
from library.models import Content
from library.services import delete_content, rate_content, update_content, upload_content
from studyaids import services as studyaids
from studyaids.models import AIGeneratedContent, LearningPath
from .permissions import IsUploaderOrReadOnly
from .serializers import (
    AIGeneratedContentSerializer,
    AnalyticsSerializer,
    AssessmentSerializer,
    AttemptSerializer,
    AttemptSubmitSerializer,
    ContentSerializer,
    ContentUpdateSerializer,
    CourseSerializer,
    EnrolmentSerializer,
    FlashcardRequestSerializer,
    InstitutionSerializer,
    LearningPathRequestSerializer,
    LearningPathSerializer,
    ProfileSerializer,
    ProgrammeSerializer,
    ProgressSerializer,
    QuizRequestSerializer,
    RatingSerializer,
    StudyAidRequestSerializer,
    StudySessionSerializer,
    UserActivitySerializer,
)


class ProfileView(APIView):
    """The caller's own profile: GET to read, POST to create or update."""

    serializer_class = ProfileSerializer

    def get(self, request):
        profile, _ = UserProfile.objects.select_related("user").get_or_create(user=request.user)
        return Response(ProfileSerializer(profile).data)

    def post(self, request):
        profile, _ = UserProfile.objects.get_or_create(user=request.user)
        serializer = ProfileSerializer(profile, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        profile = upsert_profile(request.user, serializer.validated_data)
        return Response(ProfileSerializer(profile).data)


class InstitutionViewSet(viewsets.ReadOnlyModelViewSet):
    queryset = Institution.objects.all().order_by("name")
    serializer_class = InstitutionSerializer
    permission_classes = [AllowAny]
    search_fields = ["name", "country"]
    ordering_fields = ["name", "created_at"]

    @action(detail=True, methods=["get"])
    def programmes(self, request, pk=None):
        institution = self.get_object()
        qs = Programme.objects.filter(institution=institution).order_by("name", "id")
        page = self.paginate_queryset(qs)
        if page is not None:
            return self.get_paginated_response(ProgrammeSerializer(page, many=True).data)
        return Response(ProgrammeSerializer(qs, many=True).data)


class ProgrammeViewSet(viewsets.ReadOnlyModelViewSet):
    queryset = Programme.objects.all().order_by("name", "id")
    serializer_class = ProgrammeSerializer
    permission_classes = [AllowAny]
    filterset_fields = ["institution"]
    search_fields = ["name"]
    ordering_fields = ["name", "created_at"]


class CourseViewSet(viewsets.ReadOnlyModelViewSet):
    queryset = Course.objects.all().order_by("name", "id")
    serializer_class = CourseSerializer
    filterset_fields = ["institution"]
    search_fields = ["name", "code", "description"]
    ordering_fields = ["name", "created_at"]

    @action(detail=False, methods=["get"])
    def mine(self, request):
        qs = Enrolment.objects.filter(user=request.user).select_related("course").order_by("-enrolled_at", "-id")
        page = self.paginate_queryset(qs)
        if page is not None:
            return self.get_paginated_response(EnrolmentSerializer(page, many=True).data)
        return Response(EnrolmentSerializer(qs, many=True).data)

    @action(detail=True, methods=["post"])
    def enrol(self, request, pk=None):
        enrolment = enrol_user(request.user, self.get_object())
        return Response(EnrolmentSerializer(enrolment).data, status=status.HTTP_201_CREATED)

    @action(detail=True, methods=["post"])
    def progress(self, request, pk=None):
        serializer = ProgressSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        enrolment = update_progress(request.user, self.get_object(), serializer.validated_data["progress"])
        return Response(EnrolmentSerializer(enrolment).data)


class ContentViewSet(viewsets.ModelViewSet):
    """Note library: public content plus the caller's own uploads."""

    serializer_class = ContentSerializer
    permission_classes = [IsAuthenticated, IsUploaderOrReadOnly]
    parser_classes = [MultiPartParser, FormParser, JSONParser]
    filterset_fields = ["course", "institution", "programme", "type"]
    search_fields = ["title", "description"]
    ordering_fields = ["created_at", "rating", "title"]

    def get_queryset(self):
        user = self.request.user
        return (
            Content.objects.select_related("uploaded_by")
            .filter(Q(is_public=True) | Q(uploaded_by=user))
            .order_by("-created_at", "-id")
        )

    def get_serializer_class(self):
        if self.action in ("update", "partial_update"):
            return ContentUpdateSerializer
        return ContentSerializer

    def perform_create(self, serializer):
        data = dict(serializer.validated_data)
        file = data.pop("file")
        serializer.instance = upload_content(self.request.user, file, **data)

    def update(self, request, *args, **kwargs):
        partial = kwargs.pop("partial", False)
        instance = self.get_object()
        serializer = ContentUpdateSerializer(instance, data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)
        content = update_content(instance, serializer.validated_data)
        return Response(ContentSerializer(content, context=self.get_serializer_context()).data)

    def perform_destroy(self, instance):
        delete_content(instance)

    def _paginated(self, qs):
        page = self.paginate_queryset(qs)
        if page is not None:
            return self.get_paginated_response(ContentSerializer(page, many=True, context=self.get_serializer_context()).data)
        return Response(ContentSerializer(qs, many=True, context=self.get_serializer_context()).data)

    @action(detail=False, methods=["get"])
    def mine(self, request):
        qs = Content.objects.select_related("uploaded_by").filter(uploaded_by=request.user).order_by("-created_at", "-id")
        return self._paginated(qs)

    @action(detail=False, methods=["get"])
    def public(self, request):
        qs = self.filter_queryset(
            Content.objects.select_related("uploaded_by").filter(is_public=True).order_by("-created_at", "-id")
        )
        return self._paginated(qs)

    @action(detail=True, methods=["post"], serializer_class=RatingSerializer)
    def rate(self, request, pk=None):
        content = self.get_object()
        serializer = RatingSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        rate_content(content, request.user, serializer.validated_data["rating"], serializer.validated_data.get("review"))
        return Response({"detail": "Rating submitted successfully."})


class AssessmentViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    mixins.CreateModelMixin,
    viewsets.GenericViewSet,
):
    """Assessments are immutable once created: no update or delete routes."""

    queryset = Assessment.objects.select_related("created_by").all().order_by("-created_at", "-id")
    serializer_class = AssessmentSerializer
    filterset_fields = ["course", "created_by", "type", "is_ai_generated"]
    search_fields = ["title", "description"]
    ordering_fields = ["created_at", "title"]

    def perform_create(self, serializer):
        serializer.save(created_by=self.request.user)

    @action(detail=True, methods=["post"], serializer_class=AttemptSubmitSerializer)
    def attempt(self, request, pk=None):
        assessment = self.get_object()
        serializer = AttemptSubmitSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        attempt = submit_attempt(
            request.user,
            assessment,
            serializer.validated_data["answers"],
            serializer.validated_data.get("time_spent"),
        )
        return Response(AttemptSerializer(attempt).data, status=status.HTTP_201_CREATED)


class AttemptViewSet(mixins.ListModelMixin, mixins.RetrieveModelMixin, viewsets.GenericViewSet):
    serializer_class = AttemptSerializer
    filterset_fields = ["assessment"]
    ordering_fields = ["completed_at", "percentage"]

    def get_queryset(self):
        return AssessmentAttempt.objects.filter(user=self.request.user).order_by("-completed_at", "-id")


class StudySessionViewSet(mixins.ListModelMixin, mixins.CreateModelMixin, viewsets.GenericViewSet):
    serializer_class = StudySessionSerializer
    ordering_fields = ["created_at", "duration"]

    def get_queryset(self):
        return StudySession.objects.filter(user=self.request.user).order_by("-created_at", "-id")

    def perform_create(self, serializer):
        data = serializer.validated_data
        serializer.instance = record_study_session(
            self.request.user,
            duration=data["duration"],
            course=data.get("course"),
            content=data.get("content"),
            activities_completed=data.get("activities_completed"),
        )


@api_view(["GET"])
@permission_classes([IsAuthenticated])
def activities(request):
    """The caller's latest activity entries (`?limit=`, capped)."""
    default = studyhub_setting("ACTIVITY_FEED_DEFAULT")
    cap = studyhub_setting("ACTIVITY_FEED_MAX")
    try:
        limit = int(request.query_params.get("limit", default))
    except (TypeError, ValueError):
        limit = default
    limit = max(1, min(limit, cap))
    data = UserActivitySerializer(recent_activities(request.user, limit), many=True).data
    return Response({"count": len(data), "results": data})


@api_view(["GET"])
@permission_classes([IsAuthenticated])
def analytics(request):
    return Response(AnalyticsSerializer(user_analytics(request.user)).data)


@api_view(["POST"])
@permission_classes([IsAuthenticated])
def ai_flashcards(request):
    serializer = FlashcardRequestSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    data = serializer.validated_data
    cards = studyaids.generate_flashcards(request.user, data["content"], data["count"], data.get("source_content"))
    return Response({"flashcards": cards})


@api_view(["POST"])
@permission_classes([IsAuthenticated])
def ai_quiz(request):
    serializer = QuizRequestSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    data = serializer.validated_data
    assessment = studyaids.generate_quiz(request.user, data["content"], data["question_count"], data.get("source_content"))
    return Response(AssessmentSerializer(assessment).data, status=status.HTTP_201_CREATED)


@api_view(["POST"])
@permission_classes([IsAuthenticated])
def ai_summarize(request):
    serializer = StudyAidRequestSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    data = serializer.validated_data
    return Response(studyaids.summarise_text(request.user, data["content"], data.get("source_content")))


@api_view(["POST"])
@permission_classes([IsAuthenticated])
def ai_mindmap(request):
    serializer = StudyAidRequestSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    data = serializer.validated_data
    return Response(studyaids.generate_mind_map(request.user, data["content"], data.get("source_content")))


class AIContentViewSet(mixins.ListModelMixin, mixins.RetrieveModelMixin, viewsets.GenericViewSet):
    serializer_class = AIGeneratedContentSerializer
    filterset_fields = ["type"]

    def get_queryset(self):
        return AIGeneratedContent.objects.filter(user=self.request.user).order_by("-created_at", "-id")


class LearningPathViewSet(mixins.ListModelMixin, mixins.RetrieveModelMixin, viewsets.GenericViewSet):
    serializer_class = LearningPathSerializer

    def get_queryset(self):
        return LearningPath.objects.filter(user=self.request.user).order_by("-created_at", "-id")

    def create(self, request):
        serializer = LearningPathRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        path = studyaids.create_learning_path(request.user, data["goals"], data["target_date"], data["current_level"])
        return Response(LearningPathSerializer(path).data, status=status.HTTP_201_CREATED)
