"""API routes for Studyhub.

Versioned REST endpoints under /api/v1/ plus the OpenAPI schema and
interactive documentation.
"""
from django.urls import path, include
from rest_framework.routers import DefaultRouter
from drf_spectacular.views import (
    SpectacularAPIView,
    SpectacularSwaggerView,
    SpectacularRedocView,
)


from .views import (
    AIContentViewSet,
    AssessmentViewSet,
    AttemptViewSet,
    ContentViewSet,
    CourseViewSet,
    InstitutionViewSet,
    LearningPathViewSet,
    ProfileView,
    ProgrammeViewSet,
    StudySessionViewSet,
    activities,
    ai_flashcards,
    ai_mindmap,
    ai_quiz,
    ai_summarize,
    analytics,
)

router = DefaultRouter()
router.register(r"api/v1/institutions", InstitutionViewSet, basename="institutions")
router.register(r"api/v1/programmes", ProgrammeViewSet, basename="programmes")
router.register(r"api/v1/courses", CourseViewSet, basename="courses")
router.register(r"api/v1/content", ContentViewSet, basename="content")
router.register(r"api/v1/assessments", AssessmentViewSet, basename="assessments")
router.register(r"api/v1/attempts", AttemptViewSet, basename="attempts")
router.register(r"api/v1/study-sessions", StudySessionViewSet, basename="study-sessions")
router.register(r"api/v1/ai/content", AIContentViewSet, basename="ai-content")
router.register(r"api/v1/learning-paths", LearningPathViewSet, basename="learning-paths")

urlpatterns = [
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
    path("docs/", SpectacularSwaggerView.as_view(url_name="schema"), name="swagger-ui"),
    path("redoc/", SpectacularRedocView.as_view(url_name="schema"), name="redoc"),
    path("api/v1/profile/", ProfileView.as_view(), name="profile"),
    path("api/v1/activities/", activities, name="activities"),
    path("api/v1/analytics/", analytics, name="analytics"),
    path("api/v1/ai/flashcards/", ai_flashcards, name="ai-flashcards"),
    path("api/v1/ai/quiz/", ai_quiz, name="ai-quiz"),
    path("api/v1/ai/summarize/", ai_summarize, name="ai-summarize"),
    path("api/v1/ai/mindmap/", ai_mindmap, name="ai-mindmap"),
    path("", include(router.urls)),
]
