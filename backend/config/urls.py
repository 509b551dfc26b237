"""
URL configuration for the ledgerpoll project.
"""

from django.conf import settings
from django.conf.urls.static import static
from django.contrib import admin
from django.urls import include, path
from drf_spectacular.views import (
    SpectacularAPIView,
    SpectacularRedocView,
    SpectacularSwaggerView,
)
from rest_framework.decorators import api_view, permission_classes, renderer_classes
from rest_framework.permissions import AllowAny
from rest_framework.renderers import JSONRenderer
from rest_framework.response import Response


@api_view(["GET"])
@permission_classes([AllowAny])
@renderer_classes([JSONRenderer])  # Only use JSONRenderer to avoid BrowsableAPIRenderer template issues
def api_root(request):
    """API root endpoint that lists available endpoints."""
    data = {
        "message": "Welcome to the ledgerpoll API",
        "version": "1.0.0",
        "program_id": settings.LEDGER_PROGRAM_ID,
        "documentation": {
            "swagger_ui": "/api/docs/",
            "redoc": "/api/redoc/",
            "schema": "/api/schema/",
        },
        "endpoints": {
            "polls": "/api/v1/polls/",
            "votes": "/api/v1/votes/",
        },
        "info": "For detailed API documentation, visit /api/docs/ or /api/redoc/",
    }

    return Response(data)


urlpatterns = [
    path("admin/", admin.site.urls),
    # API Root - accessible without authentication
    path("api/v1/", api_root, name="api-root"),
    path("api/v1/", include("apps.polls.urls")),
    path("api/v1/", include("apps.votes.urls")),
    # API Documentation
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
    path("api/docs/", SpectacularSwaggerView.as_view(url_name="schema"), name="swagger-ui"),
    path("api/redoc/", SpectacularRedocView.as_view(url_name="schema"), name="redoc"),
]

# Serve static files in development
if settings.DEBUG:
    urlpatterns += static(settings.STATIC_URL, document_root=settings.STATIC_ROOT)

    if "debug_toolbar" in settings.INSTALLED_APPS:
        urlpatterns += [path("__debug__/", include("debug_toolbar.urls"))]
