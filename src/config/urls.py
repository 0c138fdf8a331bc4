from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

from django.urls import include, path

urlpatterns = [
    path("", include("modules.core.urls")),
    # Catalog API, kept under /api so it never collides with page routes
    path("api/", include("modules.products.urls")),
    # OpenAPI schema & docs (public)
    path("api/schema", SpectacularAPIView.as_view(), name="schema"),
    path(
        "api/docs",
        SpectacularSwaggerView.as_view(url_name="schema"),
        name="swagger-ui",
    ),
]
