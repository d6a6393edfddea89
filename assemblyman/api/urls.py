"""
Assemblyman API URLs.

Include this in your project's urlpatterns:

    path('api/assemblyman/', include('assemblyman.api.urls')),
"""

from rest_framework.routers import DefaultRouter

from .views import (
    MaterialViewSet,
    ProductionViewSet,
    RecipeViewSet,
    ReorderViewSet,
    ReportViewSet,
)

router = DefaultRouter()
router.register("materials", MaterialViewSet)
router.register("production", ProductionViewSet)
router.register("recipes", RecipeViewSet, basename="recipe")
router.register("reorder", ReorderViewSet, basename="reorder")
router.register("reports", ReportViewSet, basename="report")

urlpatterns = router.urls
