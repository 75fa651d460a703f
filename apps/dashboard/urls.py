"""URL routing for dashboard endpoints."""

from django.urls import path  # type: ignore

from .views import CondoAvailabilityView, FrontDeskDashboardView, OwnerDashboardView, OwnerStatsView

app_name = "dashboard"

urlpatterns = [
    # Do not prefix with 'dashboard/' here; the namespace is defined in config.urls
    path("owner/", OwnerDashboardView.as_view(), name="owner"),
    path("owner/stats/", OwnerStatsView.as_view(), name="owner-stats"),
    path("frontdesk/", FrontDeskDashboardView.as_view(), name="frontdesk"),
    path("availability/<int:condo_id>/", CondoAvailabilityView.as_view(), name="availability"),
]
