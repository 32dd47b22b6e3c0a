"""Dashboard URL configuration."""

from __future__ import annotations

from django.urls import path

from modules.dashboard.views import DashboardSummaryView

urlpatterns = [
    path("dashboard/summary/", DashboardSummaryView.as_view(), name="dashboard-summary"),
]
