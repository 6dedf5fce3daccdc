"""Dashboard use cases"""
from .get_dashboard_stats import GetDashboardStats
from .dtos import DashboardStatsResponseDTO

__all__ = [
    "GetDashboardStats",
    "DashboardStatsResponseDTO",
]
