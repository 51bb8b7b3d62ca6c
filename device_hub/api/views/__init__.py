# HTML views
from .dashboard import router as dashboard_router, render_dashboard

__all__ = ["dashboard_router", "render_dashboard"]
