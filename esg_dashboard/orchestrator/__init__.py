from .audit_session import AuditSession
from .dashboard_loader import DashboardLoader

__all__ = ["AuditSession", "DashboardLoader"]
