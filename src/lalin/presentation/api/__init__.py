"""
API package.
"""
from .routes import dashboard, reports

routers = [dashboard.router, reports.router]
