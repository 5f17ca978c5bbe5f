"""
Application module initialization.
"""
from .use_cases import ReportUseCase, DashboardUseCase
