"""
API routes package.
"""
from . import dashboard, reports
