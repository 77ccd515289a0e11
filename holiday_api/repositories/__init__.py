"""
Repositories package - handles all database operations
"""

from holiday_api.repositories.holiday_repository import HolidayRepository

__all__ = [
    'HolidayRepository',
]
