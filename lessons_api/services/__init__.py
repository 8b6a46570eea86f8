"""
Use cases for the lessons API.

Each service orchestrates a Repository to implement the business rules
(search, order submission, lesson updates, registration/login). Routers call
these services instead of touching the storage backend directly.
"""

from .auth_service import AuthService
from .lesson_service import LessonService
from .order_service import OrderService
from .status_service import StatusService

__all__ = ["AuthService", "LessonService", "OrderService", "StatusService"]
