"""Re-export individual schema modules for easy imports."""

from .auth import Credentials, SessionOut
from .dashboard import DashboardOut, StatCard
from .exercise import ExerciseOut
from .meal import MealOut
from .profile import ProfileOut

__all__ = [
    "Credentials",
    "SessionOut",
    "DashboardOut",
    "StatCard",
    "ExerciseOut",
    "MealOut",
    "ProfileOut",
]
