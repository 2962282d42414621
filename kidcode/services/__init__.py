# This package contains business logic services.

from . import achievement_service
from . import seed_service
from . import submission_service

__all__ = [
    "achievement_service",
    "seed_service",
    "submission_service",
]
