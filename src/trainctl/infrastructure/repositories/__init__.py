"""Storage collaborators for trainings."""

from trainctl.infrastructure.repositories.interfaces import TrainingRepository
from trainctl.infrastructure.repositories.memory import InMemoryTrainingRepository
from trainctl.infrastructure.repositories.sql import SqlTrainingRepository

__all__ = [
    "InMemoryTrainingRepository",
    "SqlTrainingRepository",
    "TrainingRepository",
]
