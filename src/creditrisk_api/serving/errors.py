"""Client-input errors surfaced by the serving layer."""

from __future__ import annotations

from ..models import FeatureCountMismatch


class InvalidTrainingRequest(ValueError):
    """Raised when a training, save or load request cannot be honored."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f'Invalid request: {reason}')


class ModelNotReady(RuntimeError):
    """Raised when prediction is attempted before any training or restore."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f'Model not ready: {reason}')


CLIENT_ERRORS = (FeatureCountMismatch, InvalidTrainingRequest, ModelNotReady)

__all__ = [
    'CLIENT_ERRORS',
    'FeatureCountMismatch',
    'InvalidTrainingRequest',
    'ModelNotReady',
]
