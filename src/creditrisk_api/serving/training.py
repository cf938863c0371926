"""Training and reconfiguration of the served classifier."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from ..config import TrainingConfig
from ..models import LogisticRegression
from ..utils import get_logger, json_log
from .state import ModelStore
from .validation import validate_training_request

log = get_logger(__name__)


@dataclass(frozen=True)
class TrainingResult:
    """Summary of a completed training call."""

    samples: int
    epochs: int
    weights: tuple[float, ...]
    bias: float


def train(
    store: ModelStore,
    features: Sequence[Sequence[float]],
    targets: Sequence[float],
    epochs: int,
    limits: TrainingConfig | None = None,
) -> TrainingResult:
    """
    Validate and run a training request against the stored model.

    The lock is held for the entire run, so other requests wait until the
    last epoch finishes.

    Raises:
        InvalidTrainingRequest: If the request fails validation. The model
            is left untouched.
    """
    with store.access():
        model = store.model
        validate_training_request(model, features, targets, epochs, limits)
        model.train(features, targets, epochs)
        result = TrainingResult(
            samples=len(features),
            epochs=epochs,
            weights=tuple(model.weights.tolist()),
            bias=model.bias,
        )

    log.info(
        json_log(
            'model.trained',
            component='serving.training',
            samples=result.samples,
            epochs=result.epochs,
            bias=result.bias,
        )
    )
    return result


def configure(store: ModelStore, num_features: int, learning_rate: float) -> LogisticRegression:
    """Replace the stored model with a fresh, untrained one."""
    model = LogisticRegression(num_features, learning_rate)
    with store.access():
        store.model = model

    log.info(
        json_log(
            'model.configured',
            component='serving.training',
            num_features=num_features,
            learning_rate=learning_rate,
        )
    )
    return model
