"""Request checks performed before the classifier is touched."""

from __future__ import annotations

from collections.abc import Sequence

from ..config import TrainingConfig
from ..models import FeatureCountMismatch, LogisticRegression
from .errors import InvalidTrainingRequest, ModelNotReady

_VALID_TARGETS = (0.0, 1.0)


def validate_prediction_request(model: LogisticRegression, features: Sequence[float]) -> None:
    """
    Ensure the model may serve a prediction for ``features``.

    Raises:
        ModelNotReady: If the model was never trained or restored.
        FeatureCountMismatch: If the vector length differs from the weight count.
    """
    if not model.initialized:
        raise ModelNotReady(
            'the model has not been trained or loaded; call /train or /load-model first'
        )
    if len(features) != model.num_features:
        raise FeatureCountMismatch(model.num_features, len(features))


def validate_training_request(
    model: LogisticRegression,
    features: Sequence[Sequence[float]],
    targets: Sequence[float],
    epochs: int,
    limits: TrainingConfig | None = None,
) -> None:
    """
    Ensure a training request is well formed for ``model``.

    Raises:
        InvalidTrainingRequest: On empty sets, count mismatch, a sample of the
            wrong length (reported with its index), a target outside {0, 1},
            or a request exceeding the configured limits.
    """
    if not features or not targets:
        raise InvalidTrainingRequest('empty training set')

    if len(features) != len(targets):
        raise InvalidTrainingRequest(
            f'sample count mismatch: {len(features)} feature vectors vs {len(targets)} targets'
        )

    expected = model.num_features
    for i, sample in enumerate(features):
        if len(sample) != expected:
            raise InvalidTrainingRequest(
                f'sample {i} has {len(sample)} features, expected {expected}'
            )

    for i, target in enumerate(targets):
        if target not in _VALID_TARGETS:
            raise InvalidTrainingRequest(f'target {i} is {target}, expected 0 or 1')

    if epochs < 0:
        raise InvalidTrainingRequest(f'epochs must be non-negative, got {epochs}')

    if limits is not None:
        if len(features) > limits.max_samples:
            raise InvalidTrainingRequest(
                f'{len(features)} samples exceeds maximum of {limits.max_samples}'
            )
        if epochs > limits.max_epochs:
            raise InvalidTrainingRequest(
                f'{epochs} epochs exceeds maximum of {limits.max_epochs}'
            )
