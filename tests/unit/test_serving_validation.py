"""Unit tests for serving request validation."""

from __future__ import annotations

import pytest

from creditrisk_api.config import TrainingConfig
from creditrisk_api.models import FeatureCountMismatch, LogisticRegression
from creditrisk_api.serving.errors import InvalidTrainingRequest, ModelNotReady
from creditrisk_api.serving.validation import (
    validate_prediction_request,
    validate_training_request,
)


@pytest.fixture
def model() -> LogisticRegression:
    return LogisticRegression(2, 0.1)


class TestPredictionValidation:
    """Tests for validate_prediction_request."""

    def test_untrained_model_is_not_ready(self, model: LogisticRegression) -> None:
        with pytest.raises(ModelNotReady, match='not been trained or loaded'):
            validate_prediction_request(model, [1.0, 2.0])

    def test_length_mismatch_reports_both_lengths(self, model: LogisticRegression) -> None:
        model.initialized = True

        with pytest.raises(FeatureCountMismatch) as exc_info:
            validate_prediction_request(model, [1.0, 2.0, 3.0])

        assert exc_info.value.expected == 2
        assert exc_info.value.received == 3
        assert 'expected 2, received 3' in str(exc_info.value)

    def test_readiness_is_checked_before_length(self, model: LogisticRegression) -> None:
        with pytest.raises(ModelNotReady):
            validate_prediction_request(model, [1.0])

    def test_valid_request_passes(self, model: LogisticRegression) -> None:
        model.initialized = True
        validate_prediction_request(model, [1.0, 2.0])


class TestTrainingValidation:
    """Tests for validate_training_request."""

    @pytest.mark.parametrize(
        ('features', 'targets'),
        [([], []), ([], [1.0]), ([[1.0, 2.0]], [])],
    )
    def test_empty_sets_rejected(self, model, features, targets) -> None:
        with pytest.raises(InvalidTrainingRequest, match='empty training set'):
            validate_training_request(model, features, targets, 10)

    def test_count_mismatch_rejected(self, model: LogisticRegression) -> None:
        with pytest.raises(InvalidTrainingRequest, match='2 feature vectors vs 1 targets'):
            validate_training_request(model, [[1.0, 2.0], [3.0, 4.0]], [1.0], 10)

    def test_sample_length_mismatch_reports_index(self, model: LogisticRegression) -> None:
        with pytest.raises(InvalidTrainingRequest, match='sample 1 has 3 features, expected 2'):
            validate_training_request(model, [[1.0, 2.0], [1.0, 2.0, 3.0]], [0.0, 1.0], 10)

    def test_non_binary_target_rejected(self, model: LogisticRegression) -> None:
        with pytest.raises(InvalidTrainingRequest, match='target 1 is 0.5'):
            validate_training_request(model, [[1.0, 2.0], [3.0, 4.0]], [1.0, 0.5], 10)

    def test_negative_epochs_rejected(self, model: LogisticRegression) -> None:
        with pytest.raises(InvalidTrainingRequest, match='non-negative'):
            validate_training_request(model, [[1.0, 2.0]], [1.0], -1)

    def test_limits_enforced(self, model: LogisticRegression) -> None:
        limits = TrainingConfig(max_samples=1, max_epochs=5)

        with pytest.raises(InvalidTrainingRequest, match='exceeds maximum of 1'):
            validate_training_request(model, [[1.0, 2.0], [3.0, 4.0]], [1.0, 0.0], 1, limits)

        with pytest.raises(InvalidTrainingRequest, match='6 epochs exceeds maximum of 5'):
            validate_training_request(model, [[1.0, 2.0]], [1.0], 6, limits)

    def test_zero_epochs_allowed(self, model: LogisticRegression) -> None:
        validate_training_request(model, [[1.0, 2.0]], [1.0], 0, TrainingConfig())

    def test_error_carries_reason(self, model: LogisticRegression) -> None:
        with pytest.raises(InvalidTrainingRequest) as exc_info:
            validate_training_request(model, [], [], 1)

        assert exc_info.value.reason == 'empty training set'
        assert isinstance(exc_info.value, ValueError)
