"""Input/output helpers."""

from .files import TrainingData, parse_feature_vector, read_training_csv

__all__ = ['TrainingData', 'parse_feature_vector', 'read_training_csv']
