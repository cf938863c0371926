"""Serving module for creditrisk_api."""

from .app import app
from .errors import FeatureCountMismatch, InvalidTrainingRequest, ModelNotReady
from .loader import ModelLoadError, ModelSaveError, load_model, resolve_model_path, save_model
from .predict import PredictionResult, predict
from .schemas import (
    ConfigureRequest,
    ErrorResponse,
    HealthResponse,
    ModelFileRequest,
    ModelInfoResponse,
    PredictRequest,
    PredictResponse,
    ReadyResponse,
    StatusResponse,
    TrainRequest,
    TrainResponse,
)
from .state import ModelStore
from .training import TrainingResult, configure, train
from .validation import validate_prediction_request, validate_training_request

__all__ = [
    'app',
    'FeatureCountMismatch',
    'InvalidTrainingRequest',
    'ModelNotReady',
    'ModelLoadError',
    'ModelSaveError',
    'load_model',
    'resolve_model_path',
    'save_model',
    'PredictionResult',
    'predict',
    'ConfigureRequest',
    'ErrorResponse',
    'HealthResponse',
    'ModelFileRequest',
    'ModelInfoResponse',
    'PredictRequest',
    'PredictResponse',
    'ReadyResponse',
    'StatusResponse',
    'TrainRequest',
    'TrainResponse',
    'ModelStore',
    'TrainingResult',
    'configure',
    'train',
    'validate_prediction_request',
    'validate_training_request',
]
