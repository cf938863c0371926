"""FastAPI application serving the logistic regression classifier."""

from __future__ import annotations

import os
import time
from contextlib import asynccontextmanager
from datetime import UTC, datetime
from pathlib import Path

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from .. import __version__
from ..config import ServingConfig, load_serving_config
from ..models import LogisticRegression
from ..utils import get_logger, json_log
from .errors import CLIENT_ERRORS
from .loader import ModelLoadError, load_model, resolve_model_path, save_model
from .predict import predict as predict_features
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
from .training import configure, train

CONFIG_ENV_VAR = 'CREDITRISK_SERVING_CONFIG'

# Global state
_store: ModelStore | None = None
_config: ServingConfig | None = None

log = get_logger(__name__)


def _get_config_path() -> Path | None:
    """Get the config path from the environment, if set."""
    config_path = os.getenv(CONFIG_ENV_VAR)
    return Path(config_path) if config_path else None


def _build_store(config: ServingConfig) -> ModelStore:
    if config.model.path is not None:
        model = load_model(config.model.path)
    else:
        model = LogisticRegression(config.model.num_features, config.model.learning_rate)
    return ModelStore(model)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the shared model on startup."""
    global _store, _config

    config_path = _get_config_path()
    log.info(
        json_log(
            'serving.startup',
            component='serving.app',
            config_path=str(config_path) if config_path else None,
        )
    )

    try:
        _config = load_serving_config(config_path) if config_path else ServingConfig()
        _store = _build_store(_config)
    except (FileNotFoundError, ValueError, ModelLoadError) as exc:
        log.error(
            json_log(
                'serving.startup_error',
                component='serving.app',
                error=str(exc),
            )
        )
        raise

    log.info(
        json_log(
            'serving.ready',
            component='serving.app',
            num_features=_store.model.num_features,
            learning_rate=_store.model.learning_rate,
            initialized=_store.model.initialized,
        )
    )

    yield

    log.info(json_log('serving.shutdown', component='serving.app'))
    _store = None
    _config = None


app = FastAPI(
    title='Credit Risk API',
    description='Binary logistic regression classifier: configure, train, predict, save and load.',
    version=__version__,
    lifespan=lifespan,
)


async def _client_error_handler(request: Request, exc: Exception) -> JSONResponse:
    log.info(
        json_log(
            'serving.rejected',
            component='serving.app',
            endpoint=request.url.path,
            error_type=type(exc).__name__,
            error=str(exc),
        )
    )
    return JSONResponse(status_code=400, content={'detail': str(exc)})


for _error_type in CLIENT_ERRORS:
    app.add_exception_handler(_error_type, _client_error_handler)


def _require_state() -> tuple[ModelStore, ServingConfig]:
    if _store is None or _config is None:
        raise HTTPException(status_code=503, detail='Model not loaded')
    return _store, _config


def _log_request(endpoint: str, latency_ms: float, **extra: object) -> None:
    """Log request if request logging is enabled."""
    if _config and _config.logging.mode == 'requests':
        log.info(
            json_log(
                'serving.request',
                component='serving.app',
                endpoint=endpoint,
                latency_ms=round(latency_ms, 2),
                **extra,
            )
        )


@app.get('/health', response_model=HealthResponse, tags=['Health'])
def health() -> HealthResponse:
    """Liveness check endpoint."""
    return HealthResponse(
        status='ok',
        version=__version__,
        timestamp=datetime.now(UTC).isoformat(),
    )


@app.get('/ready', response_model=ReadyResponse, tags=['Health'])
def ready() -> ReadyResponse:
    """Readiness check: ready once the model is trained or loaded."""
    if _store is None:
        return ReadyResponse(status='not_ready', model_initialized=False)
    with _store.access():
        initialized = _store.model.initialized
    return ReadyResponse(
        status='ready' if initialized else 'not_ready',
        model_initialized=initialized,
    )


@app.get('/model/info', response_model=ModelInfoResponse, tags=['Model'])
def model_info() -> ModelInfoResponse:
    """Get the current model parameters."""
    store, _ = _require_state()
    with store.access():
        model = store.model
        return ModelInfoResponse(
            num_features=model.num_features,
            learning_rate=model.learning_rate,
            bias=model.bias,
            weights=model.weights.tolist(),
            initialized=model.initialized,
        )


@app.post(
    '/predict',
    response_model=PredictResponse,
    responses={400: {'model': ErrorResponse}, 503: {'model': ErrorResponse}},
    tags=['Prediction'],
)
def predict(request: PredictRequest) -> PredictResponse:
    """Predict the class of one feature vector."""
    store, _ = _require_state()
    start_time = time.perf_counter()

    result = predict_features(
        store,
        request.features,
        learning_rate=request.learning_rate,
        reconfigure=request.reconfigure,
    )

    latency_ms = (time.perf_counter() - start_time) * 1000
    _log_request(
        '/predict',
        latency_ms,
        input_length=len(request.features),
        prediction=result.predicted,
        reconfigured=result.reconfigured,
    )

    return PredictResponse(predicted=result.predicted, confidence=result.confidence)


@app.post(
    '/configure',
    response_model=StatusResponse,
    responses={503: {'model': ErrorResponse}},
    tags=['Model'],
)
def configure_model(request: ConfigureRequest) -> StatusResponse:
    """Replace the model with a fresh, untrained one."""
    store, _ = _require_state()
    configure(store, request.num_features, request.learning_rate)
    return StatusResponse(status='configured')


@app.post(
    '/train',
    response_model=TrainResponse,
    responses={400: {'model': ErrorResponse}, 503: {'model': ErrorResponse}},
    tags=['Model'],
)
def train_model(request: TrainRequest) -> TrainResponse:
    """Train the current model on the supplied samples."""
    store, config = _require_state()
    start_time = time.perf_counter()

    result = train(
        store,
        request.features,
        request.targets,
        request.epochs,
        limits=config.training,
    )

    latency_ms = (time.perf_counter() - start_time) * 1000
    _log_request('/train', latency_ms, samples=result.samples, epochs=result.epochs)

    return TrainResponse(samples=result.samples, epochs=result.epochs)


@app.post(
    '/save-model',
    response_model=StatusResponse,
    responses={400: {'model': ErrorResponse}, 503: {'model': ErrorResponse}},
    tags=['Persistence'],
)
def save_model_endpoint(request: ModelFileRequest) -> StatusResponse:
    """Write the current model to a JSON snapshot."""
    store, config = _require_state()
    path = resolve_model_path(request.filepath, config.persistence.directory)
    with store.access():
        save_model(store.model, path)
    return StatusResponse(status='saved')


@app.post(
    '/load-model',
    response_model=StatusResponse,
    responses={400: {'model': ErrorResponse}, 503: {'model': ErrorResponse}},
    tags=['Persistence'],
)
def load_model_endpoint(request: ModelFileRequest) -> StatusResponse:
    """Replace the current model with a snapshot; a failed load changes nothing."""
    store, config = _require_state()
    path = resolve_model_path(request.filepath, config.persistence.directory)
    model = load_model(path)
    with store.access():
        store.model = model
    return StatusResponse(status='loaded')
