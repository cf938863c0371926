"""Pydantic request/response schemas for the serving API."""

from __future__ import annotations

from pydantic import BaseModel, Field


class PredictRequest(BaseModel):
    """Request schema for a single prediction."""

    features: list[float] = Field(
        ...,
        description='Feature vector; its length must match the model weight count.',
        examples=[[0.5, 1.2, -0.3]],
    )
    learning_rate: float | None = Field(
        default=None,
        gt=0.0,
        description='Learning rate for a fresh model; only used with reconfigure=true.',
    )
    reconfigure: bool = Field(
        default=False,
        description='Replace the model with a fresh zero-weight one before predicting.',
    )


class PredictResponse(BaseModel):
    """Response schema for a prediction."""

    predicted: int = Field(..., ge=0, le=1, description='Predicted class: 0 or 1.')
    confidence: float = Field(
        ...,
        ge=0.0,
        le=1.0,
        description='Probability of class 1.',
    )


class ConfigureRequest(BaseModel):
    """Request schema for replacing the model with a fresh one."""

    num_features: int = Field(..., ge=0, description='Number of features (weights).')
    learning_rate: float = Field(..., gt=0.0, description='Gradient step size.')


class TrainRequest(BaseModel):
    """Request schema for training the current model."""

    features: list[list[float]] = Field(
        ...,
        description='Training feature vectors.',
        examples=[[[0.0, 0.0, 1.0], [1.0, 1.0, 0.0]]],
    )
    targets: list[float] = Field(
        ...,
        description='Labels, 0 or 1, one per feature vector.',
        examples=[[0.0, 1.0]],
    )
    epochs: int = Field(..., ge=0, description='Number of passes over the data.')


class TrainResponse(BaseModel):
    """Response schema for a completed training run."""

    status: str = Field(default='trained')
    samples: int = Field(..., description='Number of samples trained on.')
    epochs: int = Field(..., description='Number of epochs run.')


class ModelFileRequest(BaseModel):
    """Request schema for saving or loading a model snapshot."""

    filepath: str = Field(..., min_length=1, description='Snapshot file path.')


class StatusResponse(BaseModel):
    """Generic acknowledgement."""

    status: str = Field(..., description='Outcome of the operation.')


class HealthResponse(BaseModel):
    """Response schema for health check endpoint."""

    status: str = Field(default='ok', description='Service health status.')
    version: str = Field(..., description='Package version.')
    timestamp: str = Field(..., description='Current UTC time, ISO-8601.')


class ReadyResponse(BaseModel):
    """Response schema for readiness check endpoint."""

    status: str = Field(..., description='Readiness status.')
    model_initialized: bool = Field(..., description='Whether the model was trained or loaded.')


class ModelInfoResponse(BaseModel):
    """Response schema for model information endpoint."""

    num_features: int = Field(..., description='Number of weights.')
    learning_rate: float = Field(..., description='Gradient step size.')
    bias: float = Field(..., description='Bias term.')
    weights: list[float] = Field(..., description='Weight vector in feature order.')
    initialized: bool = Field(..., description='Whether the model was trained or loaded.')


class ErrorResponse(BaseModel):
    """Response schema for error responses."""

    detail: str = Field(..., description='Error message.')
