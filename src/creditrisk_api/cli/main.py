"""Command-line interface for creditrisk_api."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from ..io import parse_feature_vector, read_training_csv
from ..models import LogisticRegression
from ..serving.loader import ModelLoadError, load_model, save_model
from ..utils import get_logger, json_log

app = typer.Typer(help='Credit Risk logistic regression CLI', no_args_is_help=True)

log = get_logger(__name__)


def _load_snapshot(model_path: Path) -> LogisticRegression:
    try:
        return load_model(model_path, mark_initialized=False)
    except ModelLoadError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc


@app.command('train')
def train_model(
    input_csv: Annotated[
        Path,
        typer.Option(
            '--input',
            '-i',
            exists=True,
            readable=True,
            help='CSV with feature columns and a 0/1 target column.',
        ),
    ],
    output: Annotated[
        Path,
        typer.Option('--output', '-o', help='Destination JSON snapshot.'),
    ],
    target_column: Annotated[
        str,
        typer.Option('--target-column', help='Name of the label column (default: target).'),
    ] = 'target',
    learning_rate: Annotated[
        float,
        typer.Option('--learning-rate', min=0.0, help='Gradient step size (default: 0.01).'),
    ] = 0.01,
    epochs: Annotated[
        int,
        typer.Option('--epochs', min=0, help='Passes over the data (default: 1000).'),
    ] = 1000,
) -> None:
    """Train a fresh model on a CSV and save its snapshot."""
    log.info(
        json_log(
            'cli.train.start',
            component='cli',
            input=str(input_csv),
            output=str(output),
            learning_rate=learning_rate,
            epochs=epochs,
        )
    )
    if learning_rate <= 0:
        raise typer.BadParameter('learning rate must be > 0', param_hint='--learning-rate')

    try:
        data = read_training_csv(input_csv, target_column=target_column)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint='--input') from exc

    invalid = [i for i, y in enumerate(data.targets) if y not in (0.0, 1.0)]
    if invalid:
        raise typer.BadParameter(
            f'target column must hold 0 or 1; first offending row is {invalid[0]}',
            param_hint='--input',
        )

    model = LogisticRegression(len(data.feature_columns), learning_rate)
    model.train(data.features, data.targets, epochs)
    save_model(model, output)

    correct = sum(
        model.predict(x) == int(y) for x, y in zip(data.features, data.targets)
    )
    accuracy = correct / len(data.targets)

    log.info(
        json_log(
            'cli.train.completed',
            component='cli',
            output=str(output),
            samples=len(data.targets),
            train_accuracy=round(accuracy, 4),
        )
    )
    typer.echo(f'Model trained on {len(data.targets)} samples (train accuracy {accuracy:.2%}).')
    typer.echo(f'Snapshot written to: {output}')


@app.command('predict')
def predict(
    model_path: Annotated[
        Path,
        typer.Option('--model', '-m', exists=True, readable=True, help='JSON snapshot.'),
    ],
    features: Annotated[
        str,
        typer.Option('--features', '-f', help='Comma-separated feature vector, e.g. "0.5,1.0".'),
    ],
) -> None:
    """Predict the class of one feature vector with a saved snapshot."""
    model = _load_snapshot(model_path)
    if not model.initialized:
        typer.echo('Model snapshot is not trained; refusing to predict.', err=True)
        raise typer.Exit(code=1)

    try:
        vector = parse_feature_vector(features)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint='--features') from exc

    if len(vector) != model.num_features:
        raise typer.BadParameter(
            f'expected {model.num_features} features, received {len(vector)}',
            param_hint='--features',
        )

    probability = model.predict_raw(vector)
    typer.echo(f'predicted={model.predict(vector)} confidence={probability:.6f}')


@app.command('inspect')
def inspect(
    model_path: Annotated[
        Path,
        typer.Option('--model', '-m', exists=True, readable=True, help='JSON snapshot.'),
    ],
) -> None:
    """Print the fields of a saved snapshot."""
    model = _load_snapshot(model_path)
    typer.echo(f'num_features: {model.num_features}')
    typer.echo(f'learning_rate: {model.learning_rate}')
    typer.echo(f'bias: {model.bias}')
    typer.echo(f'weights: {model.weights.tolist()}')
    typer.echo(f'initialized: {model.initialized}')


if __name__ == '__main__':
    app()
