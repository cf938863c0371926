from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

from creditrisk_api.cli.main import app

SEPARABLE_CSV = """x1,x2,target
0.0,0.0,0
0.0,0.5,0
0.5,0.0,0
0.5,0.5,0
0.0,1.0,0
1.0,0.0,0
1.0,1.0,1
0.5,1.0,1
1.0,0.5,1
"""


def _train(runner: CliRunner, tmp_path: Path) -> Path:
    input_csv = tmp_path / 'train.csv'
    input_csv.write_text(SEPARABLE_CSV, encoding='utf-8')
    output = tmp_path / 'model.json'

    result = runner.invoke(
        app,
        [
            'train',
            '--input',
            str(input_csv),
            '--output',
            str(output),
            '--learning-rate',
            '0.1',
            '--epochs',
            '1000',
        ],
    )
    assert result.exit_code == 0, result.output
    assert 'train accuracy 100.00%' in result.output
    return output


def test_cli_train_writes_snapshot(tmp_path: Path) -> None:
    output = _train(CliRunner(), tmp_path)

    data = json.loads(output.read_text(encoding='utf-8'))
    assert len(data['weights']) == 2
    assert data['learning_rate'] == 0.1
    assert data['initialized'] is True


def test_cli_predict_uses_snapshot(tmp_path: Path) -> None:
    runner = CliRunner()
    output = _train(runner, tmp_path)

    result = runner.invoke(app, ['predict', '--model', str(output), '--features', '1.0,1.0'])

    assert result.exit_code == 0, result.output
    assert 'predicted=1' in result.output


def test_cli_predict_rejects_wrong_length(tmp_path: Path) -> None:
    runner = CliRunner()
    output = _train(runner, tmp_path)

    result = runner.invoke(app, ['predict', '--model', str(output), '--features', '1.0'])

    assert result.exit_code != 0


def test_cli_predict_refuses_untrained_snapshot(tmp_path: Path) -> None:
    snapshot = tmp_path / 'fresh.json'
    snapshot.write_text(json.dumps({'weights': [0.0], 'learning_rate': 0.1}), encoding='utf-8')

    result = CliRunner().invoke(app, ['predict', '--model', str(snapshot), '--features', '1.0'])

    assert result.exit_code == 1


def test_cli_inspect_prints_fields(tmp_path: Path) -> None:
    snapshot = tmp_path / 'model.json'
    snapshot.write_text(
        json.dumps({'weights': [0.5, -0.3], 'bias': 0.2, 'learning_rate': 0.01}),
        encoding='utf-8',
    )

    result = CliRunner().invoke(app, ['inspect', '--model', str(snapshot)])

    assert result.exit_code == 0, result.output
    assert 'weights: [0.5, -0.3]' in result.output
    assert 'bias: 0.2' in result.output
    assert 'initialized: False' in result.output


def test_cli_inspect_reports_corrupt_snapshot(tmp_path: Path) -> None:
    snapshot = tmp_path / 'broken.json'
    snapshot.write_text('{', encoding='utf-8')

    result = CliRunner().invoke(app, ['inspect', '--model', str(snapshot)])

    assert result.exit_code == 1
