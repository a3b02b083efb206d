"""
Test Run Tooling
================

Generator, YAML configuration, structured logging and the CLI.

Usage:
    pytest test_run.py
"""

import json
import logging
import math

import pytest
import yaml

from paracurve_core import (
    Circle,
    Ellipse,
    Helix,
    ExecutionPolicy,
    count_sum_of_radii,
    create_curves,
    describe_curves,
)
from paracurve_core.config import GeneratorConfig, ReductionConfig, RunConfig
from paracurve_core.logging import LogEvent, StructuredLogger, create_logger
from paracurve_cli.cli import build_curve, format_reduction_line, main

import run_curves


# ========== Generator ==========

def test_create_curves_is_reproducible_with_seed():
    first = create_curves(200, seed=11)
    second = create_curves(200, seed=11)
    assert first == second
    assert len(first) == 200


def test_create_curves_mixes_all_variants():
    curves = create_curves(600, seed=5)
    kinds = {type(c) for c in curves}
    assert kinds == {Circle, Ellipse, Helix}


def test_create_curves_respects_ranges():
    config = GeneratorConfig(radius_min=1.0, radius_max=2.0, step_min=3.0, step_max=4.0)
    for curve in create_curves(500, seed=9, config=config):
        if isinstance(curve, Circle):
            assert 1.0 <= curve.radius < 2.0
        elif isinstance(curve, Ellipse):
            assert 1.0 <= curve.radius_x < 2.0
            assert 1.0 <= curve.radius_y < 2.0
        else:
            assert 1.0 <= curve.radius < 2.0
            assert 3.0 <= curve.step < 4.0


def test_create_curves_edge_counts():
    assert create_curves(0) == []
    with pytest.raises(ValueError):
        create_curves(-1)


def test_describe_curves_format():
    lines = list(describe_curves([Circle(1.0), Helix(1.0, 2 * math.pi)], t=0.0))
    assert lines[0] == "point: {1.0, 0.0, 0.0}, derivative: {-0.0, 1.0, 0.0}"
    assert lines[1] == "point: {1.0, 0.0, 0.0}, derivative: {-0.0, 1.0, 1.0}"


# ========== Configuration ==========

def test_run_config_defaults():
    config = RunConfig()
    assert config.curve_count == 1000
    assert config.seed is None
    assert config.evaluation_t == pytest.approx(math.pi / 4)
    assert config.generator == GeneratorConfig()
    assert config.reduction.max_workers is None


@pytest.mark.parametrize("kwargs", [
    {'radius_min': 0.0},
    {'radius_min': 5.0, 'radius_max': 5.0},
    {'step_min': 2.0, 'step_max': 1.0},
])
def test_generator_config_rejects_bad_ranges(kwargs):
    with pytest.raises(ValueError):
        GeneratorConfig(**kwargs)


def test_run_config_validation():
    with pytest.raises(ValueError):
        RunConfig(curve_count=-1)
    with pytest.raises(ValueError):
        RunConfig(evaluation_t=float("inf"))
    with pytest.raises(ValueError):
        ReductionConfig(max_workers=0)


def test_run_config_from_yaml(tmp_path):
    path = tmp_path / "run.yaml"
    path.write_text(
        "curve_count: 50\n"
        "seed: 3\n"
        "evaluation_t: 1.5\n"
        "print_curves: true\n"
        "generator:\n"
        "  radius_min: 1.0\n"
        "  radius_max: 10.0\n"
        "reduction:\n"
        "  max_workers: 2\n"
    )

    config = RunConfig.from_yaml(path)
    assert config.curve_count == 50
    assert config.seed == 3
    assert config.evaluation_t == 1.5
    assert config.print_curves is True
    assert config.generator.radius_max == 10.0
    assert config.generator.step_max == 20.0
    assert config.reduction.max_workers == 2


def test_run_config_from_empty_yaml(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert RunConfig.from_yaml(path) == RunConfig()


def test_run_config_from_yaml_errors(tmp_path):
    with pytest.raises(FileNotFoundError):
        RunConfig.from_yaml(tmp_path / "missing.yaml")

    broken = tmp_path / "broken.yaml"
    broken.write_text("curve_count: [1, 2\n")
    with pytest.raises(ValueError):
        RunConfig.from_yaml(broken)

    unknown = tmp_path / "unknown.yaml"
    unknown.write_text("generator:\n  radius_mid: 3.0\n")
    with pytest.raises(ValueError):
        RunConfig.from_yaml(unknown)


def test_run_config_from_yaml_keeps_boolean_strict(tmp_path):
    """Only real YAML booleans are accepted for print_curves."""
    path = tmp_path / "run.yaml"

    path.write_text("print_curves: false\n")
    assert RunConfig.from_yaml(path).print_curves is False

    for text in ('"false"', '"no"', '0', '1'):
        path.write_text(f"print_curves: {text}\n")
        with pytest.raises(ValueError, match="print_curves"):
            RunConfig.from_yaml(path)


@pytest.mark.parametrize("text,field_name", [
    ("curve_count: null\n", "curve_count"),
    ("curve_count: 2.9\n", "curve_count"),
    ("curve_count: \"10\"\n", "curve_count"),
    ("curve_count: true\n", "curve_count"),
    ("seed: 1.5\n", "seed"),
    ("seed: abc\n", "seed"),
    ("evaluation_t: null\n", "evaluation_t"),
    ("evaluation_t: \"1.0\"\n", "evaluation_t"),
    ("evaluation_t: .inf\n", "evaluation_t"),
    ("generator:\n  radius_max: big\n", "radius_max"),
    ("reduction:\n  max_workers: 2.5\n", "max_workers"),
    ("reduction:\n  max_workers: true\n", "max_workers"),
])
def test_run_config_from_yaml_rejects_wrong_types(tmp_path, text, field_name):
    path = tmp_path / "run.yaml"
    path.write_text(text)
    with pytest.raises(ValueError, match=field_name):
        RunConfig.from_yaml(path)


@pytest.mark.parametrize("text,key", [
    ("curve_cout: 10\n", "curve_cout"),
    ("reduction:\n  workers: 2\n", "workers"),
    ("generator: 5\n", "generator"),
])
def test_run_config_from_yaml_rejects_unknown_keys(tmp_path, text, key):
    path = tmp_path / "run.yaml"
    path.write_text(text)
    with pytest.raises(ValueError, match=key):
        RunConfig.from_yaml(path)


def test_run_config_from_yaml_accepts_integer_t(tmp_path):
    path = tmp_path / "run.yaml"
    path.write_text("evaluation_t: 1\nseed: 7\n")

    config = RunConfig.from_yaml(path)
    assert config.evaluation_t == 1.0
    assert isinstance(config.evaluation_t, float)
    assert config.seed == 7


def test_run_config_from_yaml_chains_parse_error(tmp_path):
    broken = tmp_path / "broken.yaml"
    broken.write_text("curve_count: [1, 2\n")

    with pytest.raises(ValueError) as excinfo:
        RunConfig.from_yaml(broken)
    assert isinstance(excinfo.value.__cause__, yaml.YAMLError)


def test_reduction_config_requires_integer_workers():
    assert ReductionConfig(max_workers=3).max_workers == 3
    with pytest.raises(ValueError, match="max_workers"):
        ReductionConfig(max_workers=2.5)
    with pytest.raises(ValueError, match="max_workers"):
        ReductionConfig(max_workers=True)


# ========== Logging ==========

def test_structured_logger_emits_json(caplog):
    logger = StructuredLogger(component="test_json")

    with caplog.at_level(logging.INFO, logger="paracurve.test_json"):
        logger.info(
            event=LogEvent.CURVES_GENERATED,
            message="Generated 3 curves",
            metadata={'count': 3}
        )

    entry = json.loads(caplog.records[-1].getMessage())
    assert entry['level'] == 'INFO'
    assert entry['component'] == 'test_json'
    assert entry['event'] == 'curves.generated'
    assert entry['metadata'] == {'count': 3}


def test_structured_logger_error_includes_exception(caplog):
    logger = create_logger("test_error")

    with caplog.at_level(logging.INFO, logger="paracurve.test_error"):
        logger.error(
            event=LogEvent.CONFIG_ERROR,
            message="Invalid run configuration",
            exc_info=ValueError("bad range")
        )

    entry = json.loads(caplog.records[-1].getMessage())
    assert entry['event'] == 'error.config'
    assert entry['exception'] == {'type': 'ValueError', 'message': 'bad range'}


def test_structured_logger_respects_level(caplog):
    logger = create_logger("test_level", level=logging.WARNING)

    with caplog.at_level(logging.DEBUG):
        logger.set_level(logging.WARNING)
        logger.info(event=LogEvent.CURVES_SORTED, message="hidden")

    assert not [r for r in caplog.records if r.name == "paracurve.test_level"]


# ========== CLI ==========

def test_build_curve():
    assert build_curve('circle', [2.0]) == Circle(2.0)
    assert build_curve('ellipse', [1.0, 3.0]) == Ellipse(1.0, 3.0)
    assert build_curve('helix', [1.0, 0.5]) == Helix(1.0, 0.5)

    with pytest.raises(ValueError):
        build_curve('circle', [1.0, 2.0])
    with pytest.raises(ValueError):
        build_curve('spiral', [1.0])


def test_cli_eval(capsys):
    assert main(['eval', 'circle', '2.0', '--t', '0']) == 0
    out = capsys.readouterr().out
    assert out.strip() == "point: {2.0, 0.0, 0.0}, derivative: {-0.0, 2.0, 0.0}"


def test_cli_eval_wrong_arity(capsys):
    assert main(['eval', 'helix', '1.0']) == 1
    assert "Error:" in capsys.readouterr().err


def test_cli_run_prints_both_sums(capsys):
    assert main(['--quiet', 'run', '--count', '90', '--seed', '1', '--workers', '3']) == 0

    lines = [l for l in capsys.readouterr().out.splitlines() if l.startswith("sum = ")]
    assert len(lines) == 2
    assert "sequenced solution time (microseconds)" in lines[0]
    assert "parallel solution time (microseconds)" in lines[1]

    sums = [float(l.split(",")[0].split("=")[1]) for l in lines]
    assert sums[0] == pytest.approx(sums[1])


def test_cli_run_print_curves(capsys):
    assert main(['--quiet', 'run', '--count', '4', '--seed', '2', '--print']) == 0
    out = capsys.readouterr().out
    assert out.count("point: ") == 4


def test_cli_run_with_config(tmp_path, capsys):
    path = tmp_path / "run.yaml"
    path.write_text("curve_count: 10\nseed: 4\n")

    assert main(['--quiet', 'run', '--config', str(path)]) == 0
    assert capsys.readouterr().out.count("sum = ") == 2


def test_cli_errors(tmp_path, capsys):
    assert main([]) == 1

    assert main(['--quiet', 'run', '--config', str(tmp_path / "nope.yaml")]) == 1
    assert "Config file not found" in capsys.readouterr().err

    assert main(['--quiet', 'run', '--count', '-3']) == 1
    assert "curve_count" in capsys.readouterr().err


def test_cli_run_logs_pipeline_events(tmp_path, caplog, capsys):
    path = tmp_path / "run.yaml"
    path.write_text("curve_count: 60\nseed: 8\nreduction:\n  max_workers: 2\n")

    with caplog.at_level(logging.INFO, logger="paracurve.cli"):
        assert main(['run', '--config', str(path)]) == 0

    entries = [
        json.loads(r.getMessage()) for r in caplog.records if r.name == "paracurve.cli"
    ]
    assert [e['event'] for e in entries] == [
        'config.loaded',
        'curves.generated',
        'curves.selected',
        'curves.sorted',
        'reduction.completed',
        'reduction.completed',
    ]
    assert entries[1]['metadata'] == {'count': 60, 'seed': 8}
    assert [e['metadata']['policy'] for e in entries[4:]] == ['sequenced', 'parallel']
    assert all(e['component'] == 'cli' for e in entries)


def test_cli_logs_config_error(tmp_path, caplog, capsys):
    path = tmp_path / "run.yaml"
    path.write_text("curve_count: 2.9\n")

    with caplog.at_level(logging.INFO, logger="paracurve.cli"):
        assert main(['run', '--config', str(path)]) == 1

    entries = [
        json.loads(r.getMessage()) for r in caplog.records if r.name == "paracurve.cli"
    ]
    assert [e['event'] for e in entries] == ['error.config']
    assert entries[0]['level'] == 'ERROR'
    assert entries[0]['exception']['type'] == 'ValueError'
    assert "curve_count" in capsys.readouterr().err


def test_reduction_logs_partition_at_debug(caplog):
    circles = [Circle(1.0)] * 10

    with caplog.at_level(logging.DEBUG, logger="paracurve_core.collection.reduction"):
        assert count_sum_of_radii(circles, ExecutionPolicy.PARALLEL, max_workers=3) == 10.0

    messages = [
        r.getMessage() for r in caplog.records
        if r.name == "paracurve_core.collection.reduction"
    ]
    assert messages == ["Summing 10 radii in 3 chunks on 3 workers"]


def test_reduction_line_format_is_shared(capsys):
    line = format_reduction_line(6.0, ExecutionPolicy.PARALLEL, 12)
    assert line == "sum = 6.0, parallel solution time (microseconds): 12"

    run_curves.main(curve_count=40)
    lines = [l for l in capsys.readouterr().out.splitlines() if l.startswith("sum = ")]
    assert len(lines) == 2
    assert lines[0].split(", ")[1].startswith("sequenced solution time (microseconds): ")
    assert lines[1].split(", ")[1].startswith("parallel solution time (microseconds): ")
