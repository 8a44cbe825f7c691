import io

import pytest
import yaml
from typer.testing import CliRunner

from zigrng import SamplingStream, sample_exponential, sample_normal
from zigrng.cli.sample import app, collect_sampling_config, make_sampler
from zigrng.tables.constants import published_table

runner = CliRunner()


@pytest.fixture
def yaml_config():
    return {
        "DISTRIBUTION": "exponential",
        "N_SAMPLES": 20,
        "SEED": 5,
    }


def parse_lines(text):
    return [float(line) for line in text.strip().splitlines()]


def test_sample_to_stdout():
    result = runner.invoke(app, ["sample", "-n", "25", "--seed", "17"])
    assert result.exit_code == 0, result.output

    stream = SamplingStream(seed=17)
    expected = [sample_normal(stream) for _ in range(25)]
    assert parse_lines(result.stdout) == expected


def test_sample_to_file(tmp_path):
    output = tmp_path / "out" / "draws.txt"
    result = runner.invoke(
        app,
        ["sample", "-d", "exponential", "-n", "100", "--seed", "3", "-o", str(output)],
    )
    assert result.exit_code == 0, result.output

    stream = SamplingStream(seed=3)
    expected = [sample_exponential(stream) for _ in range(100)]
    assert parse_lines(output.read_text()) == expected


def test_sample_with_config(tmp_path, yaml_config):
    config_path = tmp_path / "config.yaml"
    config_path.write_text(yaml.dump(yaml_config))

    result = runner.invoke(app, ["sample", "--config-path", str(config_path)])
    assert result.exit_code == 0, result.output

    values = parse_lines(result.stdout)
    assert len(values) == 20
    assert all(v >= 0 for v in values)


def test_command_line_overrides_config(tmp_path, yaml_config):
    config_path = tmp_path / "config.yaml"
    config_path.write_text(yaml.dump(yaml_config))

    result = runner.invoke(
        app, ["sample", "--config-path", str(config_path), "-n", "3"]
    )
    assert result.exit_code == 0, result.output
    assert len(parse_lines(result.stdout)) == 3


def test_sample_polynomial():
    result = runner.invoke(
        app, ["sample", "-d", "polynomial", "--degree", "3", "--n-layers", "16", "-n", "50"]
    )
    assert result.exit_code == 0, result.output
    values = parse_lines(result.stdout)
    assert len(values) == 50
    assert all(0.0 <= v < 1.0 for v in values)


def test_sample_high_degree_polynomial():
    result = runner.invoke(
        app, ["sample", "-d", "polynomial", "--degree", "150", "-n", "20"]
    )
    assert result.exit_code == 0, result.output
    assert all(0.0 <= v < 1.0 for v in parse_lines(result.stdout))


def test_sample_unknown_distribution():
    result = runner.invoke(app, ["sample", "-d", "cauchy", "-n", "1"])
    assert result.exit_code != 0


def test_values_round_trip_exactly():
    result = runner.invoke(app, ["sample", "-n", "5"])
    assert result.exit_code == 0, result.output
    for line in result.stdout.strip().splitlines():
        assert "%.17g" % float(line) == line


def test_tables_normal():
    result = runner.invoke(app, ["tables", "-d", "normal"])
    assert result.exit_code == 0, result.output

    dumped = yaml.safe_load(result.stdout)
    published = published_table("normal")
    assert dumped["distribution"] == "normal"
    assert dumped["n"] == 256
    assert dumped["r"] == published["r"]
    assert len(dumped["x"]) == 257
    assert dumped["k"][-1] == 0


def test_tables_to_file(tmp_path):
    output = tmp_path / "table.yaml"
    result = runner.invoke(
        app, ["tables", "-d", "polynomial", "--degree", "5", "--n-layers", "32", "-o", str(output)]
    )
    assert result.exit_code == 0, result.output
    dumped = yaml.safe_load(output.read_text())
    assert dumped["distribution"] == "polynomial"
    assert dumped["n"] == 32


def test_collect_sampling_config_ignores_unset_overrides(yaml_config):
    yaml_buffer = io.StringIO()
    yaml.dump(yaml_config, yaml_buffer)
    yaml_buffer.seek(0)

    config = collect_sampling_config(yaml_buffer, {"seed": None, "n_samples": 7})
    assert config["seed"] == 5
    assert config["n_samples"] == 7


def test_make_sampler_uses_default_table():
    sampler = make_sampler({"distribution": "normal"})
    assert sampler.table.r == published_table("normal")["r"]
