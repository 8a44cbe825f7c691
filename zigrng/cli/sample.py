import logging
from pathlib import Path
from pprint import pformat

import tqdm
import typer
import yaml

from zigrng.config import get_sampling_config_from_yaml
from zigrng.densities import PowerDensity
from zigrng.registry import get_distribution_registry
from zigrng.samplers import build_polynomial_table
from zigrng.sampling.engine import ZigguratSampler
from zigrng.streams import SamplingStream

app = typer.Typer(add_completion=False)

POLYNOMIAL = "polynomial"


def collect_sampling_config(
    config_path: Path | None = None, overrides: dict | None = None
) -> dict:
    """Merge the YAML configuration with command line overrides.

    Overrides that are ``None`` were not given on the command line and leave
    the configured value in place.
    """
    config = get_sampling_config_from_yaml(config_path)
    config.update({k: v for k, v in (overrides or {}).items() if v is not None})
    return config


def make_sampler(config: dict) -> ZigguratSampler:
    """Sampler for the configured distribution.

    Registered distributions use their shared default table. ``polynomial``
    builds a table for the density ``(1 - x)**degree`` with ``n_layers``
    layers.
    """
    name = config["distribution"]
    if name == POLYNOMIAL:
        table = build_polynomial_table(
            PowerDensity(config["degree"]), n=config["n_layers"]
        )
        return ZigguratSampler(table)

    registry = get_distribution_registry()
    if not registry.is_registered(name):
        raise typer.BadParameter(
            f"Unknown distribution '{name}'. Choose one of "
            f"{registry.list_distributions() + [POLYNOMIAL]}.",
            param_hint="--distribution",
        )
    return registry.default_sampler(name)


def format_value(value: float) -> str:
    return "%.17g" % value


log_level_option = typer.Option(
    "WARNING",
    "--log-level",
    "-l",
    help="Set the logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).",
    case_sensitive=False,
    show_default=True,
    rich_help_panel="Logging",
    metavar="LEVEL",
    autocompletion=lambda: ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
)

config_path_option = typer.Option(
    None, "--config-path", help="Path to the YAML configuration file."
)
distribution_option = typer.Option(
    None,
    "--distribution",
    "-d",
    help="Distribution to sample: normal, exponential or polynomial.",
)
degree_option = typer.Option(
    None, "--degree", help="Degree p of the polynomial density (1 - x)**p.", min=1
)
n_layers_option = typer.Option(
    None, "--n-layers", help="Number of layers of a polynomial table.", min=2
)

epilog = "Example: `zigrng sample --distribution normal -n 1000 --seed 17 --output draws.txt`"


@app.command(epilog=epilog)
def sample(
    config_path: Path = config_path_option,
    distribution: str = distribution_option,
    n_samples: int = typer.Option(
        None, "--n-samples", "-n", help="Number of variates to draw.", min=0
    ),
    seed: int = typer.Option(None, "--seed", help="Seed of the uniform stream."),
    degree: int = degree_option,
    n_layers: int = n_layers_option,
    output: Path = typer.Option(
        None, "--output", "-o", help="Output file. Defaults to stdout."
    ),
    log_level: str = log_level_option,
):
    """
    Draw a seeded sequence of variates, one per line.
    """
    logging.basicConfig(
        level=log_level.upper(), format="%(asctime)s - %(levelname)s - %(message)s"
    )
    logger = logging.getLogger(__name__)

    if config_path is None:
        logger.info("No config path provided, using default configuration.")

    config = collect_sampling_config(
        config_path,
        {
            "distribution": distribution,
            "n_samples": n_samples,
            "seed": seed,
            "degree": degree,
            "n_layers": n_layers,
        },
    )
    logger.debug("SAMPLING CONFIG")
    logger.debug(pformat(config))

    sampler = make_sampler(config)
    stream = SamplingStream(seed=config["seed"])
    n = config["n_samples"]

    if output is None:
        for _ in range(n):
            typer.echo(format_value(sampler.sample(stream)))
    else:
        output.parent.mkdir(parents=True, exist_ok=True)
        with open(output, "w") as f:
            for _ in tqdm.tqdm(range(n), desc="Sampling", unit="sample"):
                f.write(format_value(sampler.sample(stream)) + "\n")
        logger.info("Wrote %d samples to %s", n, output)

    logger.debug("Stream state after sampling: %r", stream)


@app.command()
def tables(
    config_path: Path = config_path_option,
    distribution: str = distribution_option,
    degree: int = degree_option,
    n_layers: int = n_layers_option,
    output: Path = typer.Option(
        None, "--output", "-o", help="Output YAML file. Defaults to stdout."
    ),
    log_level: str = log_level_option,
):
    """
    Dump the Ziggurat table of a distribution as YAML.
    """
    logging.basicConfig(
        level=log_level.upper(), format="%(asctime)s - %(levelname)s - %(message)s"
    )
    logger = logging.getLogger(__name__)

    config = collect_sampling_config(
        config_path,
        {"distribution": distribution, "degree": degree, "n_layers": n_layers},
    )
    table = make_sampler(config).table
    dumped = yaml.safe_dump(table.as_dict(), sort_keys=False)

    if output is None:
        typer.echo(dumped, nl=False)
    else:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(dumped)
        logger.info("Wrote %r to %s", table, output)


if __name__ == "__main__":
    app()
