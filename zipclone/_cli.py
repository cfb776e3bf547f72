import dataclasses as dc
import typing as ty
import warnings

import click
import yaml
from omegaconf import DictConfig, OmegaConf
from omegaconf.errors import OmegaConfBaseException

from zipclone.adapter import zip_clone
from zipclone._version import version


MODES = ("pairs", "last", "count")


@dc.dataclass
class PairsConfig:
    """Settings for the ``pairs`` command. OmegaConf converts or
    rejects values from the config file according to these types.
    """

    seed: str = ""
    skip: int = 0
    mode: str = "pairs"
    stats: bool = False


def load_config(
    config_path: ty.Optional[str] = None,
) -> ty.Dict[str, ty.Any]:
    """Reads the YAML file at ``config_path`` over the default settings.
    Unknown keys are ignored with a warning.

    Raises
    ------
    click.BadParameter
        If the file is not valid YAML, does not hold a mapping, or
        holds a value of the wrong type or range.
    """
    conf = OmegaConf.structured(PairsConfig)
    if config_path is not None:
        try:
            file_conf = OmegaConf.load(config_path)
        except yaml.YAMLError as e:
            raise click.BadParameter(
                f"Config file is not valid YAML: {e}", param_hint="--config"
            ) from e
        if not isinstance(file_conf, DictConfig):
            raise click.BadParameter(
                "Config file must contain a mapping.", param_hint="--config"
            )
        known = {field.name for field in dc.fields(PairsConfig)}
        unknown = set(file_conf.keys()) - known
        if unknown:
            names = sorted(map(str, unknown))
            warnings.warn(
                f"Ignoring unknown config keys {names}.", UserWarning
            )
            for key in unknown:
                file_conf.pop(key)
        try:
            conf = OmegaConf.merge(conf, file_conf)
        except OmegaConfBaseException as e:
            reason = str(e).splitlines()[0]
            raise click.BadParameter(
                f"Invalid config value: {reason}", param_hint="--config"
            ) from e
    settings = OmegaConf.to_container(conf)
    if settings["mode"] not in MODES:
        raise click.BadParameter(
            f"mode must be one of {MODES}, not {settings['mode']!r}.",
            param_hint="--config",
        )
    if settings["skip"] < 0:
        raise click.BadParameter(
            "skip must be a non-negative integer.", param_hint="--config"
        )
    return settings  # type: ignore


def _format(pair: ty.Tuple[str, ty.Any]) -> str:
    line, seed = pair
    return f"{line}\t{seed}"


@click.group()
@click.version_option(version)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    help="YAML file setting defaults for seed, skip, mode and stats.",
)
@click.pass_context
def zipclone(ctx, config_path):
    """Pair lines of text with copies of a seed value."""
    ctx.obj = {}
    ctx.obj["config"] = load_config(config_path)


@zipclone.command()
@click.argument("input_file", type=click.File("r"), default="-")
@click.option("--seed", help="Value to pair with every line.")
@click.option(
    "--skip", type=click.IntRange(min=0), help="Lines to pass over first."
)
@click.option(
    "--mode",
    type=click.Choice(MODES),
    help="Print every pair, only the last one, or the number of pairs.",
)
@click.option(
    "--stats/--no-stats",
    default=None,
    help="Report the number of copies made on stderr.",
)
@click.pass_context
def pairs(ctx, input_file, seed, skip, mode, stats):
    """Pairs each line of INPUT_FILE (default stdin) with the seed."""
    conf = ctx.obj["config"]
    overrides = {"seed": seed, "skip": skip, "mode": mode, "stats": stats}
    conf.update({k: v for k, v in overrides.items() if v is not None})
    lines = (line.rstrip("\n") for line in input_file)
    zipped = zip_clone(lines, conf["seed"]).skip(conf["skip"])
    if conf["mode"] == "count":
        click.echo(zipped.count())
    elif conf["mode"] == "last":
        pair = zipped.last()
        if pair is not None:
            click.echo(_format(pair))
    else:
        for pair in zipped:
            click.echo(_format(pair))
    if conf["stats"]:
        report = f"duplications: {zipped.duplications}"
        click.echo(click.style(report, fg="green"), err=True)
