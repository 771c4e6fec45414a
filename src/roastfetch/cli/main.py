"""roastfetch CLI - Main entry point."""

import logging
import logging.handlers
import random
from functools import partial
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from roastfetch import __version__
from roastfetch.config import ConfigError, RoastConfig, load_config

console = Console()
logger = logging.getLogger(__name__)

_LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"
_CONSOLE_HANDLER = "roastfetch-console"
_FILE_HANDLER = "roastfetch-file"

# Log rotation: 1 MB per file, keep 3 backups
_LOG_MAX_BYTES = 1024 * 1024
_LOG_BACKUP_COUNT = 3


def _setup_logging(verbose: bool, log_to_file: bool) -> None:
    """Configure console and optional rotating file logging on the root logger."""
    root_logger = logging.getLogger()
    level = logging.DEBUG if verbose else logging.WARNING
    root_logger.setLevel(level)
    names = {h.get_name() for h in root_logger.handlers}

    if _CONSOLE_HANDLER not in names:
        handler = logging.StreamHandler()
        handler.set_name(_CONSOLE_HANDLER)
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        root_logger.addHandler(handler)

    if log_to_file and _FILE_HANDLER not in names:
        log_dir = Path.home() / ".roastfetch" / "logs"
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_dir / "roastfetch.log",
            maxBytes=_LOG_MAX_BYTES,
            backupCount=_LOG_BACKUP_COUNT,
        )
        file_handler.set_name(_FILE_HANDLER)
        file_handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        root_logger.addHandler(file_handler)


def _fail(message: str) -> None:
    console.print(f"[red]{escape(message)}[/red]")
    raise SystemExit(1)


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="roastfetch")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Configuration file (default: ~/.roastfetch/config.yaml)",
)
@click.pass_context
def cli(ctx, verbose, config_path):
    """roastfetch - Show your system specs, then roast them."""
    try:
        config = load_config(config_path)
    except ConfigError as e:
        _fail(str(e))

    _setup_logging(verbose, config.log_to_file)
    ctx.obj = config

    if ctx.invoked_subcommand is None:
        ctx.invoke(roast)


def _snapshot(config: RoastConfig):
    from roastfetch.hardware.detector import read_raw_gpu_text
    from roastfetch.hardware.snapshot import take_snapshot

    gpu_source = partial(
        read_raw_gpu_text,
        command=config.gpu_command,
        timeout_s=config.gpu_timeout_s,
    )
    return take_snapshot(gpu_source=gpu_source, battery_paths=config.battery_paths)


@cli.command()
@click.option("--seed", type=int, default=None, help="Seed for reproducible roasts")
@click.option(
    "--corpus",
    "corpus_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Roast corpus YAML file",
)
@click.option("--json", "as_json", is_flag=True, help="Print JSON instead of text")
@click.pass_obj
def roast(config, seed=None, corpus_path=None, as_json=False):
    """Show system specs and roast each of them."""
    from roastfetch.reporters.console import print_roasts, print_specs
    from roastfetch.reporters.json_reporter import run_to_json
    from roastfetch.roast.corpus import CorpusError, load_corpus
    from roastfetch.roast.selector import RoastSelector, build_roasts
    from roastfetch.roast.tiers import classify

    seed = seed if seed is not None else config.seed
    corpus_path = corpus_path or config.corpus_path

    try:
        corpus = load_corpus(corpus_path)
    except CorpusError as e:
        _fail(str(e))

    snapshot = _snapshot(config)
    report = classify(snapshot)
    logger.debug(f"Classified {snapshot.gpu_name!r} as {report}")

    selector = RoastSelector(corpus, random.Random(seed))
    try:
        roasts = build_roasts(report.labels(), selector)
    except CorpusError as e:
        _fail(str(e))

    if as_json:
        click.echo(run_to_json(snapshot, report, roasts))
        return

    print_specs(console, snapshot)
    print_roasts(console, roasts)


@cli.command()
@click.option("--json", "as_json", is_flag=True, help="Print JSON instead of text")
@click.pass_obj
def specs(config, as_json):
    """Show system specs and the tier of each attribute."""
    from roastfetch.reporters.console import print_specs
    from roastfetch.reporters.json_reporter import run_to_json
    from roastfetch.roast.tiers import classify

    snapshot = _snapshot(config)
    report = classify(snapshot)

    if as_json:
        click.echo(run_to_json(snapshot, report))
        return

    print_specs(console, snapshot, report)
    console.print()


@cli.group()
def corpus():
    """Inspect roast corpora."""


@corpus.command("check")
@click.argument("path", required=False, type=click.Path(dir_okay=False, path_type=Path))
def check_corpus(path):
    """Validate a corpus file (default: the bundled corpus)."""
    from roastfetch.roast.corpus import CorpusError, load_corpus

    try:
        loaded = load_corpus(path)
    except CorpusError as e:
        _fail(str(e))

    console.print(f"[bold green]Corpus OK:[/bold green] {escape(str(path or 'bundled corpus'))}")
    for label in loaded.labels():
        name = f"{type(label).__name__}.{label.value}"
        console.print(f"  {name}: {len(loaded.lines(label))} lines")
    console.print(f"  General: {len(loaded.general)} lines")


if __name__ == "__main__":
    cli()
