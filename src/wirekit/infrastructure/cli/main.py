"""
Command line entry point.

Runs generation passes once or on every source change.
"""

import logging
from pathlib import Path
from typing import Optional, Tuple

import click

from wirekit.application import InjectionGenerator, RegenerationScheduler
from wirekit.domain import DIException, GeneratorSettings
from wirekit.infrastructure.filesystem import ArtifactWriter, PollingWatcher, SourceScanner

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def build_generator(settings: GeneratorSettings) -> InjectionGenerator:
    """Wire a generator with the filesystem scanner and writer."""
    return InjectionGenerator(settings, SourceScanner(settings), ArtifactWriter())


def _settings(
    project_root: Optional[Path],
    source_dir: Optional[Path],
    import_root: Optional[Path],
    output: Optional[Path],
    exclude: Tuple[str, ...],
) -> GeneratorSettings:
    settings = GeneratorSettings()
    overrides = {
        "project_root": project_root,
        "source_dir": source_dir,
        "import_root": import_root,
        "output_file": output,
    }
    update = {key: value for key, value in overrides.items() if value is not None}
    if exclude:
        update["exclude_patterns"] = [*settings.exclude_patterns, *exclude]
    return settings.model_copy(update=update)


def _common_options(command):
    command = click.option("--exclude", "-e", multiple=True, help="Additional glob pattern to skip.")(command)
    command = click.option("--output", "-o", type=click.Path(path_type=Path), help="Generated module path.")(command)
    command = click.option("--import-root", type=click.Path(path_type=Path), help="Directory on sys.path.")(command)
    command = click.option("--source-dir", "-s", type=click.Path(path_type=Path), help="Directory to scan.")(command)
    command = click.option(
        "--project-root", "-r", type=click.Path(file_okay=False, path_type=Path), help="Project root directory."
    )(command)
    return command


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Generate the DI registration module for a source tree."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO, format=LOG_FORMAT)


@cli.command()
@_common_options
def generate(
    project_root: Optional[Path],
    source_dir: Optional[Path],
    import_root: Optional[Path],
    output: Optional[Path],
    exclude: Tuple[str, ...],
) -> None:
    """Scan the source tree once and write the registration module."""
    settings = _settings(project_root, source_dir, import_root, output, exclude)
    try:
        result = build_generator(settings).generate()
    except DIException as e:
        raise click.ClickException(str(e)) from e

    for failure in result.failures:
        click.echo(click.style(f"Skipped {failure.path}: {failure.reason}", fg="yellow"), err=True)
    click.echo(f"Registered {len(result.ordering)} classes in {result.output_file}")


@cli.command()
@_common_options
@click.option("--interval", default=1.0, show_default=True, help="Seconds between change polls.")
def watch(
    project_root: Optional[Path],
    source_dir: Optional[Path],
    import_root: Optional[Path],
    output: Optional[Path],
    exclude: Tuple[str, ...],
    interval: float,
) -> None:
    """Generate now and again whenever a source file changes."""
    settings = _settings(project_root, source_dir, import_root, output, exclude)
    scanner = SourceScanner(settings)
    generator = InjectionGenerator(settings, scanner, ArtifactWriter())
    scheduler = RegenerationScheduler(generator.generate)
    scheduler.trigger()

    watcher = PollingWatcher(scanner.find_source_files, scheduler.trigger, interval=interval)
    try:
        watcher.run()
    except KeyboardInterrupt:
        watcher.stop()


if __name__ == "__main__":
    cli()
