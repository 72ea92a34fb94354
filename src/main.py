"""Main entry point for the course store.

Every command builds a fresh in-memory table; nothing is written back.
"""
from typing import Optional
import click
from course_table import CourseTable, CourseNotFoundError
from manager import CourseManager
from settings import Settings
from logging_utils import configure_logging
from cli import CLI


def _build_manager(estimate: Optional[int], size: Optional[int], settings: Settings) -> CourseManager:
    if size is not None:
        return CourseManager(table=CourseTable.with_size(size))
    return CourseManager(estimate if estimate is not None else settings.estimate)


def _load(manager: CourseManager, path: Optional[str]) -> None:
    if path is None:
        return
    try:
        manager.read_file(path)
    except OSError as exc:
        raise click.FileError(path, hint=exc.strerror or str(exc))


table_options = [
    click.option('--estimate', type=int, default=None,
                 help='Expected number of courses; sizes the table to a 4k+3 prime.'),
    click.option('--size', type=click.IntRange(min=1), default=None,
                 help='Exact number of buckets (overrides --estimate).'),
]


def with_table_options(func):
    for option in reversed(table_options):
        func = option(func)
    return func


@click.group()
@click.pass_context
def cli(ctx: click.Context) -> None:
    """In-memory course registration store."""
    settings = Settings.load()
    configure_logging(settings.log_level, settings.log_dir)
    ctx.obj = settings


@cli.command()
@click.argument('path', type=click.Path(exists=True, dir_okay=False))
@click.option('--raw', is_flag=True, help='Bucket order instead of sorted by CRN.')
@with_table_options
@click.pass_obj
def show(settings: Settings, path: str, raw: bool, estimate: Optional[int], size: Optional[int]) -> None:
    """Load PATH and print every course."""
    manager = _build_manager(estimate, size, settings)
    _load(manager, path)
    sorted_output = settings.sorted_output and not raw
    for line in manager.show_all(sorted_output):
        click.echo(line)


@cli.command()
@click.argument('path', type=click.Path(exists=True, dir_okay=False))
@click.argument('crn', type=int)
@with_table_options
@click.pass_obj
def get(settings: Settings, path: str, crn: int, estimate: Optional[int], size: Optional[int]) -> None:
    """Load PATH and print the course with CRN."""
    manager = _build_manager(estimate, size, settings)
    _load(manager, path)
    try:
        course = manager.get(crn)
    except CourseNotFoundError as exc:
        click.echo(str(exc), err=True)
        raise click.exceptions.Exit(1)
    click.echo(str(course))


@cli.command()
@click.argument('path', required=False, type=click.Path(exists=True, dir_okay=False))
@with_table_options
@click.pass_obj
def shell(settings: Settings, path: Optional[str], estimate: Optional[int], size: Optional[int]) -> None:
    """Start the interactive shell, optionally preloading PATH."""
    manager = _build_manager(estimate, size, settings)
    _load(manager, path)
    CLI(manager, sorted_output=settings.sorted_output).run()


def main():
    cli()

if __name__ == "__main__":
    main()
