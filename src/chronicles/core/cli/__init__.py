"""Chronicles CLI entry point for serve, search, and show commands."""

import click

from chronicles import __version__
from chronicles.core.config import Config
from chronicles.core.utils.logging import configure_from


@click.group()
@click.version_option(version=__version__, package_name="chronicles")
@click.option("--config", "config_file", type=click.Path(dir_okay=False), help="YAML or JSON config file.")
@click.option("--log-level", default=None, help="Override logging.level (DEBUG, INFO, WARNING, ERROR).")
@click.pass_context
def main(ctx: click.Context, config_file: str | None, log_level: str | None) -> None:
    """Chronicles: index and render a journal of dated markdown files."""
    config = Config(config_file=config_file)
    configure_from(config, level=log_level)
    ctx.obj = config


from .journal_cmd import search, show  # noqa: E402
from .serve_cmd import serve  # noqa: E402

main.add_command(serve)
main.add_command(search)
main.add_command(show)
