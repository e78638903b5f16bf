"""Command line interface for mdpress."""

import logging

import click

from .config import load_config
from .core import SiteBuilder
from .exceptions import MdpressError

def setup_logging(verbose: bool):
    """Send mdpress log records to stderr, at DEBUG level when verbose."""
    logging.basicConfig(format='%(levelname)s: %(message)s')
    logging.getLogger('mdpress').setLevel(logging.DEBUG if verbose else logging.INFO)

@click.group()
def mdpress():
    """Build static HTML pages from markdown files."""

@mdpress.command("build")
@click.option(
    '--config',
    '-c',
    help='Path to config file (default: mdpress.config.toml if present)',
    type=click.Path(exists=True, file_okay=True, dir_okay=False, path_type=str)
)
@click.option(
    '--template',
    '-t',
    help='Override template file path',
    type=click.Path(exists=True, file_okay=True, dir_okay=False, path_type=str)
)
@click.option(
    '--input',
    '-i',
    help='Override markdown directory path',
    type=click.Path(file_okay=False, dir_okay=True, path_type=str)
)
@click.option(
    '--output',
    '-o',
    help='Override output directory path',
    type=click.Path(file_okay=False, dir_okay=True, path_type=str)
)
@click.option('--verbose', '-v', is_flag=True, help='Show debug output')
def mdpress_build(config, template, input, output, verbose):
    """Build HTML pages from markdown files.

    Every file in the markdown directory is converted to HTML and written
    into the template's content placeholder. Files that fail to read or
    write are reported and skipped.
    """
    setup_logging(verbose)
    try:
        build_config = load_config(config).override(
            template_path=template,
            input_dir=input,
            output_dir=output,
        )
        site_builder = SiteBuilder(build_config)
    except MdpressError as e:
        click.echo(f"Error: {str(e)}", err=True)
        raise click.Abort()

    pages = site_builder.build()
    click.echo(f"Built {len(pages)} pages into {site_builder.output_dir}")
