"""Command line interface for link previews."""

import json
import sys
from typing import Optional

import click

from linkpreview import __version__
from linkpreview.config import PreviewConfig, load_config
from linkpreview.logging import add_error_log, set_log_level
from linkpreview.preview import LinkPreview


@click.command()
@click.version_option(version=__version__, prog_name="linkpreview")
@click.argument('url', type=str)
@click.option('--config', '-c', type=click.Path(exists=True), help='Configuration file path')
@click.option('--timeout', type=int, help='Request timeout in seconds (overrides config)')
@click.option('--debug', is_flag=True, help='Enable debug logging')
@click.option('--json', 'as_json', is_flag=True, help='Print the preview as JSON')
def main(url: str, config: Optional[str], timeout: Optional[int], debug: bool, as_json: bool):
    """Fetch URL and print its title, description, canonical URL and image."""
    preview_config = load_config(config) if config else PreviewConfig()
    if timeout is not None:
        preview_config = preview_config.model_copy(update={"timeout": timeout})

    set_log_level("DEBUG" if debug else preview_config.log_level)
    if preview_config.log_dir:
        add_error_log(preview_config.log_dir)

    preview = LinkPreview(config=preview_config)
    if not preview.fetch(url):
        click.echo(f"Failed to fetch {url}", err=True)
        sys.exit(1)

    data = preview.preview()
    if as_json:
        click.echo(json.dumps(data.to_dict(), indent=2, ensure_ascii=False))
        return

    click.echo(f"Title:       {data.title}")
    click.echo(f"Description: {data.description}")
    click.echo(f"URL:         {data.url}")
    click.echo(f"Image:       {data.image or '-'}")


if __name__ == '__main__':
    main()
