from typing import Iterator, List, Optional

import click

from limace.cli.contexts import InitConfigContext, SlugifyContext
from limace.core.transliteration import transliterate
from limace.utils.logger import get_logger

logger = get_logger(__name__)

def _input_lines(texts: List[str]) -> Iterator[str]:
    if texts:
        yield from texts
        return
    # '-' is standard input; click keeps it open on exit.
    with click.open_file('-') as stdin:
        for line in stdin:
            yield line.rstrip('\r\n')

def slugify_handler(texts: List[str], separator: Optional[str], config_path: Optional[str]) -> None:
    """Handles the logic for the 'slugify' CLI command."""
    context = SlugifyContext(texts=texts, separator=separator, config_path=config_path)
    for message in context.warning_messages:
        click.echo(click.style(f"Warning: {message}", fg="yellow"), err=True)

    if context.reads_stdin:
        logger.debug("No text arguments given, reading from standard input.")

    count = 0
    for text in _input_lines(context.texts):
        click.echo(context.slugifier.slugify(text))
        count += 1
    logger.info(f"Slugified {count} input(s) with {context.slugifier!r}")

def transliterate_handler(texts: List[str]) -> None:
    """Handles the logic for the 'transliterate' CLI command."""
    for text in _input_lines(texts):
        click.echo(transliterate(text))

def init_config_handler(path: Optional[str], force: bool, config_path: Optional[str]) -> bool:
    """Handles the logic for the 'init-config' CLI command. Returns True on success."""
    context = InitConfigContext(path=path, force=force, config_path=config_path)
    if not context.is_valid():
        for error in context.error_messages:
            click.echo(click.style(f"Error: {error}", fg="red"), err=True)
        return False

    try:
        written = context.config_manager.write_default_config(context.target_path)
    except OSError as e:
        click.echo(click.style(f"Error writing config file: {e}", fg="red"), err=True)
        return False

    click.echo(click.style(f"Default config written to {written}", fg="green"))
    return True
