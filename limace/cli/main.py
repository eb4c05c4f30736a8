from typing import Optional, Tuple

import click

from limace import __version__
from limace.cli.handlers import init_config_handler, slugify_handler, transliterate_handler
from limace.core.config_manager import ConfigManager
from limace.utils.logger import PACKAGE_LOGGER_NAME, parse_log_level, setup_logger

LOG_LEVEL_CHOICES = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']

def _validate_separator(ctx, param, value: Optional[str]) -> Optional[str]:
    if value is not None and len(value) != 1:
        raise click.BadParameter('must be exactly one character.')
    return value

@click.group()
@click.version_option(__version__, prog_name='limace')
@click.option('--config', 'config_path', default=None, type=click.Path(dir_okay=False), help='Path to a settings.ini file. Overrides LIMACE_CONFIG.')
@click.option('--log-level', default=None, type=click.Choice(LOG_LEVEL_CHOICES, case_sensitive=False), help='Logging verbosity. Overrides the configured level.')
@click.option('--log-file', default=None, type=click.Path(dir_okay=False), help='Also write logs to this file.')
@click.pass_context
def limace(ctx, config_path: Optional[str], log_level: Optional[str], log_file: Optional[str]):
    """Turns arbitrary text into lowercase ASCII slugs."""
    ctx.ensure_object(dict)
    ctx.obj['config_path'] = config_path

    if log_level:
        level = parse_log_level(log_level)
    else:
        level = ConfigManager(config_path).get_log_level()
    setup_logger(PACKAGE_LOGGER_NAME, log_file, level)

@limace.command()
@click.argument('texts', nargs=-1)
@click.option('-s', '--separator', default=None, callback=_validate_separator, help='Separator character. Defaults to the configured one, or "-".')
@click.pass_context
def slugify(ctx, texts: Tuple[str, ...], separator: Optional[str]):
    """
    Prints the slug of each TEXT.

    With no TEXT arguments, reads standard input and prints one slug per line.
    """
    slugify_handler(
        texts=list(texts),
        separator=separator,
        config_path=ctx.obj.get('config_path')
    )

@limace.command()
@click.argument('texts', nargs=-1)
def transliterate(texts: Tuple[str, ...]):
    """Prints the ASCII transliteration of each TEXT (or of each stdin line)."""
    transliterate_handler(texts=list(texts))

@limace.command(name='init-config')
@click.option('--path', default=None, type=click.Path(dir_okay=False), help='Where to write the file. Defaults to the active config path.')
@click.option('--force', is_flag=True, default=False, help='Overwrite an existing file.')
@click.pass_context
def init_config(ctx, path: Optional[str], force: bool):
    """Writes a settings.ini file holding the default settings."""
    if not init_config_handler(path=path, force=force, config_path=ctx.obj.get('config_path')):
        ctx.exit(1)

if __name__ == '__main__':
    limace()
