import configparser
import logging
import os
from typing import Optional

from limace.core.slugifier import DEFAULT_SEPARATOR, Slugifier
from limace.utils.logger import get_logger, parse_log_level

DEFAULT_CONFIG_PATH = os.path.join(os.path.expanduser('~'), '.config', 'limace', 'settings.ini')
DEFAULT_LOG_LEVEL = 'WARNING'

CONFIG_PATH_ENV_VAR = 'LIMACE_CONFIG'
SEPARATOR_ENV_VAR = 'LIMACE_SEPARATOR'
LOG_LEVEL_ENV_VAR = 'LIMACE_LOG_LEVEL'

logger = get_logger(__name__)

def default_config() -> configparser.ConfigParser:
    config = configparser.ConfigParser(interpolation=None)
    config['Slug'] = {'separator': DEFAULT_SEPARATOR}
    config['Logging'] = {'level': DEFAULT_LOG_LEVEL}
    return config

class ConfigManager:
    def __init__(self, config_file_path: Optional[str] = None):
        self.config_file_path = config_file_path or os.getenv(CONFIG_PATH_ENV_VAR) or DEFAULT_CONFIG_PATH
        self.config = configparser.ConfigParser(interpolation=None)
        self._load_config()

    def _load_config(self):
        """Loads the configuration from the INI file."""
        if not os.path.exists(self.config_file_path):
            logger.info(f"Config file not found at {self.config_file_path}. Using built-in defaults.")
            self.config = default_config()
            return

        try:
            self.config.read(self.config_file_path, encoding='utf-8')
        except (configparser.Error, UnicodeDecodeError) as e:
            logger.error(f"Error parsing config file {self.config_file_path}: {e}. Using built-in defaults.", exc_info=True)
            self.config = default_config()
            return

        if not self.config.has_section('Slug'):
            self.config.add_section('Slug')
            logger.info("Added missing [Slug] section to the config.")

    def write_default_config(self, path: Optional[str] = None) -> str:
        """
        Writes the default settings to an INI file.

        Args:
            path: Destination file. Defaults to this manager's config file path.

        Returns:
            The path that was written.
        """
        target = path or self.config_file_path
        config_dir = os.path.dirname(target)
        try:
            if config_dir:
                os.makedirs(config_dir, exist_ok=True)
            with open(target, 'w', encoding='utf-8') as configfile:
                default_config().write(configfile)
        except (IOError, OSError) as e:
            logger.error(f"Error writing default config file: {e}", exc_info=True)
            raise
        logger.info(f"Created a default config file at: {target}")
        return target

    def get_setting(self, section: str, option: str, fallback=None) -> Optional[str]:
        """Gets a specific setting from the configuration."""
        try:
            return self.config.get(section, option, fallback=fallback)
        except (configparser.NoSectionError, configparser.NoOptionError):
            return fallback

    def get_separator(self) -> str:
        """
        Returns the slug separator.
        Priority:
        1. LIMACE_SEPARATOR environment variable.
        2. [Slug] separator from the config file.
        3. '-'.
        Values that are not exactly one character long are ignored.
        """
        candidates = (
            (os.getenv(SEPARATOR_ENV_VAR), f"{SEPARATOR_ENV_VAR} environment variable"),
            (self.get_setting('Slug', 'separator'), f"config file '{self.config_file_path}'"),
        )
        for value, source in candidates:
            if value is None:
                continue
            if len(value) != 1:
                logger.warning(f"Ignoring separator {value!r} from {source}: it must be exactly one character.")
                continue
            if value.isalnum():
                logger.warning(f"Separator {value!r} from {source} is alphanumeric; slugs will be ambiguous.")
            logger.debug(f"Using separator {value!r} from {source}")
            return value
        return DEFAULT_SEPARATOR

    def get_log_level(self) -> int:
        """Returns the configured log level as a logging constant."""
        value = os.getenv(LOG_LEVEL_ENV_VAR) or self.get_setting('Logging', 'level', fallback=DEFAULT_LOG_LEVEL)
        level = parse_log_level(value, fallback=-1)
        if level == -1:
            logger.warning(f"Unknown log level {value!r}, falling back to {DEFAULT_LOG_LEVEL}.")
            return logging.WARNING
        return level

    def build_slugifier(self) -> Slugifier:
        """Returns a Slugifier configured with the resolved separator."""
        return Slugifier(self.get_separator())
