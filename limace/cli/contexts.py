import os
from typing import List, Optional

from limace.core.config_manager import ConfigManager
from limace.core.slugifier import Slugifier
from limace.utils.logger import get_logger

logger = get_logger(__name__)

class SlugifyContext:
    """
    Resolves the separator and input for the slugify command.
    """
    def __init__(
        self,
        texts: List[str],
        separator: Optional[str],
        config_path: Optional[str]
    ):
        self.texts: List[str] = list(texts)
        self.separator_option: Optional[str] = separator
        self.config_path: Optional[str] = config_path
        self.warning_messages: List[str] = []

        self.slugifier: Slugifier = self._resolve_slugifier()

    def _resolve_slugifier(self) -> Slugifier:
        if self.separator_option is not None:
            logger.info(f"Using separator from command line: {self.separator_option!r}")
            if self.separator_option.isalnum():
                self.warning_messages.append(
                    f"Separator {self.separator_option!r} is alphanumeric; slugs will be ambiguous."
                )
            return Slugifier(self.separator_option)
        return ConfigManager(self.config_path).build_slugifier()

    @property
    def reads_stdin(self) -> bool:
        return not self.texts


class InitConfigContext:
    """
    Resolves where the default settings file should be written.
    """
    def __init__(self, path: Optional[str], force: bool, config_path: Optional[str]):
        self.config_manager = ConfigManager(path or config_path)
        self.target_path: str = self.config_manager.config_file_path
        self.force: bool = force
        self.error_messages: List[str] = []

    def is_valid(self) -> bool:
        if os.path.exists(self.target_path) and not self.force:
            self.error_messages.append(
                f"Config file already exists at {self.target_path}. Use --force to overwrite it."
            )
        return not self.error_messages
