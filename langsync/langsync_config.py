"""
langsync Configuration Service
"""

import configparser
import logging
import pathlib

from singleton_decorator import singleton

from . import constants


@singleton
class LangsyncConfig:
    """
    Configuration Class that loads in the appropriate configuration file
    and provides the contents for the running program
    """

    logger: logging.Logger
    config_parser: configparser.ConfigParser
    langsync_version: str
    use_cache: bool
    accept_language: str
    timeout: int
    retries: int
    max_workers: int

    def __init__(self, config_path: pathlib.Path = constants.CONFIG_PATH):
        self.logger = logging.getLogger(__name__)
        self.config_parser = configparser.ConfigParser()
        self.__load_config_from_local_file(config_path)

        try:
            self.langsync_version = self.config_parser.get("Langsync", "version")
        except (configparser.NoSectionError, configparser.NoOptionError):
            self.logger.warning(
                "Key 'version' is missing from Section 'Langsync' in config file"
            )
            self.langsync_version = (
                f"1.X.X+{constants.LANGSYNC_BUILD_DATE.replace('-', '')}"
            )

        self.use_cache = self.get_boolean("Langsync", "use_cache", False)
        self.accept_language = self.get(
            "Network", "accept_language", constants.DEFAULT_ACCEPT_LANGUAGE
        )
        self.timeout = self.get_int("Network", "timeout", constants.DEFAULT_TIMEOUT)
        self.retries = self.get_int("Network", "retries", constants.DEFAULT_RETRIES)
        self.max_workers = self.get_int(
            "Network", "max_workers", constants.DEFAULT_MAX_WORKERS
        )

    def __load_config_from_local_file(self, file_path: pathlib.Path) -> None:
        """
        Load local file from resources as langsync configuration file
        :param file_path: Path to Configuration file
        """
        if not file_path.is_file():
            self.logger.warning(f"{file_path} not found, using built-in defaults")
            return

        self.logger.debug(f"Loading configuration from {file_path}")
        self.config_parser.read(str(file_path), encoding="utf-8")

    def get(self, section: str, option: str, fallback: str = "") -> str:
        """
        Get a specific value from configuration
        :param section: Section header
        :param option: Key in section
        :param fallback: Default value to use if key not found in section
        :returns Configuration value to use
        """
        if self.has_option(section, option):
            return self.config_parser.get(section, option, fallback=fallback)
        return fallback

    def get_boolean(self, section: str, option: str, fallback: bool = False) -> bool:
        """
        Get a specific value from configuration
        :param section: Section header
        :param option: Key in section
        :param fallback: Default value to use if key not found in section
        :returns Configuration value to use (as a Boolean)
        """
        if self.has_option(section, option):
            return self.config_parser.getboolean(section, option, fallback=fallback)
        return fallback

    def get_int(self, section: str, option: str, fallback: int = 0) -> int:
        """
        Get a specific value from configuration
        :param section: Section header
        :param option: Key in section
        :param fallback: Default value to use if key not found or not a number
        :returns Configuration value to use (as an Integer)
        """
        if not self.has_option(section, option):
            return fallback

        try:
            return self.config_parser.getint(section, option)
        except ValueError:
            self.logger.warning(
                f"[{section}] {option} is not an integer, using {fallback}"
            )
            return fallback

    def has_option(self, section: str, option: str) -> bool:
        """
        Check if Configuration has a specific option in a specific section
        and has a defined value (ala not VAR=)
        :param section: Section header to find
        :param option: Option to find in section
        :return Does option exist in section
        """
        return (
            self.config_parser.has_option(section, option)
            and len(str(self.config_parser.get(section, option))) > 0
        )
