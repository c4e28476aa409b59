"""Dynamic version read from langsync.properties."""

import configparser
import pathlib

_config = configparser.ConfigParser()
_config.read(pathlib.Path(__file__).parent / "resources" / "langsync.properties")
__version__ = _config.get("Langsync", "version", fallback="1.0.0+fallback")
