from configparser import ConfigParser, Error, NoOptionError, NoSectionError
from pathlib import Path
from typing import Any, Union

from .functions import get_safe_path


class Settings:
    """
    Console defaults kept in an INI file, one section per tool.

    Values are read from disk once, at construction, unless ignore_settings
    is set. Changes stay in memory until `write_configuration`.
    """

    def __init__(self, directory, filename, ignore_settings=False):
        if directory is None:
            self._config_file = Path(filename)
        else:
            # Ignored settings are never written, so the directory is not needed.
            self._config_file = Path(
                get_safe_path(directory, create=not ignore_settings)
            ).joinpath(filename)
        self._parser = ConfigParser(interpolation=None)
        if not ignore_settings:
            self.read_configuration()

    @property
    def config_file(self):
        return self._config_file

    def read_configuration(self):
        try:
            self._parser.read(self._config_file, encoding="utf-8")
        except (PermissionError, Error):
            return

    def write_configuration(self):
        try:
            self._config_file.parent.mkdir(parents=True, exist_ok=True)
            with open(self._config_file, "w", encoding="utf-8") as fp:
                self._parser.write(fp)
        except (PermissionError, FileNotFoundError):
            return

    def read_persistent(
        self,
        t: type,
        section: str,
        key: str,
        default: Union[str, int, float, bool] = None,
    ) -> Any:
        """
        Typed value of section/key, or default when it is missing or does not
        parse as t.
        """
        try:
            if t == bool:
                return self._parser.getboolean(section, key)
            return t(self._parser.get(section, key))
        except (NoSectionError, NoOptionError, ValueError):
            return default

    def write_persistent(self, section: str, key: str, value: Union[str, int, float, bool]):
        if not self._parser.has_section(section):
            self._parser.add_section(section)
        self._parser.set(section, key, str(value))
