"""
Config Manager

Loads config.yaml (with include: support) and turns it into an AppConfig.
Falls back to built-in defaults if the file is missing or unreadable.
"""

import yaml
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from sigil.hardware.reader.scripted_reader import parse_script_entry
from sigil.models.color import Color
from sigil.models.config import AppConfig, DisplayConfig, ReaderConfig, LoggingConfig
from sigil.models.enums import DisplayType, ReaderType, LogLevel, LogCategory
from sigil.models.errors import ConfigError
from sigil.utils.enum_helper import EnumHelper
from sigil.utils.logger import get_logger

log = get_logger().for_category(LogCategory.CONFIG)

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent / "config" / "config.yaml"


class ConfigManager:
    """
    Main configuration manager

    Example:
        manager = ConfigManager()
        config = manager.load()

        config.fps               # 60
        config.display.type      # DisplayType.TERMINAL
        config.reader.script     # ("04:1A:2B:3C:05:10:07 *20", ...)
    """

    def __init__(self, config_path: Optional[Union[str, Path]] = None):
        self.config_path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
        self.data: Dict[str, Any] = {}
        self.config: AppConfig = AppConfig()

    def load(self) -> AppConfig:
        """
        Load YAML configuration

        Process:
        1. Load main config.yaml
        2. If it has 'include:' list, load and merge those files
        3. Parse into AppConfig
        4. Fall back to built-in defaults on any failure

        Returns:
            Parsed AppConfig
        """
        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                main_config = yaml.safe_load(f) or {}

            if 'include' in main_config:
                log.info("Using include-based configuration")
                self.data = self._load_with_includes(main_config.pop('include'), self.config_path.parent)
                self.data.update(main_config)
            else:
                self.data = main_config

            self.config = self.parse(self.data)
            log.info("Configuration loaded", path=str(self.config_path))

        except (OSError, yaml.YAMLError, ConfigError) as ex:
            log.error("Failed to load config", path=str(self.config_path), error=str(ex), error_type=type(ex).__name__)
            log.warn("Falling back to built-in defaults")
            self.data = {}
            self.config = AppConfig()

        return self.config

    def _load_with_includes(self, include_list: List[str], config_dir: Path) -> Dict:
        """
        Load and merge multiple YAML files from include list

        Args:
            include_list: List of filenames to load (e.g., ["display.yaml", "reader.yaml"])
            config_dir: Directory containing config files
        """
        merged = {}

        for filename in include_list:
            filepath = config_dir / filename
            try:
                with open(filepath, 'r', encoding='utf-8') as f:
                    file_data = yaml.safe_load(f)
                    if file_data:
                        merged.update(file_data)
                        log.info(f"Loaded {filename}", keys=str(list(file_data.keys())))
            except FileNotFoundError:
                log.error(f"File not found: {filename}")
                raise

        return merged

    # ------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------

    @classmethod
    def parse(cls, data: Dict[str, Any]) -> AppConfig:
        """
        Build AppConfig from a raw dict.

        Raises:
            ConfigError: a section or value has the wrong type or range
        """
        if not isinstance(data, dict):
            raise ConfigError(f"Config root must be a mapping, got {type(data).__name__}")

        try:
            defaults = AppConfig()
            fps = int(data.get("fps", defaults.fps))
            if not 1 <= fps <= 240:
                raise ConfigError(f"fps must be 1-240, got {fps}")

            return AppConfig(
                fps=fps,
                error_color=cls._parse_color(data.get("error_color"), defaults.error_color),
                display=cls._parse_display(cls._section(data, "display")),
                reader=cls._parse_reader(cls._section(data, "reader")),
                logging=cls._parse_logging(cls._section(data, "logging")),
            )
        except (TypeError, ValueError) as ex:
            raise ConfigError(str(ex)) from ex

    @staticmethod
    def _section(data: Dict[str, Any], name: str) -> Dict[str, Any]:
        section = data.get(name) or {}
        if not isinstance(section, dict):
            raise ConfigError(f"Section '{name}' must be a mapping")
        return section

    @staticmethod
    def _parse_color(value: Any, default: Color) -> Color:
        if value is None:
            return default
        if isinstance(value, int):
            return Color.from_packed(value)
        if isinstance(value, str):
            return Color.from_packed(int(value.lstrip("#"), 16))
        if isinstance(value, (list, tuple)) and len(value) == 3:
            return Color.from_rgb(*(int(v) for v in value))
        raise ConfigError(f"Invalid color: {value!r}")

    @staticmethod
    def _parse_display(section: Dict[str, Any]) -> DisplayConfig:
        d = DisplayConfig()
        brightness = int(section.get("brightness", d.brightness))
        if not 0 <= brightness <= 255:
            raise ConfigError(f"display.brightness must be 0-255, got {brightness}")
        return DisplayConfig(
            type=EnumHelper.to_enum(DisplayType, section.get("type", d.type)),
            gpio_pin=int(section.get("gpio_pin", d.gpio_pin)),
            color_order=str(section.get("color_order", d.color_order)).upper(),
            brightness=brightness,
            serpentine=bool(section.get("serpentine", d.serpentine)),
            flip_x=bool(section.get("flip_x", d.flip_x)),
        )

    @staticmethod
    def _parse_reader(section: Dict[str, Any]) -> ReaderConfig:
        d = ReaderConfig()
        poll = int(section.get("poll_interval_ms", d.poll_interval_ms))
        if poll < 0:
            raise ConfigError(f"reader.poll_interval_ms must be >= 0, got {poll}")
        script = section.get("script") or []
        if not isinstance(script, list):
            raise ConfigError("reader.script must be a list")
        script = tuple(None if item is None else str(item) for item in script)
        for entry in script:
            # Raises IdentifierError / ValueError for a bad uid or repeat count
            parse_script_entry(entry)
        return ReaderConfig(
            type=EnumHelper.to_enum(ReaderType, section.get("type", d.type)),
            poll_interval_ms=poll,
            script=script,
            repeat=bool(section.get("repeat", d.repeat)),
            i2c_address=int(section.get("i2c_address", d.i2c_address)),
        )

    @staticmethod
    def _parse_logging(section: Dict[str, Any]) -> LoggingConfig:
        d = LoggingConfig()
        return LoggingConfig(
            level=EnumHelper.to_enum(LogLevel, section.get("level", d.level)),
            colors=bool(section.get("colors", d.colors)),
        )
