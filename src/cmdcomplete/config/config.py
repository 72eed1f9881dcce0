# cmdcomplete.config.config - Configuration management
"""
Configuration file loading and management.
"""
from dataclasses import dataclass
from pathlib import Path
from typing import Optional
import os
import sys

# Use tomli for Python < 3.11, tomllib for 3.11+
if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib


@dataclass
class Config:
    """
    cmdcomplete configuration.

    Configuration file locations (in order of precedence):
    1. --config argument
    2. .cmdcomplete.toml in current directory
    3. ~/.config/cmdcomplete/config.toml
    """

    # Completion settings
    unix_style: bool = os.name != "nt"
    console_width: int = 80
    append_space: bool = True

    # REPL settings
    history_file: Optional[Path] = None
    prompt: str = "cmd> "
    complete_while_typing: bool = False

    # Logging
    debug: bool = False

    @classmethod
    def from_dict(cls, data: dict) -> "Config":
        """
        Create config from dictionary.

        Args:
            data: Configuration dictionary

        Returns:
            Config instance
        """
        config = cls()

        # Completion settings
        completion = data.get("completion", {})
        if "unix_style" in completion:
            config.unix_style = bool(completion["unix_style"])
        if "console_width" in completion:
            config.console_width = int(completion["console_width"])
        if "append_space" in completion:
            config.append_space = bool(completion["append_space"])

        # REPL settings
        repl = data.get("repl", {})
        if repl.get("history_file"):
            config.history_file = Path(repl["history_file"]).expanduser()
        if "prompt" in repl:
            config.prompt = str(repl["prompt"])
        if "complete_while_typing" in repl:
            config.complete_while_typing = bool(repl["complete_while_typing"])

        # Logging
        logging_section = data.get("logging", {})
        if "debug" in logging_section:
            config.debug = bool(logging_section["debug"])

        return config

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "completion": {
                "unix_style": self.unix_style,
                "console_width": self.console_width,
                "append_space": self.append_space,
            },
            "repl": {
                "history_file": str(self.history_file) if self.history_file else None,
                "prompt": self.prompt,
                "complete_while_typing": self.complete_while_typing,
            },
            "logging": {
                "debug": self.debug,
            },
        }


def load_config(config_path: Optional[Path] = None) -> Config:
    """
    Load configuration.

    Args:
        config_path: Optional explicit config path

    Returns:
        Config instance
    """
    # Try explicit path first
    if config_path and config_path.exists():
        return _load_from_file(config_path)

    # Try current directory
    local_config = Path(".cmdcomplete.toml")
    if local_config.exists():
        return _load_from_file(local_config)

    # Try user config directory
    user_config = Path.home() / ".config" / "cmdcomplete" / "config.toml"
    if user_config.exists():
        return _load_from_file(user_config)

    # Return defaults
    return Config()


def _load_from_file(path: Path) -> Config:
    """Load config from TOML file."""
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
        return Config.from_dict(data)
    except Exception as e:
        print(f"Warning: Failed to load config from {path}: {e}")
        return Config()
