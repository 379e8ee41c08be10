"""Configuration loading."""

from albsync.config.loader import load_config_file, load_config_files

__all__ = ["load_config_file", "load_config_files"]
