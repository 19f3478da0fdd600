"""Backends for generating artifacts from logic catalogs (Python enum source, etc.)."""

from .enum_source import generate_logic_enum, save_logic_enum

__all__ = ["generate_logic_enum", "save_logic_enum"]
