"""Configuration module for editpad."""

from .config_enums import LogLevelEnum
from .main_config import (
	EditorSettings,
	EditpadConfig,
	GeneralSettings,
	SearchSettings,
)
from .main_config import get_editpad_config as conf

__all__ = [
	"conf",
	"EditorSettings",
	"EditpadConfig",
	"GeneralSettings",
	"LogLevelEnum",
	"SearchSettings",
]
