import logging
from functools import cache

from pydantic import BaseModel, Field

from editpad.consts import DEFAULT_ENCODING

from .config_enums import LogLevelEnum
from .config_helper import (
	EditpadBaseSettings,
	get_settings_config_dict,
	save_config_file,
)

log = logging.getLogger(__name__)

config_file_name = "config.yml"


class GeneralSettings(BaseModel):
	log_level: LogLevelEnum = Field(default=LogLevelEnum.INFO)


class SearchSettings(BaseModel):
	use_regex: bool = Field(default=False)
	case_sensitive: bool = Field(default=True)


class EditorSettings(BaseModel):
	encoding: str = Field(default=DEFAULT_ENCODING)
	window_width: int = Field(default=600, ge=200)
	window_height: int = Field(default=400, ge=150)


class EditpadConfig(EditpadBaseSettings):
	model_config = get_settings_config_dict(config_file_name)

	general: GeneralSettings = Field(default_factory=GeneralSettings)
	search: SearchSettings = Field(default_factory=SearchSettings)
	editor: EditorSettings = Field(default_factory=EditorSettings)

	def save(self):
		save_config_file(
			self.model_dump(
				mode="json",
				by_alias=True,
				exclude_defaults=True,
				exclude_none=True,
			),
			config_file_name,
		)


@cache
def get_editpad_config() -> EditpadConfig:
	log.debug("Loading editpad config")
	return EditpadConfig()
