from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import ClassVar

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic_settings.sources import PydanticBaseSettingsSource, YamlConfigSettingsSource

from adapters.layout.force_directed import ForceDirectedConfig
from domain.services.convert_relations_to_text import RenderConfig
from domain.styles import BorderKind

DEFAULT_CONFIG_PATH = Path("config/app.yaml")
CONFIG_PATH_ENV = "GTC_CONFIG_PATH"


class LayoutSettings(BaseModel):
    iterations: int = Field(default=100, ge=0)
    attraction_strength: float = 1.0
    repulsion_strength: float = 1.0
    seed_columns: int = Field(default=3, ge=1)
    seed_spacing: float = Field(default=5.0, gt=0)

    def to_layout_config(self) -> ForceDirectedConfig:
        return ForceDirectedConfig(
            iterations=self.iterations,
            attraction_strength=self.attraction_strength,
            repulsion_strength=self.repulsion_strength,
            seed_columns=self.seed_columns,
            seed_spacing=self.seed_spacing,
        )


class RenderSettings(BaseModel):
    horizontal_stretch: int = Field(default=4, ge=1)
    merge_reverse_relations: bool = True
    border_kind: BorderKind = BorderKind.BOX

    @field_validator("border_kind", mode="before")
    @classmethod
    def normalize_border_kind(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    def to_render_config(self) -> RenderConfig:
        return RenderConfig(
            horizontal_stretch=self.horizontal_stretch,
            merge_reverse_relations=self.merge_reverse_relations,
            border_kind=self.border_kind,
        )


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="GTC_", env_nested_delimiter="__")

    layout: LayoutSettings = LayoutSettings()
    render: RenderSettings = RenderSettings()
    log_level: str = "WARNING"

    _yaml_path: ClassVar[Path | None] = None

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: object) -> str:
        level = str(value or "WARNING").strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            msg = f"Unknown log level: {value}"
            raise ValueError(msg)
        return level

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        sources: list[PydanticBaseSettingsSource] = [
            init_settings,
            env_settings,
            dotenv_settings,
            file_secret_settings,
        ]
        if cls._yaml_path:
            sources.append(YamlConfigSettingsSource(settings_cls, yaml_file=cls._yaml_path))
        return tuple(sources)


def load_settings(config_path: Path | None = None) -> AppSettings:
    env_path = os.getenv(CONFIG_PATH_ENV)
    resolved_path: Path | None = None

    if config_path is not None:
        resolved_path = config_path
    elif env_path:
        resolved_path = Path(env_path)
    elif DEFAULT_CONFIG_PATH.exists():
        resolved_path = DEFAULT_CONFIG_PATH

    previous = AppSettings._yaml_path
    try:
        if resolved_path is not None:
            if not resolved_path.exists():
                msg = f"Config file not found: {resolved_path}"
                raise FileNotFoundError(msg)
            AppSettings._yaml_path = resolved_path
        return AppSettings()
    finally:
        AppSettings._yaml_path = previous
