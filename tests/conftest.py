from __future__ import annotations

import os
from collections.abc import Callable, Generator

import pytest

from app.config import AppSettings, LayoutSettings, RenderSettings


def _clear_gtc_env() -> None:
    for key in list(os.environ):
        if key.startswith("GTC_"):
            os.environ.pop(key, None)


_clear_gtc_env()


@pytest.fixture(autouse=True)
def clear_gtc_env() -> Generator[None, None, None]:
    _clear_gtc_env()
    yield
    _clear_gtc_env()


@pytest.fixture
def layout_settings() -> LayoutSettings:
    return LayoutSettings(
        iterations=100,
        attraction_strength=1.0,
        repulsion_strength=1.0,
        seed_columns=3,
        seed_spacing=5.0,
    )


@pytest.fixture
def render_settings() -> RenderSettings:
    return RenderSettings(horizontal_stretch=4, merge_reverse_relations=True)


@pytest.fixture
def app_settings_factory(
    layout_settings: LayoutSettings, render_settings: RenderSettings
) -> Callable[..., AppSettings]:
    def _factory(**render_overrides: object) -> AppSettings:
        return AppSettings(
            layout=layout_settings,
            render=render_settings.model_copy(update=render_overrides),
        )

    return _factory
