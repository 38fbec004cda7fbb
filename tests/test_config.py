"""Tests for library settings and the default icon loader."""

import contextvars

import pytest

from tabler_components import (
    ChoiceIconLoader,
    ComponentArgumentError,
    DictIconLoader,
    FileSystemIconLoader,
    IconComponent,
    IconVariant,
    PackageIconLoader,
    Settings,
    configure,
    get_settings,
    settings_context,
)
from tabler_components.config import default_icon_loader

from .helpers import parse_svg


class TestSettings:
    def test_defaults(self) -> None:
        settings = Settings(icon_loader=DictIconLoader({}))
        assert settings.icon_size == 24
        assert settings.icon_stroke_width == 2
        assert settings.icon_variant is IconVariant.OUTLINE

    def test_variant_coerced(self) -> None:
        settings = Settings(icon_loader=DictIconLoader({}), icon_variant="filled")
        assert settings.icon_variant is IconVariant.FILLED

    @pytest.mark.parametrize(
        "overrides",
        [
            {"icon_variant": "duotone"},
            {"icon_size": 0},
            {"icon_size": -4},
            {"icon_variant": 5},
            {"icon_size": "24"},
            {"icon_size": 12.5},
            {"icon_size": True},
            {"icon_size": None},
            {"icon_stroke_width": 0},
            {"icon_stroke_width": "2"},
            {"icon_stroke_width": False},
        ],
    )
    def test_invalid(self, overrides) -> None:
        with pytest.raises(ComponentArgumentError):
            Settings(icon_loader=DictIconLoader({}), **overrides)

    def test_frozen(self) -> None:
        settings = Settings(icon_loader=DictIconLoader({}))
        with pytest.raises(AttributeError):
            settings.icon_size = 10


class TestDefaultLoader:
    def test_bundled_only(self, monkeypatch) -> None:
        monkeypatch.delenv("TABLER_ICONS_PATH", raising=False)
        assert isinstance(default_icon_loader(), PackageIconLoader)

    def test_env_directory_searched_first(self, monkeypatch, tmp_path) -> None:
        monkeypatch.setenv("TABLER_ICONS_PATH", str(tmp_path))
        loader = default_icon_loader()
        assert isinstance(loader, ChoiceIconLoader)
        first, second = loader.loaders
        assert isinstance(first, FileSystemIconLoader)
        assert first.root == tmp_path
        assert isinstance(second, PackageIconLoader)

    def test_env_not_a_directory(self, monkeypatch, tmp_path, caplog) -> None:
        monkeypatch.setenv("TABLER_ICONS_PATH", str(tmp_path / "missing"))
        assert isinstance(default_icon_loader(), PackageIconLoader)
        assert "is not a directory" in caplog.text

    def test_env_icon_overrides_bundled(self, monkeypatch, tmp_path, fresh_settings) -> None:
        (tmp_path / "outline").mkdir()
        (tmp_path / "outline" / "home.svg").write_text(
            '<svg xmlns="http://www.w3.org/2000/svg" data-source="app"></svg>',
            encoding="utf-8",
        )
        monkeypatch.setenv("TABLER_ICONS_PATH", str(tmp_path))
        svg = parse_svg(IconComponent("home").render())
        assert svg["data-source"] == "app"


class TestConfigure:
    def test_get_settings_cached(self, fresh_settings) -> None:
        assert get_settings() is get_settings()

    def test_configure_replaces_default(self, fresh_settings) -> None:
        loader = DictIconLoader({})
        configured = configure(icon_loader=loader, icon_size=20)
        assert get_settings() is configured
        assert configured.icon_loader is loader
        assert configured.icon_size == 20

    def test_configure_keeps_other_fields(self, fresh_settings) -> None:
        configure(icon_size=20)
        configure(icon_stroke_width=1.5)
        assert get_settings().icon_size == 20
        assert get_settings().icon_stroke_width == 1.5

    @pytest.mark.parametrize(
        "overrides",
        [{"icon_size": 0}, {"icon_size": "24"}, {"icon_size": 12.5}, {"icon_stroke_width": "1"}],
    )
    def test_configure_validates(self, fresh_settings, overrides) -> None:
        before = get_settings()
        with pytest.raises(ComponentArgumentError):
            configure(**overrides)
        assert get_settings() is before

    def test_settings_context_validates(self, icons) -> None:
        with pytest.raises(ComponentArgumentError), settings_context(icon_size="16"):
            pass
        assert get_settings().icon_size == 24

    def test_components_use_configured_defaults(self, fresh_settings, icon_loader) -> None:
        configure(icon_loader=icon_loader, icon_size=32, icon_stroke_width=1.5)
        svg = parse_svg(IconComponent("home").render())
        assert svg["width"] == "32"
        assert svg["stroke-width"] == "1.5"


class TestSettingsContext:
    def test_scoped_override(self, fresh_settings) -> None:
        before = get_settings()
        with settings_context(icon_size=16) as scoped:
            assert get_settings() is scoped
            assert scoped.icon_size == 16
            assert scoped.icon_loader is before.icon_loader
        assert get_settings() is before

    def test_nested(self, icons) -> None:
        with settings_context(icon_size=16):
            with settings_context(icon_variant="filled") as inner:
                assert inner.icon_size == 16
                assert inner.icon_variant is IconVariant.FILLED
            assert get_settings().icon_variant is IconVariant.OUTLINE
        assert get_settings().icon_size == 24

    def test_restored_after_error(self, icons) -> None:
        with pytest.raises(RuntimeError), settings_context(icon_size=16):
            raise RuntimeError("boom")
        assert get_settings().icon_size == 24

    def test_not_visible_in_fresh_context(self, fresh_settings) -> None:
        with settings_context(icon_size=16):
            size = contextvars.Context().run(lambda: get_settings().icon_size)
        assert size == 24
