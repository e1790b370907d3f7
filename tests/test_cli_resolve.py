"""Tests for spaserve.cli._resolve — handler import resolution."""

import types

import pytest

from spaserve.cli._resolve import resolve_app
from spaserve.http.response import Response


async def _handler(request) -> Response:
    return Response("ok")


class _FetchApp:
    async def fetch(self, request) -> Response:
        return Response("ok")


@pytest.fixture
def _fake_app_module(monkeypatch: pytest.MonkeyPatch) -> None:
    """Register a fake module holding handlers on sys.modules."""
    mod = types.ModuleType("_fake_spa_app")
    mod.app = _handler  # type: ignore[attr-defined]
    mod.custom = _FetchApp()  # type: ignore[attr-defined]
    mod.not_an_app = "just a string"  # type: ignore[attr-defined]
    monkeypatch.setitem(__import__("sys").modules, "_fake_spa_app", mod)


@pytest.mark.usefixtures("_fake_app_module")
class TestResolveApp:
    def test_explicit_attribute(self) -> None:
        assert resolve_app("_fake_spa_app:app") is _handler

    def test_object_with_fetch(self) -> None:
        assert isinstance(resolve_app("_fake_spa_app:custom"), _FetchApp)

    def test_default_attribute(self) -> None:
        """Omitting :attr defaults to 'app'."""
        assert resolve_app("_fake_spa_app") is _handler

    def test_missing_module(self) -> None:
        with pytest.raises(ModuleNotFoundError):
            resolve_app("nonexistent_module_xyz:app")

    def test_missing_attribute(self) -> None:
        with pytest.raises(AttributeError):
            resolve_app("_fake_spa_app:does_not_exist")

    def test_wrong_type(self) -> None:
        with pytest.raises(TypeError, match="not a handler"):
            resolve_app("_fake_spa_app:not_an_app")
