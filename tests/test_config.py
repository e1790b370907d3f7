"""Tests for spaserve.config — SPAServerConfig frozen dataclass."""

from pathlib import Path

import pytest

from spaserve.config import SPAServerConfig
from spaserve.errors import ConfigurationError


class TestSPAServerConfig:
    def test_defaults(self) -> None:
        cfg = SPAServerConfig()

        assert cfg.entry == "app:app"
        assert cfg.server_type == "fetch"
        assert cfg.host == "127.0.0.1"
        assert cfg.port == 3000
        assert cfg.production_port is None
        assert cfg.start_server is True
        assert cfg.client_dir == "dist/client"
        assert cfg.base == "/"
        assert cfg.areas is None
        assert cfg.router_type == "browser"
        assert cfg.static_cache_control == "public, max-age=3600"

    def test_frozen(self) -> None:
        cfg = SPAServerConfig()

        with pytest.raises(AttributeError):
            cfg.port = 8080  # type: ignore[misc]

    def test_client_dir_as_path(self) -> None:
        cfg = SPAServerConfig(client_dir=Path("build"))
        assert cfg.client_dir == Path("build")

    def test_unknown_router_type(self) -> None:
        with pytest.raises(ConfigurationError, match="router_type"):
            SPAServerConfig(router_type="memory")


class TestDerived:
    @pytest.mark.parametrize(("router_type", "history"), [("browser", True), ("hash", False), ("none", False)])
    def test_history(self, router_type: str, history: bool) -> None:
        assert SPAServerConfig(router_type=router_type).history is history

    def test_serve_port_falls_back_to_port(self) -> None:
        assert SPAServerConfig(port=4000).serve_port == 4000

    def test_serve_port_prefers_production_port(self) -> None:
        assert SPAServerConfig(port=4000, production_port=80).serve_port == 80


class TestWithOverrides:
    def test_none_values_are_ignored(self) -> None:
        cfg = SPAServerConfig(port=4000).with_overrides(port=None, host="0.0.0.0")
        assert cfg.port == 4000
        assert cfg.host == "0.0.0.0"

    def test_returns_new_instance(self) -> None:
        cfg = SPAServerConfig()
        assert cfg.with_overrides(base="/app") is not cfg
        assert cfg.base == "/"

    def test_overrides_are_validated(self) -> None:
        with pytest.raises(ConfigurationError):
            SPAServerConfig().with_overrides(router_type="memory")
