from __future__ import annotations

import importlib.util
import sys

import pytest

import gemini_gateway.main as main_mod
import gemini_gateway.config as config_mod
from gemini_gateway.config import Config, check_config


def _cfg(**overrides):
    return type("Cfg", (Config,), overrides)


def test_check_config_ok() -> None:
    check = check_config(_cfg(GEMINI_API_KEY="abc", PORT="3000"))
    assert check.ok
    assert check.error is None


@pytest.mark.parametrize("key", ["", "   ", None])
def test_check_config_missing_key(key) -> None:
    check = check_config(_cfg(GEMINI_API_KEY=key, PORT="3000"))
    assert not check.ok
    assert "GEMINI_API_KEY" in check.error


@pytest.mark.parametrize("port", ["abc", "0", "70000"])
def test_check_config_bad_port(port) -> None:
    check = check_config(_cfg(GEMINI_API_KEY="abc", PORT=port))
    assert not check.ok
    assert "PORT" in check.error


def test_main_exits_before_building_app(monkeypatch) -> None:
    monkeypatch.setattr(main_mod.Config, "GEMINI_API_KEY", "")

    def _fail(*args, **kwargs):
        raise AssertionError("app must not be built without a credential")

    monkeypatch.setattr(main_mod, "create_app", _fail)
    with pytest.raises(SystemExit) as ei:
        main_mod.main()
    assert ei.value.code == 1


def test_main_runs_server_with_configured_port(monkeypatch) -> None:
    monkeypatch.setattr(main_mod.Config, "GEMINI_API_KEY", "abc")
    monkeypatch.setattr(main_mod.Config, "PORT", "4321")
    ran = {}

    class _App:
        def run(self, **kwargs) -> None:
            ran.update(kwargs)

    monkeypatch.setattr(main_mod, "create_app", lambda cfg: _App())
    main_mod.main()
    assert ran["port"] == 4321
    assert ran["threaded"] is True


def _load_config_module(monkeypatch, **env):
    """Import a fresh copy of the config module under the given environment."""
    for name in ("PORT", "TEMPERATURE", "MAX_UPLOAD_MB"):
        monkeypatch.delenv(name, raising=False)
    for name, value in env.items():
        monkeypatch.setenv(name, value)
    spec = importlib.util.spec_from_file_location("_fresh_config", config_mod.__file__)
    module = importlib.util.module_from_spec(spec)
    monkeypatch.setitem(sys.modules, spec.name, module)
    spec.loader.exec_module(module)
    return module


def test_empty_port_falls_back_to_default(monkeypatch) -> None:
    fresh = _load_config_module(monkeypatch, GEMINI_API_KEY="k", PORT="")
    assert fresh.Config.PORT == "3000"
    assert fresh.check_config(fresh.Config).ok


def test_bad_numbers_fail_the_check_not_the_import(monkeypatch) -> None:
    fresh = _load_config_module(monkeypatch, GEMINI_API_KEY="k", TEMPERATURE="warm")
    check = fresh.check_config(fresh.Config)
    assert not check.ok
    assert "TEMPERATURE" in check.error

    fresh = _load_config_module(monkeypatch, GEMINI_API_KEY="k", TEMPERATURE="0.7", MAX_UPLOAD_MB="lots")
    check = fresh.check_config(fresh.Config)
    assert not check.ok
    assert "MAX_UPLOAD_MB" in check.error
