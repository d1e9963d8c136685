from __future__ import annotations

import json

from gallery_providers.config import DEFAULTS, get_provider_config, reset_config_cache
from gallery_providers.config.env import env_var_name, is_placeholder, read_env
from gallery_providers.gallery.helpers import build_retry_config, default_options_from_config
from gallery_providers.base.logging import LogContext, get_logger


def test_defaults_only():
    cfg = get_provider_config("gallery")
    assert cfg == DEFAULTS["gallery"]
    assert cfg is not DEFAULTS["gallery"]


def test_unknown_provider_is_empty():
    assert get_provider_config("nobody") == {}


def test_json_file_layer(monkeypatch, tmp_path):
    path = tmp_path / "providers.json"
    path.write_text(json.dumps({"gallery": {"max_tokens": 512, "retry": {"max_attempts": 5}}}), encoding="utf-8")
    monkeypatch.setenv("PROVIDERS_CONFIG_FILE", str(path))
    reset_config_cache()

    cfg = get_provider_config("gallery")

    assert cfg["max_tokens"] == 512
    assert cfg["temperature"] == 0.7
    assert cfg["retry"] == {"max_attempts": 5, "delay_base": 2.0}


def test_yaml_file_layer(monkeypatch, tmp_path):
    path = tmp_path / "providers.yaml"
    path.write_text("gallery:\n  top_p: 0.3\n  user: svc-account\n", encoding="utf-8")
    monkeypatch.setenv("PROVIDERS_CONFIG_FILE", str(path))
    reset_config_cache()

    cfg = get_provider_config("gallery")

    assert cfg["top_p"] == 0.3
    assert cfg["user"] == "svc-account"


def test_env_beats_file_and_overrides_beat_env(monkeypatch, tmp_path):
    path = tmp_path / "providers.json"
    path.write_text(json.dumps({"gallery": {"temperature": 0.2}}), encoding="utf-8")
    monkeypatch.setenv("PROVIDERS_CONFIG_FILE", str(path))
    monkeypatch.setenv("GALLERY_TEMPERATURE", "0.4")
    monkeypatch.setenv("GALLERY_RETRY_DELAY_BASE", "1.5")
    reset_config_cache()

    assert get_provider_config("gallery")["temperature"] == "0.4"
    cfg = get_provider_config("gallery", {"temperature": 0.9, "top_p": None})
    assert cfg["temperature"] == 0.9
    assert cfg["top_p"] == 0.8
    assert cfg["retry"] == {"max_attempts": 3, "delay_base": "1.5"}


def test_dotenv_file_loaded(monkeypatch, tmp_path):
    dotenv = tmp_path / ".env"
    dotenv.write_text("# local settings\nGALLERY_MAX_TOKENS='128'\n\nNOT A PAIR\n", encoding="utf-8")
    monkeypatch.setenv("DOTENV_FILE", str(dotenv))
    monkeypatch.delenv("GALLERY_MAX_TOKENS", raising=False)
    reset_config_cache()

    assert get_provider_config("gallery")["max_tokens"] == "128"


def test_env_helpers(monkeypatch):
    assert env_var_name(" gallery ", "TOP_P") == "GALLERY_TOP_P"
    monkeypatch.setenv("GALLERY_USER", "")
    assert read_env("gallery", "USER") is None
    assert is_placeholder("CHANGEME-key")
    assert not is_placeholder(None)


def test_config_builds_typed_options_and_retry(monkeypatch):
    monkeypatch.setenv("GALLERY_ANSWER_NUM", "2")
    monkeypatch.setenv("GALLERY_WITH_PROMPT", "false")
    monkeypatch.setenv("GALLERY_RETRY_MAX_ATTEMPTS", "4")
    cfg = get_provider_config("gallery")

    opts = default_options_from_config(cfg)
    retry_cfg = build_retry_config(get_logger("providers.test"), LogContext(provider="gallery"), cfg)

    assert opts.answer_num == 2
    assert opts.with_prompt is False
    assert opts.temperature == 0.7
    assert retry_cfg.max_attempts == 4
    assert retry_cfg.delay_base == 2.0
    assert retry_cfg.attempt_logger is not None
