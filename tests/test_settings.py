from __future__ import annotations

import os

import pytest

from llm_completion.core.settings import load_dotenv_if_present, load_settings


def test_load_settings_default(monkeypatch) -> None:
    monkeypatch.delenv("LLM_COMPLETION_TEXT_PREVIEW_CHARS", raising=False)
    assert load_settings().text_preview_chars == 60


def test_load_settings_from_env(monkeypatch) -> None:
    monkeypatch.setenv("LLM_COMPLETION_TEXT_PREVIEW_CHARS", "12")
    assert load_settings().text_preview_chars == 12


@pytest.mark.parametrize("value", ["0", "-3", "wide"])
def test_load_settings_rejects_invalid(monkeypatch, value) -> None:
    monkeypatch.setenv("LLM_COMPLETION_TEXT_PREVIEW_CHARS", value)
    with pytest.raises(ValueError, match="LLM_COMPLETION_TEXT_PREVIEW_CHARS"):
        load_settings()


def test_load_dotenv_if_present_loads_from_cwd(tmp_path, monkeypatch) -> None:
    (tmp_path / ".env").write_text("LLM_COMPLETION_TEXT_PREVIEW_CHARS=7\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("LLM_COMPLETION_TEXT_PREVIEW_CHARS", "unset")
    monkeypatch.delenv("LLM_COMPLETION_TEXT_PREVIEW_CHARS")

    loaded = load_dotenv_if_present()

    assert loaded is not None
    assert os.environ.get("LLM_COMPLETION_TEXT_PREVIEW_CHARS") == "7"
    assert load_settings().text_preview_chars == 7


def test_load_dotenv_if_present_does_not_override_existing_env(tmp_path, monkeypatch) -> None:
    (tmp_path / ".env").write_text("LLM_COMPLETION_TEXT_PREVIEW_CHARS=7\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("LLM_COMPLETION_TEXT_PREVIEW_CHARS", "40")

    load_dotenv_if_present()

    assert os.environ.get("LLM_COMPLETION_TEXT_PREVIEW_CHARS") == "40"


def test_load_dotenv_if_present_explicit_file(tmp_path, monkeypatch) -> None:
    (tmp_path / ".env").write_text("LLM_COMPLETION_TEXT_PREVIEW_CHARS=7\n", encoding="utf-8")
    env_file = tmp_path / "ci.env"
    env_file.write_text("LLM_COMPLETION_TEXT_PREVIEW_CHARS=25\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("LLM_COMPLETION_TEXT_PREVIEW_CHARS", "unset")
    monkeypatch.delenv("LLM_COMPLETION_TEXT_PREVIEW_CHARS")

    loaded = load_dotenv_if_present(env_file)

    assert loaded == env_file.resolve()
    assert load_settings().text_preview_chars == 25


def test_load_dotenv_if_present_missing_explicit_file_raises(tmp_path) -> None:
    with pytest.raises(ValueError, match="env file not found"):
        load_dotenv_if_present(tmp_path / "missing.env")
