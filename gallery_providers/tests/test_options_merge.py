from __future__ import annotations

import pytest
from pydantic import ValidationError

from gallery_providers.base.dto.options import (
    OPTION_FIELDS,
    ChatOptions,
    GalleryChatOptions,
    coerce_prompt_options,
    merge_options,
    options_from_mapping,
    to_gallery_options,
)


def test_runtime_field_wins_default_kept_otherwise() -> None:
    defaults = GalleryChatOptions(temperature=0.7)
    merged = merge_options(GalleryChatOptions(top_p=0.5), defaults)
    assert merged.temperature == 0.7
    assert merged.top_p == 0.5


def test_merge_without_runtime_returns_defaults() -> None:
    defaults = GalleryChatOptions(temperature=0.7, top_p=0.8, user="svc")
    assert merge_options(None, defaults) == defaults


def test_merge_covers_every_option_field() -> None:
    runtime = GalleryChatOptions(
        temperature=0.1,
        top_p=0.2,
        max_tokens=3,
        answer_num=4,
        presence_penalty=-0.5,
        user="u",
        with_prompt=False,
    )
    merged = merge_options(runtime, GalleryChatOptions(temperature=0.9, top_p=0.9))
    for name in OPTION_FIELDS:
        assert getattr(merged, name) == getattr(runtime, name)


def test_false_is_a_set_value() -> None:
    merged = merge_options(GalleryChatOptions(with_prompt=False), GalleryChatOptions(with_prompt=True))
    assert merged.with_prompt is False


def test_chat_options_convert_to_gallery() -> None:
    converted = to_gallery_options(ChatOptions(temperature=0.3, top_p=0.4, top_k=10))
    assert converted == GalleryChatOptions(temperature=0.3, top_p=0.4)


def test_coerce_mapping_dispatches_on_kind() -> None:
    assert isinstance(coerce_prompt_options({"kind": "chat", "top_k": 3}), ChatOptions)
    assert isinstance(coerce_prompt_options({"max_tokens": 3}), GalleryChatOptions)


def test_coerce_rejects_unknown_types() -> None:
    with pytest.raises(ValueError, match="Prompt options are not of type ChatOptions: str"):
        coerce_prompt_options("temperature=1")


@pytest.mark.parametrize(
    "values",
    [
        {"temperature": -0.1},
        {"top_p": 1.5},
        {"max_tokens": 0},
        {"answer_num": 0},
        {"presence_penalty": 3},
        {"unknown": 1},
    ],
)
def test_invalid_values_rejected(values) -> None:
    with pytest.raises(ValidationError):
        GalleryChatOptions(**values)


def test_options_are_immutable() -> None:
    opts = GalleryChatOptions(temperature=0.2)
    with pytest.raises(ValidationError):
        opts.temperature = 0.3  # type: ignore[misc]


def test_options_from_mapping_ignores_unrelated_keys() -> None:
    opts = options_from_mapping({"temperature": "0.25", "retry": {"max_attempts": 2}, "top_p": None})
    assert opts == GalleryChatOptions(temperature=0.25)
