from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from llm_completion.models.errors import MISSING, ShapeMismatchError


@dataclass(frozen=True)
class Choice:
    text: str
    index: int
    logprobs: int | None
    finish_reason: str | None

    @classmethod
    def from_map(cls, raw: Mapping[str, Any]) -> Choice:
        _require_mapping(raw)
        return cls(
            text=_required(raw, "text", str, "string"),
            index=_required(raw, "index", int, "integer"),
            logprobs=_optional(raw, "logprobs", int, "integer"),
            finish_reason=_optional(raw, "finishReason", str, "string"),
        )


@dataclass(frozen=True)
class Usage:
    prompt_tokens: int | None
    completion_tokens: int | None
    # Not checked against prompt_tokens + completion_tokens.
    total_tokens: int | None

    @classmethod
    def from_map(cls, raw: Mapping[str, Any]) -> Usage:
        # Wire keys are snake_case, unlike Choice's finishReason.
        _require_mapping(raw)
        return cls(
            prompt_tokens=_optional(raw, "prompt_tokens", int, "integer"),
            completion_tokens=_optional(raw, "completion_tokens", int, "integer"),
            total_tokens=_optional(raw, "total_tokens", int, "integer"),
        )


@dataclass(frozen=True)
class CompletionResponse:
    """A text-completion response body.

    Equality and hashing cover `id`, `created`, `model` and `choices` only.
    Two responses that differ just in `usage` compare equal.
    """

    id: str
    created: datetime
    model: str
    choices: tuple[Choice, ...]
    usage: Usage | None = field(compare=False, repr=False)

    def __init__(
        self,
        *,
        id: str,
        created: datetime,
        model: str,
        choices: Sequence[Choice],
        usage: Usage | None,
    ) -> None:
        object.__setattr__(self, "id", id)
        object.__setattr__(self, "created", created)
        object.__setattr__(self, "model", model)
        object.__setattr__(self, "choices", tuple(choices))
        object.__setattr__(self, "usage", usage)

    @property
    def has_choices(self) -> bool:
        return len(self.choices) > 0

    @classmethod
    def from_map(cls, raw: Mapping[str, Any]) -> CompletionResponse:
        _require_mapping(raw)
        id_ = _required(raw, "id", str, "string")
        created = _parse_created(raw.get("created", MISSING))
        model = _required(raw, "model", str, "string")

        raw_choices = _required(raw, "choices", list, "array")
        choices: list[Choice] = []
        for i, item in enumerate(raw_choices):
            try:
                choices.append(Choice.from_map(item))
            except ShapeMismatchError as e:
                raise e.with_prefix(f"choices[{i}]") from None

        raw_usage = _optional(raw, "usage", Mapping, "object")
        usage = None
        if raw_usage is not None:
            try:
                usage = Usage.from_map(raw_usage)
            except ShapeMismatchError as e:
                raise e.with_prefix("usage") from None

        return cls(
            id=id_,
            created=created,
            model=model,
            choices=choices,
            usage=usage,
        )


def _require_mapping(raw: Any) -> None:
    if not isinstance(raw, Mapping):
        raise ShapeMismatchError("", "object", raw)


def _matches(value: Any, typ: type) -> bool:
    # JSON booleans decode to bool, which is an int subclass.
    if typ is int and isinstance(value, bool):
        return False
    return isinstance(value, typ)


def _required(raw: Mapping[str, Any], key: str, typ: type, expected: str) -> Any:
    if key not in raw:
        raise ShapeMismatchError(key, expected)
    value = raw[key]
    if not _matches(value, typ):
        raise ShapeMismatchError(key, expected, value)
    return value


def _optional(raw: Mapping[str, Any], key: str, typ: type, expected: str) -> Any:
    value = raw.get(key)
    if value is None:
        return None
    if not _matches(value, typ):
        raise ShapeMismatchError(key, f"{expected} or null", value)
    return value


def _parse_created(value: Any) -> datetime:
    if value is MISSING:
        raise ShapeMismatchError("created", "epoch seconds")
    if isinstance(value, datetime):
        return value
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ShapeMismatchError("created", "epoch seconds", value)
    try:
        return datetime.fromtimestamp(value, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        raise ShapeMismatchError("created", "epoch seconds in range", value) from None
