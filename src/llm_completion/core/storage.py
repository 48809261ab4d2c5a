from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterator

import yaml

from llm_completion.models.completion import CompletionResponse
from llm_completion.models.errors import ShapeMismatchError


def read_response_bodies(path: Path) -> Iterator[Any]:
    """Yield raw response bodies recorded in `path`.

    `.jsonl` holds one body per line; `.json`, `.yaml` and `.yml` hold either
    a single body or a list of them.
    """

    suffix = path.suffix.lower()
    if suffix == ".jsonl":
        with path.open("r", encoding="utf-8") as f:
            for lineno, line in enumerate(f, start=1):
                line = line.strip()
                if not line:
                    continue
                try:
                    yield json.loads(line)
                except json.JSONDecodeError as e:
                    raise ValueError(f"{path}:{lineno}: invalid JSON: {e.msg}") from e
        return

    if suffix == ".json":
        data = json.loads(path.read_text(encoding="utf-8"))
    elif suffix in {".yaml", ".yml"}:
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8"))
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e
    else:
        raise ValueError(f"Unsupported response file type: {path.suffix or path.name}")

    if isinstance(data, list):
        yield from data
    else:
        yield data


def load_completion_responses(path: Path) -> list[CompletionResponse]:
    responses: list[CompletionResponse] = []
    for i, body in enumerate(read_response_bodies(path)):
        try:
            responses.append(CompletionResponse.from_map(body))
        except ShapeMismatchError as e:
            raise e.with_prefix(f"[{i}]") from None
    return responses
