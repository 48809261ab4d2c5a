from __future__ import annotations

from collections.abc import Mapping

import httpx

from llm_completion.models.completion import CompletionResponse
from llm_completion.models.errors import ShapeMismatchError


def parse_completion_response(response: httpx.Response) -> CompletionResponse:
    """Decode an already-received completions response.

    HTTP errors surface as `httpx.HTTPStatusError`; a body that is not a JSON
    object, or an object of the wrong shape, as `ShapeMismatchError`.
    """

    response.raise_for_status()
    data = response.json()
    if not isinstance(data, Mapping):
        raise ShapeMismatchError("", "object", data)
    return CompletionResponse.from_map(data)
