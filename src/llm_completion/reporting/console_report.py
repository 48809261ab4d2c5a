from __future__ import annotations

from typing import Iterable

from rich.console import Console
from rich.table import Table
from rich.text import Text

from llm_completion.models.completion import CompletionResponse, Usage


def unique_responses(responses: Iterable[CompletionResponse]) -> list[CompletionResponse]:
    # Equality ignores usage, so the first-seen usage wins.
    seen: set[CompletionResponse] = set()
    out: list[CompletionResponse] = []
    for resp in responses:
        if resp in seen:
            continue
        seen.add(resp)
        out.append(resp)
    return out


def render_responses(
    responses: list[CompletionResponse],
    *,
    console: Console,
    preview_chars: int,
) -> None:
    table = Table(title=f"Completions ({len(responses)})")
    table.add_column("id")
    table.add_column("created")
    table.add_column("model")
    table.add_column("choices", justify="right")
    table.add_column("first choice")
    table.add_column("finish")
    table.add_column("tokens (prompt/completion/total)")

    for resp in responses:
        first_text = "-"
        finish = "-"
        if resp.has_choices:
            first = resp.choices[0]
            first_text = _preview(first.text, preview_chars)
            finish = first.finish_reason or "-"
        # Cells hold API data, not rich markup.
        table.add_row(
            Text(resp.id),
            resp.created.isoformat(),
            Text(resp.model),
            str(len(resp.choices)),
            Text(first_text),
            Text(finish),
            _usage_cell(resp.usage),
        )

    console.print(table)


def _preview(text: str, limit: int) -> str:
    text = " ".join(text.split())
    if len(text) <= limit:
        return text
    return text[: max(0, limit - 1)] + "…"


def _usage_cell(usage: Usage | None) -> str:
    if usage is None:
        return "-"
    parts = [usage.prompt_tokens, usage.completion_tokens, usage.total_tokens]
    return "/".join("-" if p is None else str(p) for p in parts)
