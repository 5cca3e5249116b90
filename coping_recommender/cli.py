"""
Command-line interface tools for the coping recommender.
"""

import asyncio
import json
from collections.abc import Coroutine
from datetime import datetime
from pathlib import Path
from typing import Any

import httpx
import typer

from .catalog import load_catalog
from .context import build_context
from .engine import RecommendationEngine
from .errors import CopingRecommenderError
from .models import ChatMessage, RecommendedTool, ScoreBreakdown

DEFAULT_BASE_URL = "http://localhost:8000"

app = typer.Typer(help="Coping recommender CLI tools")


# MARK: - CLI Entry Points


def cli_recommend() -> None:
    """Entry point for coping-recommend CLI command."""
    app()


# MARK: - Commands


@app.command()
def recommend(
    mood: str | None = typer.Option(None, "--mood", help="Mood reported today"),
    messages: list[str] | None = typer.Option(
        None, "--message", "-m", help="Recent chat message, most recent first (repeatable)"
    ),
    catalog_path: Path | None = typer.Option(
        None, "--catalog", "-c", help="Catalog JSON file (defaults to the built-in catalog)"
    ),
    limit: int | None = typer.Option(None, "--limit", "-n", min=1, help="Show only the top N"),
    json_output: bool = typer.Option(False, "--json", "-j", help="Output raw JSON"),
    show_breakdown: bool = typer.Option(
        False, "--breakdown", "-b", help="Show per-component scores"
    ),
) -> None:
    """Rank the coping tool catalog locally."""
    try:
        catalog = load_catalog(catalog_path)
        context = build_context(_check_ins(mood), _chat_messages(messages))
    except CopingRecommenderError as e:
        print(f"Error: {e}")
        raise typer.Exit(1)

    engine = RecommendationEngine()
    ranked = engine.recommend(catalog, context)
    if limit is not None:
        ranked = ranked[:limit]
    breakdown = engine.breakdown(catalog, context) if show_breakdown else None

    if json_output:
        payload: dict[str, Any] = {
            "context": context.model_dump(mode="json", by_alias=True),
            "recommendations": [t.model_dump(mode="json", by_alias=True) for t in ranked],
        }
        if breakdown is not None:
            payload["breakdown"] = {
                tool.id: breakdown[tool.id].model_dump(mode="json") for tool in ranked
            }
        print(json.dumps(payload, indent=2))
        return

    _print_ranking(ranked, breakdown)


@app.command()
def tools(
    catalog_path: Path | None = typer.Option(
        None, "--catalog", "-c", help="Catalog JSON file (defaults to the built-in catalog)"
    ),
) -> None:
    """List the coping tool catalog."""
    try:
        catalog = load_catalog(catalog_path)
    except CopingRecommenderError as e:
        print(f"Error: {e}")
        raise typer.Exit(1)

    for tool in catalog:
        print(
            f"{tool.id:<32} {tool.category.value:<10} "
            f"{tool.intensity_level.value:<6} {tool.duration_minutes:>2} min"
        )


@app.command()
def fetch(
    mood: str | None = typer.Option(None, "--mood", help="Mood reported today"),
    messages: list[str] | None = typer.Option(
        None, "--message", "-m", help="Recent chat message, most recent first (repeatable)"
    ),
    limit: int | None = typer.Option(None, "--limit", "-n", min=1, help="Show only the top N"),
    base_url: str = typer.Option(
        DEFAULT_BASE_URL, "--url", "-u", help="Base URL of the recommender service"
    ),
    json_output: bool = typer.Option(False, "--json", "-j", help="Output raw JSON"),
    show_breakdown: bool = typer.Option(
        False, "--breakdown", "-b", help="Show per-component scores"
    ),
) -> None:
    """Fetch recommendations from a running recommender service."""
    body: dict[str, Any] = {
        "checkIns": _check_ins(mood),
        "chatMessages": [{"text": text} for text in messages or ()],
        "includeBreakdown": show_breakdown,
    }
    if limit is not None:
        body["limit"] = limit

    async def _fetch() -> None:
        async with httpx.AsyncClient() as client:
            response = await client.post(f"{base_url}/recommendations", json=body)
            response.raise_for_status()
            result = response.json()

            if json_output:
                print(json.dumps(result, indent=2))
                return

            ranked = [RecommendedTool.model_validate(item) for item in result["recommendations"]]
            breakdown = None
            if result.get("breakdown") is not None:
                breakdown = {
                    tool_id: ScoreBreakdown.model_validate(parts)
                    for tool_id, parts in result["breakdown"].items()
                }
            _print_ranking(ranked, breakdown)

    _run_with_error_handling(_fetch(), base_url)


@app.command()
def serve() -> None:
    """Run the HTTP service using COPING_* settings."""
    from .server import main

    main()


# MARK: - Private Helpers


def _check_ins(mood: str | None) -> list[dict[str, Any]]:
    """Raw check-in records for a mood reported now."""
    if mood is None:
        return []
    return [{"mood": mood, "createdAt": datetime.now().isoformat()}]


def _chat_messages(messages: list[str] | None) -> list[ChatMessage]:
    """Chat records for the given texts, in the order given."""
    return [ChatMessage(text=text) for text in messages or ()]


def _format_breakdown(parts: ScoreBreakdown) -> str:
    return (
        f"[mood {parts.mood}, sentiment {parts.sentiment}, "
        f"intensity {parts.intensity}, duration {parts.duration}]"
    )


def _print_ranking(
    ranked: list[RecommendedTool], breakdown: dict[str, ScoreBreakdown] | None
) -> None:
    """Print one line per tool, highest score first."""
    for tool in ranked:
        line = f"{tool.score:>3}  {tool.title}: {tool.reason}"
        if breakdown is not None and tool.id in breakdown:
            line = f"{line} {_format_breakdown(breakdown[tool.id])}"
        print(line)


def _run_with_error_handling(coro: Coroutine[Any, Any, Any], base_url: str) -> None:
    """Run an async coroutine with standardized error handling."""
    try:
        asyncio.run(coro)
    except KeyboardInterrupt:
        print("\nStopped")
        raise typer.Exit(0)
    except httpx.ConnectError:
        print(f"Error: Could not connect to {base_url}")
        raise typer.Exit(1)
    except httpx.HTTPStatusError as e:
        print(f"Error: HTTP {e.response.status_code}")
        raise typer.Exit(1)
    except Exception as e:
        error_msg = str(e) if str(e) else f"Unknown error of type {type(e).__name__}"
        print(f"Error: {error_msg}")
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
