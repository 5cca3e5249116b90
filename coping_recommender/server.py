"""
FastAPI server for the coping recommender.

This module exposes the recommendation engine over HTTP. Clients post raw
mood check-ins and chat messages, most recent first, and receive the full
catalog ranked and explained.
"""

import logging
from collections.abc import AsyncGenerator, Sequence
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .catalog import load_catalog
from .context import build_context
from .engine import RecommendationEngine
from .errors import InvalidInputError
from .models import (
    ChatMessage,
    CheckIn,
    CopingTool,
    RecommendationContext,
    RecommendedTool,
    ScoreBreakdown,
)
from .settings import get_settings

logger = logging.getLogger(__name__)


# API Request/Response Schemas
class ContextRequest(BaseModel):
    """Raw signals for one recommendation request."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    check_ins: list[CheckIn] = Field(
        default_factory=list, description="Mood check-ins, most recent first"
    )
    chat_messages: list[ChatMessage] = Field(
        default_factory=list, description="Chat messages, most recent first"
    )


class RecommendationRequest(ContextRequest):
    """Payload for recommendation requests."""

    include_breakdown: bool = Field(False, description="Include per-component scores")
    limit: int | None = Field(None, ge=1, description="Return only the top N tools")


class RecommendationResponse(BaseModel):
    """Response model for the recommendations endpoint."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    context: RecommendationContext = Field(..., description="Context the ranking used")
    recommendations: list[RecommendedTool] = Field(..., description="Ranked tools")
    breakdown: dict[str, ScoreBreakdown] | None = Field(
        None, description="Score components keyed by tool id"
    )


def create_app(
    catalog: Sequence[CopingTool], engine: RecommendationEngine | None = None
) -> FastAPI:
    """
    Create a FastAPI application serving the given catalog.

    Args:
        catalog: The coping tools to rank
        engine: The engine to rank with (defaults to the heuristic engine)

    Returns:
        Configured FastAPI application
    """
    catalog = tuple(catalog)
    engine = engine or RecommendationEngine()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Lifespan context manager for FastAPI application."""
        logger.info("Serving %d coping tools", len(catalog))
        yield

    app = FastAPI(
        title="Coping Recommender",
        description="Explainable coping technique recommendations",
        version="0.1.0",
        lifespan=lifespan,
    )

    @app.exception_handler(InvalidInputError)
    async def invalid_input_handler(request: Request, exc: InvalidInputError) -> JSONResponse:
        return JSONResponse(status_code=422, content={"detail": str(exc)})

    @app.get("/")
    async def root() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "ok", "service": "coping-recommender"}

    @app.get("/tools")
    async def list_tools() -> list[CopingTool]:
        """Return the catalog in catalog order."""
        return list(catalog)

    @app.post("/context")
    async def context(request: ContextRequest) -> RecommendationContext:
        """
        Build the recommendation context for a set of raw signals.

        Useful for checking which mood and keywords a request resolves to.
        """
        return build_context(request.check_ins, request.chat_messages)

    @app.post("/recommendations")
    async def recommendations(request: RecommendationRequest) -> RecommendationResponse:
        """
        Rank the catalog for the given check-ins and chat messages.

        Args:
            request: Raw signals plus presentation options

        Returns:
            The context, the ranked tools, and optionally the score breakdown
        """
        if request.include_breakdown and getattr(engine.scorer, "breakdown", None) is None:
            raise HTTPException(
                status_code=422,
                detail=f"{type(engine.scorer).__name__} does not provide score breakdowns",
            )

        ctx = build_context(request.check_ins, request.chat_messages)
        ranked = engine.recommend(catalog, ctx)
        if request.limit is not None:
            ranked = ranked[: request.limit]

        breakdown = None
        if request.include_breakdown:
            shown = {tool.id for tool in ranked}
            breakdown = {
                tool_id: parts
                for tool_id, parts in engine.breakdown(catalog, ctx).items()
                if tool_id in shown
            }

        return RecommendationResponse(context=ctx, recommendations=ranked, breakdown=breakdown)

    return app


# Default app instance for uvicorn
app = create_app(load_catalog(get_settings().catalog_path))


def main() -> None:
    """Main entry point for the server."""
    import uvicorn

    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(
        "coping_recommender.server:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_level=settings.log_level,
    )


if __name__ == "__main__":
    main()
