"""
Recommendation orchestration.

The engine is pure: it owns no state beyond its scorer and explainer, reads
the catalog it is handed, and never mutates catalog entries.
"""

import logging
from collections.abc import Callable, Iterable

from .explanation import explain
from .models import CopingTool, RecommendationContext, RecommendedTool, ScoreBreakdown
from .scoring import HeuristicScorer, Scorer

logger = logging.getLogger(__name__)

Explainer = Callable[[CopingTool, RecommendationContext], str]


class RecommendationEngine:
    """
    Ranks a catalog of coping tools for a recommendation context.

    The scorer is pluggable so the heuristic rules can be swapped for another
    implementation without touching context building or explanations.
    """

    def __init__(self, scorer: Scorer | None = None, explainer: Explainer = explain) -> None:
        self.scorer = scorer or HeuristicScorer()
        self.explainer = explainer

    def recommend(
        self, catalog: Iterable[CopingTool], context: RecommendationContext
    ) -> list[RecommendedTool]:
        """
        Score, explain and rank every tool in the catalog.

        Args:
            catalog: Tools to rank, in catalog order
            context: The request's recommendation context

        Returns:
            One RecommendedTool per catalog entry, highest score first.
            Equal scores keep their catalog order.
        """
        scored = [
            RecommendedTool(
                **{name: getattr(tool, name) for name in CopingTool.model_fields},
                score=self.scorer.score(tool, context),
                reason=self.explainer(tool, context),
            )
            for tool in catalog
        ]
        # list.sort is stable, so ties keep catalog order
        scored.sort(key=lambda item: item.score, reverse=True)

        if scored:
            logger.debug(
                "Ranked %d tools, top=%s (%d)", len(scored), scored[0].id, scored[0].score
            )
        return scored

    def breakdown(
        self, catalog: Iterable[CopingTool], context: RecommendationContext
    ) -> dict[str, ScoreBreakdown]:
        """
        Per-component scores keyed by tool id.

        Only available when the scorer exposes a breakdown.

        Raises:
            TypeError: If the configured scorer cannot break scores down
        """
        breakdown = getattr(self.scorer, "breakdown", None)
        if breakdown is None:
            raise TypeError(f"{type(self.scorer).__name__} does not provide score breakdowns")
        return {tool.id: breakdown(tool, context) for tool in catalog}


_default_engine = RecommendationEngine()


def recommend(
    catalog: Iterable[CopingTool], context: RecommendationContext
) -> list[RecommendedTool]:
    """Rank a catalog with the default heuristic scorer."""
    return _default_engine.recommend(catalog, context)
