"""
End-to-end tests for the recommender API endpoints.
"""

from datetime import datetime

from fastapi.testclient import TestClient

from coping_recommender.catalog import load_catalog
from coping_recommender.engine import RecommendationEngine
from coping_recommender.models import CopingTool, RecommendationContext
from coping_recommender.server import create_app


def _now() -> str:
    return datetime.now().isoformat()


class ConstantScorer:
    def score(self, tool: CopingTool, context: RecommendationContext) -> int:
        return 42


class TestAPI:
    """Integration tests covering the HTTP request/response flow."""

    def setup_method(self):
        """Set up a fresh app over the default catalog for each test."""
        self.catalog = load_catalog()
        self.app = create_app(self.catalog)

    def test_health(self):
        """Test the health check endpoint."""
        with TestClient(self.app) as client:
            response = client.get("/")
            assert response.status_code == 200
            assert response.json() == {"status": "ok", "service": "coping-recommender"}

    def test_tools(self):
        """Test that the catalog is served in catalog order with wire names."""
        with TestClient(self.app) as client:
            response = client.get("/tools")
            assert response.status_code == 200
            tools = response.json()
            assert [t["id"] for t in tools] == [t.id for t in self.catalog]
            assert tools[0]["supportedMoods"] == ["anxious", "frustrated", "neutral"]
            assert tools[0]["intensityLevel"] == "high"
            assert tools[0]["durationMinutes"] == 2

    def test_context(self):
        """Test the context endpoint with caller-ordered records."""
        with TestClient(self.app) as client:
            response = client.post(
                "/context",
                json={
                    "checkIns": [
                        {"mood": "sad", "createdAt": _now()},
                        {"mood": "happy", "createdAt": _now()},
                    ],
                    "chatMessages": [{"text": "Feeling hopeless today"}],
                },
            )
            assert response.status_code == 200
            assert response.json() == {
                "currentMood": "sad",
                "moodIntensity": 6,
                "recentChatSummary": "Feeling hopeless today",
                "chatKeywords": ["hopeless"],
            }

    def test_recommendations_workflow(self):
        """Test the complete flow: empty request, then a crisis request."""
        with TestClient(self.app) as client:
            # 1. No signals: every tool is returned with a neutral context
            empty = client.post("/recommendations", json={})
            assert empty.status_code == 200
            result = empty.json()
            assert result["context"]["currentMood"] is None
            assert result["context"]["moodIntensity"] == 5
            assert len(result["recommendations"]) == len(self.catalog)
            assert result["breakdown"] is None

            # 2. Anxious check-in plus a panic message
            crisis = client.post(
                "/recommendations",
                json={
                    "checkIns": [{"mood": "anxious", "createdAt": _now()}],
                    "chatMessages": [{"text": "I'm having a panic attack, can't breathe"}],
                    "includeBreakdown": True,
                },
            )
            assert crisis.status_code == 200
            result = crisis.json()
            top = result["recommendations"][0]
            assert top["id"] == "box-breathing"
            assert top["score"] == 90
            assert "you mentioned feeling overwhelmed" in top["reason"]
            assert result["breakdown"]["box-breathing"] == {
                "mood": 40,
                "sentiment": 30,
                "intensity": 20,
                "duration": 0,
                "total": 90,
            }
            assert len(result["breakdown"]) == len(self.catalog)

    def test_limit(self):
        """Test that limit trims the ranking and its breakdown."""
        with TestClient(self.app) as client:
            response = client.post(
                "/recommendations",
                json={
                    "checkIns": [{"mood": "anxious", "createdAt": _now()}],
                    "limit": 3,
                    "includeBreakdown": True,
                },
            )
            assert response.status_code == 200
            result = response.json()
            assert len(result["recommendations"]) == 3
            assert set(result["breakdown"]) == {t["id"] for t in result["recommendations"]}

    def test_invalid_mood(self):
        """Test that unknown moods are rejected."""
        with TestClient(self.app) as client:
            response = client.post(
                "/recommendations",
                json={"checkIns": [{"mood": "angry", "createdAt": _now()}]},
            )
            assert response.status_code == 422

    def test_invalid_limit(self):
        """Test that a non-positive limit is rejected."""
        with TestClient(self.app) as client:
            response = client.post("/recommendations", json={"limit": 0})
            assert response.status_code == 422

    def test_custom_engine(self):
        """Test that a substituted scorer is used by the endpoint."""
        app = create_app(self.catalog, RecommendationEngine(scorer=ConstantScorer()))
        with TestClient(app) as client:
            result = client.post("/recommendations", json={}).json()
            assert {t["score"] for t in result["recommendations"]} == {42}
            # Equal scores keep catalog order
            assert [t["id"] for t in result["recommendations"]] == [t.id for t in self.catalog]

    def test_breakdown_unavailable(self):
        """Test that asking a scorer without breakdowns for one is rejected cleanly."""
        app = create_app(self.catalog, RecommendationEngine(scorer=ConstantScorer()))
        with TestClient(app) as client:
            response = client.post("/recommendations", json={"includeBreakdown": True})
            assert response.status_code == 422
            assert response.json() == {
                "detail": "ConstantScorer does not provide score breakdowns"
            }

            # Without the option the same engine still ranks
            assert client.post("/recommendations", json={}).status_code == 200
