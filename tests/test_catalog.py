"""
Tests for catalog loading.
"""

import json

import pytest

from coping_recommender.catalog import load_catalog, parse_catalog
from coping_recommender.errors import CatalogError
from coping_recommender.models import CopingCategory, IntensityLevel, Mood

BOX_BREATHING = {
    "id": "box-breathing",
    "title": "Box Breathing",
    "description": "4-4-4-4 breathing",
    "category": "breathing",
    "supportedMoods": ["anxious", "neutral"],
    "intensityLevel": "high",
    "durationMinutes": 2,
}


class TestLoadCatalog:
    """Test suite for catalog loading."""

    def test_default_catalog(self):
        """Test that the packaged catalog loads with unique ids."""
        catalog = load_catalog()
        assert len(catalog) == 12
        assert len({tool.id for tool in catalog}) == 12
        assert catalog[0].id == "box-breathing"
        assert catalog[-1].id == "quick-exercises"
        assert {tool.category for tool in catalog} == set(CopingCategory)
        assert all(tool.duration_minutes > 0 for tool in catalog)

    def test_load_from_path(self, tmp_path):
        """Test loading a catalog file."""
        path = tmp_path / "tools.json"
        path.write_text(json.dumps([BOX_BREATHING]))

        (tool,) = load_catalog(path)
        assert tool.category is CopingCategory.BREATHING
        assert tool.intensity_level is IntensityLevel.HIGH
        assert tool.supported_moods == frozenset({Mood.ANXIOUS, Mood.NEUTRAL})

    def test_missing_file(self, tmp_path):
        """Test that unreadable files raise CatalogError."""
        with pytest.raises(CatalogError, match="Could not read"):
            load_catalog(tmp_path / "missing.json")

    def test_malformed_json(self):
        """Test that malformed JSON raises CatalogError."""
        with pytest.raises(CatalogError, match="not valid JSON"):
            parse_catalog("[{")

    def test_invalid_entry(self):
        """Test that invalid entries raise CatalogError."""
        bad_duration = dict(BOX_BREATHING, durationMinutes=0)
        with pytest.raises(CatalogError, match="invalid entries"):
            parse_catalog(json.dumps([bad_duration]))

        bad_mood = dict(BOX_BREATHING, supportedMoods=["elated"])
        with pytest.raises(CatalogError, match="invalid entries"):
            parse_catalog(json.dumps([bad_mood]))

    def test_duplicate_ids(self):
        """Test that repeated ids raise CatalogError."""
        with pytest.raises(CatalogError, match="repeats tool id 'box-breathing'"):
            parse_catalog(json.dumps([BOX_BREATHING, BOX_BREATHING]))

    def test_tools_are_immutable(self):
        """Test that catalog entries cannot be modified."""
        tool = load_catalog()[0]
        with pytest.raises(Exception):
            tool.duration_minutes = 30

    def test_serialized_moods_are_ordered(self):
        """Test that supported moods serialize in declaration order."""
        (tool,) = parse_catalog(json.dumps([dict(BOX_BREATHING, supportedMoods=["neutral", "anxious"])]))
        assert tool.model_dump(by_alias=True)["supportedMoods"] == ["anxious", "neutral"]
