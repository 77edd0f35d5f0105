"""Tests for plugin composition."""

from typing import Any

from recipe_extractor.core.enums import RecipeField
from recipe_extractor.extraction.registry import PluginManager, compose_plugins, sort_by_priority
from recipe_extractor.plugins.base import PostProcessorPlugin


class Named:
    """Minimal prioritized object."""

    def __init__(self, name: str, priority: int) -> None:
        self.name = name
        self.priority = priority


class UpperCaseProcessor(PostProcessorPlugin):
    name = "UpperCase"
    priority = 10

    def should_process(self, field: RecipeField) -> bool:
        return field == RecipeField.TITLE

    def process(self, field: RecipeField, value: Any) -> Any:
        return value.upper()


class TestSortByPriority:
    """Tests for priority ordering."""

    def test_descending(self) -> None:
        """Test higher priorities come first."""
        plugins = [Named("a", 1), Named("b", 100), Named("c", 50)]
        assert [p.name for p in sort_by_priority(plugins)] == ["b", "c", "a"]

    def test_stable(self) -> None:
        """Test equal priorities keep their input order."""
        plugins = [Named("first", 5), Named("second", 5), Named("third", 5)]
        assert [p.name for p in sort_by_priority(plugins)] == ["first", "second", "third"]


class TestComposePlugins:
    """Tests for chain composition."""

    def test_base_then_extra(self) -> None:
        """Test extras are merged into the base chain by priority."""
        base = [Named("OpenGraph", 60), Named("SchemaOrg", 90)]
        extra = [Named("Custom", 95), Named("Late", 60)]

        extractors, post_processors = compose_plugins(base, [], extra, [])

        assert [p.name for p in extractors] == ["Custom", "SchemaOrg", "OpenGraph", "Late"]
        assert post_processors == []


class TestPluginManager:
    """Tests for PluginManager."""

    def test_chains(self) -> None:
        """Test the manager exposes both sorted chains."""
        processor = UpperCaseProcessor()
        manager = PluginManager([Named("Low", 1), Named("High", 2)], [processor])

        assert [p.name for p in manager.get_extractors()] == ["High", "Low"]
        assert manager.get_post_processors() == [processor]

    def test_list_plugins(self) -> None:
        """Test plugin descriptions cover both chains."""
        manager = PluginManager([Named("High", 2)], [UpperCaseProcessor()])

        assert manager.list_plugins() == [
            {"kind": "extractor", "name": "High", "priority": "2"},
            {"kind": "post_processor", "name": "UpperCase", "priority": "10"},
        ]

    def test_chains_are_copies(self) -> None:
        """Test callers cannot mutate the manager's chains."""
        manager = PluginManager([Named("High", 2)], [])
        manager.get_extractors().clear()

        assert len(manager.get_extractors()) == 1
