"""Tests for BatchGenerator."""

import json

import pytest

from loom_core.config import GenerationConfig
from loom_rules.batch import BatchGenerator
from loom_rules.factory import RuleFactory
from loom_rules.required_array import REQUIRED_COMMENT_TEXT


def write_schema(directory, name: str, content) -> str:
    path = directory / name
    path.write_text(json.dumps(content), encoding="utf-8")
    return str(path)


@pytest.fixture
def schema_paths(tmp_path):
    paths = []
    for i in range(6):
        paths.append(
            write_schema(
                tmp_path,
                f"entity{i}.json",
                {
                    "type": "object",
                    "properties": {"name": {"type": "string"}, "size": {"type": "integer"}},
                    "required": ["name"],
                },
            )
        )
    return paths


class TestBatchGenerator:
    def test_generates_all(self, schema_paths):
        generator = BatchGenerator(RuleFactory(), max_workers=3)

        result = generator.generate(schema_paths, package="com.example")

        assert result.success
        assert list(result.classes) == schema_paths
        for i, path in enumerate(schema_paths):
            cls = result.classes[path]
            assert cls.fqn == f"com.example.Entity{i}"
            assert cls.get_field("name").javadoc.text == REQUIRED_COMMENT_TEXT
            assert cls.get_field("size").javadoc.text == ""
        assert generator.stats == {"total": 6, "success": 6, "failed": 0}

    def test_classes_are_independent(self, schema_paths):
        result = BatchGenerator(RuleFactory()).generate(schema_paths[:2])

        first, second = result.classes.values()
        assert first is not second
        assert first.get_field("name") is not second.get_field("name")

    def test_failures_isolated(self, tmp_path, schema_paths):
        bad = write_schema(tmp_path, "bad.json", {"properties": {"a": {}}, "required": "a"})
        missing = str(tmp_path / "missing.json")
        generator = BatchGenerator(RuleFactory(GenerationConfig(max_workers=2)))

        result = generator.generate([schema_paths[0], bad, missing])

        assert not result.success
        assert list(result.classes) == [schema_paths[0]]
        assert set(result.errors) == {bad, missing}
        assert "must be an array of strings" in result.errors[bad]
        assert generator.stats == {"total": 3, "success": 1, "failed": 2}

    def test_undecodable_file_isolated(self, tmp_path, schema_paths):
        bad = tmp_path / "latin1.json"
        bad.write_bytes(b'{"title": "\xff"}')
        generator = BatchGenerator(RuleFactory())

        result = generator.generate([schema_paths[0], str(bad)])

        assert list(result.classes) == [schema_paths[0]]
        assert "cannot read schema" in result.errors[str(bad)]
        assert generator.get_stats() == {"total": 2, "success": 1, "failed": 1}

    def test_stats_reset_between_runs(self, tmp_path, schema_paths):
        missing = [str(tmp_path / "a.json"), str(tmp_path / "b.json")]
        generator = BatchGenerator(RuleFactory())

        generator.generate(missing)
        assert generator.get_stats() == {"total": 2, "success": 0, "failed": 2}

        generator.generate(schema_paths[:1])
        assert generator.get_stats() == {"total": 1, "success": 1, "failed": 0}

    def test_empty_input(self, tmp_path):
        generator = BatchGenerator(RuleFactory())
        generator.generate([str(tmp_path / "missing.json")])

        result = generator.generate([])

        assert result.classes == {}
        assert result.success
        assert generator.get_stats() == {"total": 0, "success": 0, "failed": 0}

    def test_workers_default_from_config(self):
        generator = BatchGenerator(RuleFactory(GenerationConfig(max_workers=7)))
        assert generator.max_workers == 7
