"""Tests for GenerationConfig."""

import pytest

from loom_core.config import (
    DEFAULT_MAX_WORKERS,
    JAKARTA_NOT_NULL,
    JAVAX_NOT_NULL,
    GenerationConfig,
)

ENV_VARS = [
    "SCHEMALOOM_INCLUDE_JSR303_ANNOTATIONS",
    "SCHEMALOOM_USE_JAKARTA_VALIDATION",
    "SCHEMALOOM_INCLUDE_SWAGGER2_ANNOTATIONS",
    "SCHEMALOOM_USE_PRIMITIVES",
    "SCHEMALOOM_USE_LONG_INTEGERS",
    "SCHEMALOOM_GENERATE_BUILDERS",
    "SCHEMALOOM_PROPERTY_WORD_DELIMITERS",
    "SCHEMALOOM_TARGET_PACKAGE",
    "SCHEMALOOM_MAX_WORKERS",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestFromEnv:
    def test_defaults(self):
        config = GenerationConfig.from_env()

        assert config == GenerationConfig()
        assert config.max_workers == DEFAULT_MAX_WORKERS
        assert not config.include_nullability_annotations

    def test_reads_flags(self, monkeypatch):
        monkeypatch.setenv("SCHEMALOOM_INCLUDE_JSR303_ANNOTATIONS", "true")
        monkeypatch.setenv("SCHEMALOOM_USE_PRIMITIVES", "1")
        monkeypatch.setenv("SCHEMALOOM_INCLUDE_SWAGGER2_ANNOTATIONS", "no")
        monkeypatch.setenv("SCHEMALOOM_TARGET_PACKAGE", "com.example")
        monkeypatch.setenv("SCHEMALOOM_MAX_WORKERS", "8")

        config = GenerationConfig.from_env()

        assert config.include_nullability_annotations
        assert config.use_primitives
        assert not config.include_swagger2_annotations
        assert config.target_package == "com.example"
        assert config.max_workers == 8

    def test_overrides_win(self, monkeypatch):
        monkeypatch.setenv("SCHEMALOOM_INCLUDE_JSR303_ANNOTATIONS", "false")

        config = GenerationConfig.from_env(include_nullability_annotations=True, use_primitives=None)

        assert config.include_nullability_annotations
        assert not config.use_primitives

    def test_bad_worker_count_is_reported(self, monkeypatch):
        monkeypatch.setenv("SCHEMALOOM_MAX_WORKERS", "many")

        config = GenerationConfig.from_env()

        assert not config.is_valid()
        assert "SCHEMALOOM_MAX_WORKERS must be a positive integer" in config.get_validation_errors()


class TestValidation:
    def test_default_is_valid(self):
        assert GenerationConfig().is_valid()

    def test_empty_delimiters(self):
        errors = GenerationConfig(property_word_delimiters="").get_validation_errors()
        assert errors == ["SCHEMALOOM_PROPERTY_WORD_DELIMITERS must not be empty"]


class TestNotNullAnnotation:
    def test_javax_by_default(self):
        assert GenerationConfig().not_null_annotation == JAVAX_NOT_NULL

    def test_jakarta(self):
        assert GenerationConfig(use_jakarta_validation=True).not_null_annotation == JAKARTA_NOT_NULL
