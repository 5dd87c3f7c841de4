"""Annotation applier used when no description format is requested."""

from __future__ import annotations

from loom_core.models.types import GeneratedField

from loom_rules.annotators.base import AnnotationApplier


class NoopAnnotationApplier(AnnotationApplier):
    def describe_property(self, field: GeneratedField, description: str) -> None:
        pass

    def mark_required(self, field: GeneratedField, required: bool) -> None:
        pass
