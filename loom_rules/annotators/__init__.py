"""Appliers for cross-cutting annotations on generated members."""

from loom_rules.annotators.base import AnnotationApplier
from loom_rules.annotators.noop import NoopAnnotationApplier
from loom_rules.annotators.swagger2 import API_MODEL_PROPERTY, Swagger2AnnotationApplier

__all__ = [
    "API_MODEL_PROPERTY",
    "AnnotationApplier",
    "NoopAnnotationApplier",
    "Swagger2AnnotationApplier",
]
