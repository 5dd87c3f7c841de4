"""In-memory model of generated classes."""

from loom_core.models.types import (
    AnnotationUse,
    DocBlock,
    GeneratedClass,
    GeneratedField,
    GeneratedMethod,
    JavaType,
)

__all__ = [
    "AnnotationUse",
    "DocBlock",
    "GeneratedClass",
    "GeneratedField",
    "GeneratedMethod",
    "JavaType",
]
