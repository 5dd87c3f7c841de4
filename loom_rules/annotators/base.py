"""Base class for annotation appliers."""

from __future__ import annotations

from abc import ABC, abstractmethod

from loom_core.models.types import GeneratedField


class AnnotationApplier(ABC):
    """Records property metadata in an external description format."""

    @abstractmethod
    def describe_property(self, field: GeneratedField, description: str) -> None:
        """Attach a human readable description of the property."""
        pass

    @abstractmethod
    def mark_required(self, field: GeneratedField, required: bool) -> None:
        """Record whether the property is required."""
        pass
