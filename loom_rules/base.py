"""Base class for schema keyword rules."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from loom_core.models.types import GeneratedClass
from loom_core.schema import Schema


class SchemaRule(ABC):
    """A rule that applies one schema keyword to a class under construction."""

    @property
    @abstractmethod
    def keyword(self) -> str:
        """Schema keyword the rule handles."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        pass

    @abstractmethod
    def apply(
        self,
        node_name: str,
        node: Any,
        target: GeneratedClass,
        schema: Schema,
    ) -> GeneratedClass:
        """Apply the keyword value ``node`` to ``target`` and return it."""
        pass
