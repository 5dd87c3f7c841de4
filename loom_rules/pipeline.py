"""Ordered composition of schema keyword rules."""

from __future__ import annotations

import logging

from loom_core.models.types import GeneratedClass
from loom_core.schema import Schema

from loom_rules.base import SchemaRule

logger = logging.getLogger(__name__)


class RulePipeline:
    """Runs registered rules in order against one class."""

    def __init__(self, rules: list[SchemaRule]):
        self.rules: list[SchemaRule] = list(rules)

    def apply(self, node_name: str, schema: Schema, target: GeneratedClass) -> GeneratedClass:
        """Run every rule whose keyword appears in the schema."""
        for rule in self.rules:
            if rule.keyword not in schema:
                continue
            target = rule.apply(node_name, schema.get(rule.keyword), target, schema)
        return target

    def apply_by_keyword(
        self,
        keyword: str,
        node_name: str,
        schema: Schema,
        target: GeneratedClass,
    ) -> GeneratedClass:
        """Run the rule registered for a single keyword."""
        for rule in self.rules:
            if rule.keyword == keyword:
                return rule.apply(node_name, schema.get(keyword), target, schema)
        raise ValueError(f"Unknown rule: {keyword}")

    def list_rules(self) -> list[dict]:
        """List registered rules in execution order."""
        return [
            {
                "keyword": rule.keyword,
                "description": rule.description,
            }
            for rule in self.rules
        ]
