"""Builds rules that share one configuration, NameHelper and annotation applier."""

from __future__ import annotations

import logging
from typing import Optional

from loom_core.config import GenerationConfig
from loom_core.models.types import GeneratedClass
from loom_core.naming import NameHelper
from loom_core.schema import Schema

from loom_rules.annotators.base import AnnotationApplier
from loom_rules.annotators.noop import NoopAnnotationApplier
from loom_rules.annotators.swagger2 import Swagger2AnnotationApplier
from loom_rules.pipeline import RulePipeline
from loom_rules.properties import PropertiesRule
from loom_rules.required_array import RequiredArrayRule

logger = logging.getLogger(__name__)

DEFAULT_CLASS_NAME = "GeneratedType"


class RuleFactory:
    """Creates rules wired to the same collaborators.

    Rules that create members and rules that look them up by name must agree
    on naming, so every rule from one factory gets the same NameHelper.
    """

    def __init__(
        self,
        config: Optional[GenerationConfig] = None,
        name_helper: Optional[NameHelper] = None,
        annotation_applier: Optional[AnnotationApplier] = None,
    ) -> None:
        self.config = config or GenerationConfig()
        self.name_helper = name_helper or NameHelper(self.config.property_word_delimiters)
        if annotation_applier is None:
            if self.config.include_swagger2_annotations:
                annotation_applier = Swagger2AnnotationApplier()
            else:
                annotation_applier = NoopAnnotationApplier()
        self.annotation_applier = annotation_applier

    def properties_rule(self) -> PropertiesRule:
        return PropertiesRule(self.name_helper, self.config, self.annotation_applier)

    def required_array_rule(self) -> RequiredArrayRule:
        return RequiredArrayRule(self.name_helper, self.config, self.annotation_applier)

    def create_pipeline(self) -> RulePipeline:
        """Default pipeline: members are created before they are marked."""
        return RulePipeline(
            [
                self.properties_rule(),
                self.required_array_rule(),
            ]
        )

    def generate_class(
        self,
        schema: Schema,
        class_name: Optional[str] = None,
        package: Optional[str] = None,
    ) -> GeneratedClass:
        """Build a class for ``schema`` with the default pipeline."""
        name = class_name or self._class_name_for(schema)
        target = GeneratedClass(
            name=name,
            package=self.config.target_package if package is None else package,
        )
        description = schema.get("description")
        if isinstance(description, str) and description:
            target.javadoc.append(description)

        target = self.create_pipeline().apply(name, schema, target)
        logger.info(
            f"Generated {target.fqn}: {len(target.fields)} field(s), {len(target.methods)} method(s)"
        )
        return target

    def _class_name_for(self, schema: Schema) -> str:
        base = schema.title
        if not base and schema.source:
            base = schema.source.replace("\\", "/").rsplit("/", 1)[-1].split(".", 1)[0]
        return self.name_helper.get_class_name(base or DEFAULT_CLASS_NAME)
