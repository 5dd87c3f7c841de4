"""The ``required`` keyword rule.

See JSON Schema validation, section 5.4.3: each entry of ``required`` names a
property that instances of the object schema must contain.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from loom_core.config import GenerationConfig
from loom_core.models.types import DocBlock, GeneratedClass, GeneratedField
from loom_core.naming import NameHelper
from loom_core.schema import Schema, properties_of, required_names

from loom_rules.annotators.base import AnnotationApplier
from loom_rules.base import SchemaRule

logger = logging.getLogger(__name__)

REQUIRED_COMMENT_TEXT = "\n(Required)"


class RequiredArrayRule(SchemaRule):
    """Marks the fields named in ``required`` and their accessors as required.

    Fields are found by resolving each required name with the shared
    NameHelper. Names without a matching field are skipped, since earlier
    rules may have excluded the property on purpose. Accessors are found in a
    second pass by the getter/setter names computed for the matched fields;
    there is no direct link from a field to its methods.

    Documentation is appended to, so applying the rule twice to the same
    class repeats the marker.
    """

    def __init__(
        self,
        name_helper: NameHelper,
        config: GenerationConfig,
        annotation_applier: AnnotationApplier,
    ) -> None:
        self.name_helper = name_helper
        self.config = config
        self.annotation_applier = annotation_applier

    @property
    def keyword(self) -> str:
        return "required"

    @property
    def description(self) -> str:
        return "Mark required properties in field and accessor docs, with optional @NotNull"

    def apply(
        self,
        node_name: str,
        node: Any,
        target: GeneratedClass,
        schema: Schema,
    ) -> GeneratedClass:
        names = required_names(node, source=schema.source)
        properties = properties_of(schema)
        required_methods: set[str] = set()

        for name in names:
            property_node = self._property_node(properties, name)

            field_name = self.name_helper.get_property_name(name, property_node)
            field = target.get_field(field_name)
            if field is None:
                logger.debug(f"{target.fqn}: no field for required property '{name}', skipping")
                continue

            self._add_javadoc(field.javadoc)
            self._add_not_null_annotation(field)
            self.annotation_applier.mark_required(field, True)

            required_methods.add(self.name_helper.get_getter_name(name, field.type, property_node))
            required_methods.add(self.name_helper.get_setter_name(name, property_node))

        self._update_accessor_javadoc(target, required_methods)

        logger.debug(
            f"{target.fqn} ({node_name}): {len(names)} required name(s), "
            f"{len(required_methods)} accessor name(s) resolved"
        )
        return target

    def _update_accessor_javadoc(self, target: GeneratedClass, required_methods: set[str]) -> None:
        for method in target.methods:
            if method.name in required_methods:
                self._add_javadoc(method.javadoc)

    def _add_not_null_annotation(self, field: GeneratedField) -> None:
        if not self.config.include_nullability_annotations:
            return
        field.annotate(self.config.not_null_annotation)

    @staticmethod
    def _add_javadoc(javadoc: DocBlock) -> None:
        javadoc.append(REQUIRED_COMMENT_TEXT)

    @staticmethod
    def _property_node(properties: Optional[dict[str, Any]], name: str) -> Optional[Any]:
        if properties is None:
            return None
        return properties.get(name)
