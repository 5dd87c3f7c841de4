"""The ``properties`` keyword rule: one field plus accessors per property."""

from __future__ import annotations

import logging
from typing import Any

from loom_core.config import GenerationConfig
from loom_core.models import types as t
from loom_core.models.types import GeneratedClass, GeneratedField, GeneratedMethod, JavaType
from loom_core.naming import NameHelper
from loom_core.schema import Schema, properties_of

from loom_rules.annotators.base import AnnotationApplier
from loom_rules.base import SchemaRule

logger = logging.getLogger(__name__)

EXCLUDED_FROM_GENERATION = "excludedFromGeneration"


class PropertiesRule(SchemaRule):
    """Creates a private field, a getter and a setter for every property.

    Properties flagged with ``excludedFromGeneration`` produce nothing.
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
        return "properties"

    @property
    def description(self) -> str:
        return "Generate fields, getters and setters for declared properties"

    def apply(
        self,
        node_name: str,
        node: Any,
        target: GeneratedClass,
        schema: Schema,
    ) -> GeneratedClass:
        properties = properties_of(schema) or {}

        for property_name, property_node in properties.items():
            if not isinstance(property_node, dict):
                property_node = {}
            if property_node.get(EXCLUDED_FROM_GENERATION) is True:
                logger.debug(f"{target.fqn}: property '{property_name}' excluded from generation")
                continue
            self._add_property(target, property_name, property_node)

        return target

    def _add_property(self, target: GeneratedClass, name: str, node: dict[str, Any]) -> None:
        field_name = self.name_helper.get_property_name(name, node)
        if target.get_field(field_name) is not None:
            logger.warning(f"{target.fqn}: property '{name}' collides with field '{field_name}', skipping")
            return

        field_type = self.java_type(node)
        text = self._doc_text(node)

        field = target.add_field(
            GeneratedField(name=field_name, type=field_type, modifiers=["private"])
        )
        if text:
            field.javadoc.append(text)
            self.annotation_applier.describe_property(field, text)

        getter = GeneratedMethod(
            name=self.name_helper.get_getter_name(name, field_type, node),
            return_type=field_type,
            modifiers=["public"],
        )
        setter = GeneratedMethod(
            name=self.name_helper.get_setter_name(name, node),
            params=[(field_name, field_type)],
            modifiers=["public"],
        )
        for method in (getter, setter):
            if text:
                method.javadoc.append(text)
            target.add_method(method)

        if self.config.generate_builders:
            target.add_method(
                GeneratedMethod(
                    name=self.name_helper.get_builder_name(name, node),
                    return_type=JavaType(target.fqn),
                    params=[(field_name, field_type)],
                    modifiers=["public"],
                )
            )

    def java_type(self, node: dict[str, Any]) -> JavaType:
        """Map a property's JSON type to a Java type reference."""
        json_type = node.get("type")
        if isinstance(json_type, list):
            # ["string", "null"] and similar unions
            non_null = [x for x in json_type if x != "null"]
            json_type = non_null[0] if len(non_null) == 1 else None

        primitives = self.config.use_primitives
        if json_type == "string":
            return t.STRING
        if json_type == "integer":
            if self.config.use_long_integers:
                return t.LONG_PRIMITIVE if primitives else t.LONG
            return t.INT if primitives else t.INTEGER
        if json_type == "number":
            return t.DOUBLE_PRIMITIVE if primitives else t.DOUBLE
        if json_type == "boolean":
            return t.BOOLEAN_PRIMITIVE if primitives else t.BOOLEAN
        if json_type == "array":
            items = node.get("items")
            item_type = self.java_type(items) if isinstance(items, dict) else t.OBJECT
            # Collections hold wrapper types
            return t.list_of(_boxed(item_type))
        return t.OBJECT

    @staticmethod
    def _doc_text(node: dict[str, Any]) -> str:
        for key in ("description", "title"):
            value = node.get(key)
            if isinstance(value, str) and value:
                return value
        return ""


_BOXED = {
    "int": t.INTEGER,
    "long": t.LONG,
    "double": t.DOUBLE,
    "boolean": t.BOOLEAN,
}


def _boxed(java_type: JavaType) -> JavaType:
    if java_type.primitive:
        return _BOXED.get(java_type.name, java_type)
    return java_type
