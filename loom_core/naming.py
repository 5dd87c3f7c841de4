"""Name resolution from JSON property names to Java identifiers.

The same NameHelper must be used by the rule that creates fields and accessors
and by every rule that later looks them up, otherwise lookups by name miss.
"""

from __future__ import annotations

import re
from typing import Any, Optional

from loom_core.config import DEFAULT_PROPERTY_WORD_DELIMITERS
from loom_core.models.types import JavaType

ILLEGAL_CHARACTER_REGEX = re.compile(r"[^0-9a-zA-Z_$]")

JAVA_KEYWORDS = frozenset(
    {
        "abstract", "assert", "boolean", "break", "byte", "case", "catch",
        "char", "class", "const", "continue", "default", "do", "double",
        "else", "enum", "extends", "false", "final", "finally", "float",
        "for", "goto", "if", "implements", "import", "instanceof", "int",
        "interface", "long", "native", "new", "null", "package", "private",
        "protected", "public", "return", "short", "static", "strictfp",
        "super", "switch", "synchronized", "this", "throw", "throws",
        "transient", "true", "try", "void", "volatile", "while", "_",
    }
)


def capitalize(name: str) -> str:
    return name[:1].upper() + name[1:]


def uncapitalize(name: str) -> str:
    return name[:1].lower() + name[1:]


class NameHelper:
    """Maps schema property names to field, getter, setter and class names."""

    def __init__(self, property_word_delimiters: str = DEFAULT_PROPERTY_WORD_DELIMITERS) -> None:
        self.property_word_delimiters = property_word_delimiters
        if property_word_delimiters:
            self._word_split = re.compile("[" + re.escape(property_word_delimiters) + "]+")
        else:
            self._word_split = None

    def get_property_name(self, json_name: str, node: Optional[Any] = None) -> str:
        """Field identifier for a JSON property."""
        name = self._java_name(json_name, node)
        name = self.replace_illegal_characters(name)
        name = self.normalize_name(name)
        name = self._make_lower_camel_case(name)

        if name in JAVA_KEYWORDS:
            name = "_" + name
        return name

    def get_getter_name(self, json_name: str, field_type: JavaType, node: Optional[Any] = None) -> str:
        """Getter identifier; boolean primitives use the ``is`` prefix."""
        prefix = "is" if field_type.is_boolean_primitive else "get"
        getter = self._accessor_name(prefix, json_name, node)
        if getter == "getClass":
            getter = "getClass_"
        return getter

    def get_setter_name(self, json_name: str, node: Optional[Any] = None) -> str:
        setter = self._accessor_name("set", json_name, node)
        if setter == "setClass":
            setter = "setClass_"
        return setter

    def get_builder_name(self, json_name: str, node: Optional[Any] = None) -> str:
        return self._accessor_name("with", json_name, node)

    def get_class_name(self, json_name: str, node: Optional[Any] = None) -> str:
        """Upper camel case class name for a schema or property."""
        name = self._java_name(json_name, node)
        name = self.replace_illegal_characters(name)
        name = capitalize(self.normalize_name(name))
        if name in JAVA_KEYWORDS or not name:
            name = "_" + name
        return name

    def replace_illegal_characters(self, name: str) -> str:
        return ILLEGAL_CHARACTER_REGEX.sub("_", name)

    def normalize_name(self, name: str) -> str:
        """Join delimited words in camel case and guard a leading digit."""
        name = self._capitalize_trailing_words(name)
        if name[:1].isdigit():
            name = "_" + name
        return name

    def _accessor_name(self, prefix: str, json_name: str, node: Optional[Any]) -> str:
        name = self._java_name(json_name, node)
        name = self.replace_illegal_characters(name)
        return prefix + capitalize(self.normalize_name(name))

    def _capitalize_trailing_words(self, name: str) -> str:
        if self._word_split is None:
            return name
        words = [w for w in self._word_split.split(name) if w]
        if not words:
            return name
        return words[0] + "".join(capitalize(w) for w in words[1:])

    @staticmethod
    def _make_lower_camel_case(name: str) -> str:
        first_two_upper = len(name) > 1 and name[0].isupper() and name[1].isupper()
        if first_two_upper:
            return name
        return uncapitalize(name)

    @staticmethod
    def _java_name(json_name: str, node: Optional[Any]) -> str:
        if isinstance(node, dict):
            java_name = node.get("javaName")
            if isinstance(java_name, str) and java_name:
                return java_name
        return json_name
