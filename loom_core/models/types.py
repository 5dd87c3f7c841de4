"""Core data types for the generated class model."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


class MemberKind(str, Enum):
    FIELD = "field"
    METHOD = "method"


@dataclass(frozen=True)
class JavaType:
    """A reference to a Java type used by a generated member."""

    name: str
    primitive: bool = False

    @property
    def simple_name(self) -> str:
        """Type name without package or generic arguments."""
        base = self.name.split("<", 1)[0]
        simple = base.rsplit(".", 1)[-1]
        if "<" in self.name:
            return simple + self.name[self.name.index("<"):]
        return simple

    @property
    def is_boolean_primitive(self) -> bool:
        return self.primitive and self.name == "boolean"

    def __str__(self) -> str:
        return self.name


STRING = JavaType("java.lang.String")
INTEGER = JavaType("java.lang.Integer")
INT = JavaType("int", primitive=True)
LONG = JavaType("java.lang.Long")
LONG_PRIMITIVE = JavaType("long", primitive=True)
DOUBLE = JavaType("java.lang.Double")
DOUBLE_PRIMITIVE = JavaType("double", primitive=True)
BOOLEAN = JavaType("java.lang.Boolean")
BOOLEAN_PRIMITIVE = JavaType("boolean", primitive=True)
OBJECT = JavaType("java.lang.Object")
VOID = JavaType("void", primitive=True)


def list_of(item_type: JavaType) -> JavaType:
    """Build a ``java.util.List`` reference parameterised with ``item_type``."""
    return JavaType(f"java.util.List<{item_type.simple_name}>")


@dataclass
class DocBlock:
    """Documentation attached to a member, built by appending text parts."""

    parts: list[str] = field(default_factory=list)

    def append(self, text: str) -> "DocBlock":
        self.parts.append(text)
        return self

    @property
    def text(self) -> str:
        return "".join(self.parts)

    def __contains__(self, item: str) -> bool:
        return item in self.text

    def __bool__(self) -> bool:
        return bool(self.text)


@dataclass
class AnnotationUse:
    """An annotation applied to a member, with ordered parameters."""

    name: str
    params: dict[str, Any] = field(default_factory=dict)

    @property
    def simple_name(self) -> str:
        return self.name.rsplit(".", 1)[-1]

    def param(self, key: str, value: Any) -> "AnnotationUse":
        """Set (or overwrite) a parameter value."""
        self.params[key] = value
        return self

    def render(self) -> str:
        """Render as Java source text, e.g. ``@ApiModelProperty(required = true)``."""
        if not self.params:
            return f"@{self.simple_name}"
        args = ", ".join(f"{k} = {_render_value(v)}" for k, v in self.params.items())
        return f"@{self.simple_name}({args})"


def _render_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        escaped = value.replace("\\", "\\\\").replace('"', '\\"')
        return f'"{escaped}"'
    return str(value)


@dataclass
class _Member:
    name: str
    javadoc: DocBlock = field(default_factory=DocBlock)
    annotations: list[AnnotationUse] = field(default_factory=list)
    modifiers: list[str] = field(default_factory=list)

    def annotate(self, name: str) -> AnnotationUse:
        """Return the annotation ``name``, adding it if the member lacks it."""
        existing = self.get_annotation(name)
        if existing is not None:
            return existing
        annotation = AnnotationUse(name=name)
        self.annotations.append(annotation)
        return annotation

    def get_annotation(self, name: str) -> Optional[AnnotationUse]:
        for annotation in self.annotations:
            if annotation.name == name:
                return annotation
        return None

    def has_annotation(self, name: str) -> bool:
        return self.get_annotation(name) is not None


@dataclass
class GeneratedField(_Member):
    """A field of a generated class."""

    type: JavaType = OBJECT
    kind: MemberKind = MemberKind.FIELD


@dataclass
class GeneratedMethod(_Member):
    """A method of a generated class. Bodies are not modelled."""

    return_type: JavaType = VOID
    params: list[tuple[str, JavaType]] = field(default_factory=list)
    kind: MemberKind = MemberKind.METHOD

    @property
    def signature(self) -> str:
        args = ", ".join(f"{t.simple_name} {n}" for n, t in self.params)
        return f"{self.return_type.simple_name} {self.name}({args})"


@dataclass
class GeneratedClass:
    """A target class under construction.

    Fields and methods are kept as independent ordered collections. A field
    and its accessors are only related by their names.
    """

    name: str
    package: str = ""
    javadoc: DocBlock = field(default_factory=DocBlock)
    fields: list[GeneratedField] = field(default_factory=list)
    methods: list[GeneratedMethod] = field(default_factory=list)

    @property
    def fqn(self) -> str:
        return f"{self.package}.{self.name}" if self.package else self.name

    def add_field(self, generated_field: GeneratedField) -> GeneratedField:
        if self.get_field(generated_field.name) is not None:
            raise ValueError(f"Field already defined in {self.fqn}: {generated_field.name}")
        self.fields.append(generated_field)
        return generated_field

    def add_method(self, method: GeneratedMethod) -> GeneratedMethod:
        self.methods.append(method)
        return method

    def get_field(self, name: str) -> Optional[GeneratedField]:
        for f in self.fields:
            if f.name == name:
                return f
        return None

    def get_methods(self, name: str) -> list[GeneratedMethod]:
        """All methods with the given name (overloads included)."""
        return [m for m in self.methods if m.name == name]
