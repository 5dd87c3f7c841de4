"""Pydantic report models for the CLI's JSON output."""

from pydantic import BaseModel, Field

from loom_core.models.types import AnnotationUse, GeneratedClass, GeneratedField, GeneratedMethod


class FieldReport(BaseModel):
    """A generated field."""

    name: str
    type: str = Field(description="Fully qualified Java type")
    doc: str = Field(default="", description="Accumulated documentation text")
    annotations: list[str] = Field(default_factory=list, description="Rendered annotations")


class MethodReport(BaseModel):
    """A generated method."""

    name: str
    signature: str
    doc: str = Field(default="", description="Accumulated documentation text")


class ClassReport(BaseModel):
    """A generated class with its members in declaration order."""

    fqn: str
    source: str | None = Field(default=None, description="Schema file the class came from")
    doc: str = ""
    fields: list[FieldReport] = Field(default_factory=list)
    methods: list[MethodReport] = Field(default_factory=list)


class GenerateReport(BaseModel):
    """Result of a generate command."""

    classes: list[ClassReport] = Field(default_factory=list)
    errors: dict[str, str] = Field(default_factory=dict, description="Schema path to error message")


def _render_annotations(annotations: list[AnnotationUse]) -> list[str]:
    return [a.render() for a in annotations]


def field_report(field: GeneratedField) -> FieldReport:
    return FieldReport(
        name=field.name,
        type=field.type.name,
        doc=field.javadoc.text,
        annotations=_render_annotations(field.annotations),
    )


def method_report(method: GeneratedMethod) -> MethodReport:
    return MethodReport(name=method.name, signature=method.signature, doc=method.javadoc.text)


def class_report(generated: GeneratedClass, source: str | None = None) -> ClassReport:
    return ClassReport(
        fqn=generated.fqn,
        source=source,
        doc=generated.javadoc.text,
        fields=[field_report(f) for f in generated.fields],
        methods=[method_report(m) for m in generated.methods],
    )
