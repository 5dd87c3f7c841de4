"""Tests for annotation appliers."""

from loom_core.models import types as t
from loom_core.models.types import GeneratedField
from loom_rules.annotators import API_MODEL_PROPERTY, NoopAnnotationApplier, Swagger2AnnotationApplier


class TestSwagger2AnnotationApplier:
    def test_mark_required_adds_annotation(self):
        field = GeneratedField(name="id", type=t.LONG)

        Swagger2AnnotationApplier().mark_required(field, True)

        assert field.get_annotation(API_MODEL_PROPERTY).render() == "@ApiModelProperty(required = true)"

    def test_mark_required_reuses_described_annotation(self):
        field = GeneratedField(name="id", type=t.LONG)
        applier = Swagger2AnnotationApplier()

        applier.describe_property(field, "Identifier")
        applier.mark_required(field, True)

        assert len(field.annotations) == 1
        assert field.annotations[0].params == {"value": "Identifier", "required": True}

    def test_empty_description_ignored(self):
        field = GeneratedField(name="id")
        Swagger2AnnotationApplier().describe_property(field, "")
        assert field.annotations == []


class TestNoopAnnotationApplier:
    def test_does_nothing(self):
        field = GeneratedField(name="id")
        applier = NoopAnnotationApplier()

        applier.describe_property(field, "Identifier")
        applier.mark_required(field, True)

        assert field.annotations == []
        assert field.javadoc.text == ""
