"""Unit tests for PropertiesRule."""

import pytest

from loom_core.config import GenerationConfig
from loom_core.models import types as t
from loom_core.models.types import GeneratedClass
from loom_core.schema import Schema
from loom_rules.annotators import API_MODEL_PROPERTY
from loom_rules.factory import RuleFactory


@pytest.fixture
def schema():
    return Schema(
        content={
            "type": "object",
            "properties": {
                "id": {"type": "integer", "description": "Identifier"},
                "display-name": {"type": "string", "title": "Display name"},
                "active": {"type": "boolean"},
                "score": {"type": ["number", "null"]},
                "tags": {"type": "array", "items": {"type": "string"}},
                "meta": {"type": "object"},
                "internal": {"type": "string", "excludedFromGeneration": True},
            },
        }
    )


def run(schema: Schema, config: GenerationConfig | None = None) -> GeneratedClass:
    rule = RuleFactory(config).properties_rule()
    target = GeneratedClass(name="Item")
    return rule.apply("Item", schema.get("properties"), target, schema)


class TestPropertiesRule:
    def test_fields_in_declaration_order(self, schema: Schema):
        cls = run(schema)

        assert [f.name for f in cls.fields] == ["id", "displayName", "active", "score", "tags", "meta"]

    def test_excluded_property_has_no_members(self, schema: Schema):
        cls = run(schema)

        assert cls.get_field("internal") is None
        assert cls.get_methods("getInternal") == []

    def test_wrapper_types_by_default(self, schema: Schema):
        cls = run(schema)

        assert cls.get_field("id").type == t.INTEGER
        assert cls.get_field("active").type == t.BOOLEAN
        assert cls.get_field("score").type == t.DOUBLE
        assert cls.get_field("tags").type == t.list_of(t.STRING)
        assert cls.get_field("meta").type == t.OBJECT

    def test_primitives(self, schema: Schema):
        cls = run(schema, GenerationConfig(use_primitives=True))

        assert cls.get_field("id").type == t.INT
        assert cls.get_field("active").type == t.BOOLEAN_PRIMITIVE
        assert cls.get_field("score").type == t.DOUBLE_PRIMITIVE
        assert cls.get_methods("isActive")
        assert not cls.get_methods("getActive")

    def test_long_integers(self, schema: Schema):
        assert run(schema, GenerationConfig(use_long_integers=True)).get_field("id").type == t.LONG
        config = GenerationConfig(use_long_integers=True, use_primitives=True)
        assert run(schema, config).get_field("id").type == t.LONG_PRIMITIVE

    def test_accessors_created(self, schema: Schema):
        cls = run(schema)

        names = [m.name for m in cls.methods]
        assert names[:4] == ["getId", "setId", "getDisplayName", "setDisplayName"]
        assert cls.get_methods("setDisplayName")[0].params == [("displayName", t.STRING)]

    def test_description_seeds_docs(self, schema: Schema):
        cls = run(schema)

        assert cls.get_field("id").javadoc.text == "Identifier"
        assert cls.get_methods("getId")[0].javadoc.text == "Identifier"
        assert cls.get_field("displayName").javadoc.text == "Display name"
        assert cls.get_field("active").javadoc.text == ""

    def test_builders(self, schema: Schema):
        cls = run(schema, GenerationConfig(generate_builders=True))

        builder = cls.get_methods("withId")[0]
        assert builder.return_type.name == "Item"

    def test_swagger2_description(self, schema: Schema):
        cls = run(schema, GenerationConfig(include_swagger2_annotations=True))

        annotation = cls.get_field("id").get_annotation(API_MODEL_PROPERTY)
        assert annotation.params == {"value": "Identifier"}
        assert cls.get_field("active").get_annotation(API_MODEL_PROPERTY) is None

    def test_colliding_names_keep_first(self):
        schema = Schema(content={"properties": {"first_name": {}, "first-name": {}}})

        cls = run(schema)

        assert [f.name for f in cls.fields] == ["firstName"]
