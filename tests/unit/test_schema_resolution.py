"""
Unit tests for structural schemas and schema resolution.
Tests: StructuralSchema, as_structural_schema, build_resolver strategies,
       built-in package integrity.
"""
import pytest
from jsonschema import Draft202012Validator
from jsonschema.exceptions import SchemaError

from codecheck.schemas.packages import APP_HOME, PACKAGES, POINT_OF_SALE, POINT_OF_SALE_REACT
from codecheck.validations.schema_resolver import (
    ResolverStrategy,
    UnsupportedPackageError,
    build_resolver,
    explicit_resolver,
    package_resolver,
)
from codecheck.validations.structural_schema import SchemaViolation, StructuralSchema, as_structural_schema


BUTTON = {
    "type": "object",
    "properties": {
        "variant": {"type": "string", "enum": ["primary", "secondary"]},
        "title": {"type": "string"},
    },
    "required": ["title"],
}


class TestStructuralSchema:
    def test_valid_attributes(self):
        assert StructuralSchema(BUTTON).validate({"title": "Save", "variant": "primary"}) == []

    def test_undeclared_attribute_named(self):
        violations = StructuralSchema(BUTTON).validate({"title": "Save", "appearance": "primary"})
        assert violations == [
            SchemaViolation("appearance", "attribute is not declared by the schema", "appearance")
        ]
        assert str(violations[0]) == "Property 'appearance': attribute is not declared by the schema"

    def test_each_undeclared_attribute_reported_once(self):
        violations = StructuralSchema(BUTTON).validate({"title": "x", "tone": "a", "size": "b"})
        assert sorted(v.path for v in violations) == ["size", "tone"]

    def test_missing_required(self):
        violations = StructuralSchema(BUTTON).validate({"variant": "primary"})
        assert [str(v) for v in violations] == ["Property 'title': required attribute is missing"]

    def test_value_constraint(self):
        violations = StructuralSchema(BUTTON).validate({"title": "x", "variant": "huge"})
        assert len(violations) == 1
        assert violations[0].path == "variant"
        assert violations[0].attribute == "variant"
        assert "is not one of" in violations[0].message

    def test_nested_path(self):
        schema = {
            "type": "object",
            "properties": {"action": {"type": "object", "properties": {"title": {"type": "string"}}}},
        }
        violations = StructuralSchema(schema).validate({"action": {"title": 3}})
        assert violations[0].path == "action.title"
        assert violations[0].attribute == "action"

    def test_non_strict_allows_extras(self):
        assert StructuralSchema(BUTTON, strict=False).validate({"title": "x", "extra": 1}) == []

    def test_pattern_properties_count_as_declared(self):
        schema = {"type": "object", "properties": {}, "patternProperties": {"^data-": {"type": "string"}}}
        assert StructuralSchema(schema).validate({"data-id": "1"}) == []

    def test_caller_document_not_mutated(self):
        document = {"type": "object", "properties": {"a": {"type": "string"}}}
        StructuralSchema(document)
        assert "additionalProperties" not in document

    def test_invalid_schema_rejected(self):
        with pytest.raises(SchemaError):
            StructuralSchema({"type": 12})


class TestAsStructuralSchema:
    def test_mapping_wrapped(self):
        assert isinstance(as_structural_schema(BUTTON), StructuralSchema)

    def test_validating_object_passed_through(self):
        class AlwaysOk:
            def validate(self, attributes):
                return []

        schema = AlwaysOk()
        assert as_structural_schema(schema) is schema

    def test_other_values_rejected(self):
        with pytest.raises(TypeError):
            as_structural_schema(42)


class TestExplicitResolver:
    def test_exact_lookup_only(self):
        resolver = explicit_resolver({"Button": BUTTON})
        assert resolver.strategy is ResolverStrategy.EXPLICIT
        assert resolver("Button") is not None
        assert resolver("button") is None
        assert resolver("ButtonProps") is None

    def test_factory_calls_recognised(self):
        assert explicit_resolver({}).walker_config.factory_callees == ("createComponent",)


class TestPackageResolver:
    def test_tag_mapping_strategy(self):
        resolver = package_resolver("@shopify/app-bridge-ui-types")
        assert resolver.strategy is ResolverStrategy.TAG_MAPPING
        assert resolver("s-button") is not None
        assert resolver("s-table-body") is not None
        assert resolver("s-unknown") is None
        assert resolver("Button") is None

    def test_conventional_naming_strategy(self):
        resolver = package_resolver("@shopify/ui-extensions/point-of-sale")
        assert resolver.strategy is ResolverStrategy.CONVENTIONAL_NAMING
        assert resolver("Button") is not None
        assert resolver("Screen") is not None
        assert resolver("Nope") is None
        assert resolver.walker_config.factory_callees == ("createComponent",)

    def test_react_package_has_no_factory_rule(self):
        resolver = package_resolver("@shopify/ui-extensions-react/point-of-sale")
        assert resolver.walker_config.factory_callees == ()
        assert resolver("Text") is not None

    def test_unsupported_package(self):
        with pytest.raises(UnsupportedPackageError) as excinfo:
            package_resolver("@acme/widgets")
        message = str(excinfo.value)
        assert message.startswith("Unsupported package: @acme/widgets. Supported packages are: ")
        assert "@shopify/app-bridge-ui-types" in message


class TestBuildResolver:
    def test_explicit(self):
        assert build_resolver(schemas={"Button": BUTTON}).strategy is ResolverStrategy.EXPLICIT

    def test_package(self):
        resolver = build_resolver(package_name="@shopify/app-bridge-ui-types")
        assert resolver.package_name == "@shopify/app-bridge-ui-types"

    @pytest.mark.parametrize("kwargs", [{}, {"schemas": {}, "package_name": "x"}])
    def test_exactly_one_spec(self, kwargs):
        with pytest.raises(ValueError):
            build_resolver(**kwargs)


class TestBuiltinPackages:
    def test_registry(self):
        assert set(PACKAGES) == {APP_HOME.name, POINT_OF_SALE.name, POINT_OF_SALE_REACT.name}

    def test_every_mapped_type_has_a_schema(self):
        resolver = package_resolver(APP_HOME.name)
        for tag, type_name in APP_HOME.tag_to_type.items():
            assert f"{type_name}Schema" in APP_HOME.schemas, tag
            assert resolver(tag) is not None, tag

    @pytest.mark.parametrize("tag", [
        "s-date-picker",
        "s-password-field",
        "s-query-container",
        "s-search-field",
    ])
    def test_app_home_form_and_layout_tags_resolve(self, tag):
        assert package_resolver(APP_HOME.name)(tag) is not None

    @pytest.mark.parametrize("package", [POINT_OF_SALE, POINT_OF_SALE_REACT], ids=lambda p: p.name)
    @pytest.mark.parametrize("tag", [
        "CameraScanner",
        "CameraScannerBanner",
        "DateField",
        "NewTextField",
        "PinPad",
        "PrintPreview",
        "RadioButtonList",
        "ScreenPresentation",
        "SecondaryAction",
        "SegmentedControl",
        "TimeField",
        "TimePicker",
        "ToggleSwitch",
    ])
    def test_point_of_sale_tags_resolve(self, package, tag):
        assert package_resolver(package.name)(tag) is not None

    def test_every_point_of_sale_schema_resolves_by_tag(self):
        resolver = package_resolver(POINT_OF_SALE_REACT.name)
        for name in POINT_OF_SALE_REACT.schemas:
            tag = name[: -len("PropsSchema")] if name.endswith("PropsSchema") else name[: -len("Schema")]
            assert resolver(tag) is not None, name

    @pytest.mark.parametrize("package", [APP_HOME, POINT_OF_SALE], ids=lambda p: p.name)
    def test_schemas_are_valid_json_schema(self, package):
        for name, document in package.schemas.items():
            Draft202012Validator.check_schema(document)
