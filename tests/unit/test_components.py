"""
Unit tests for component schema validation.
Tests: validate_component_codeblock with explicit mappings and built-in
       packages, check_usage.
"""
from codecheck.models.component import ComponentUsage, ExpressionValue
from codecheck.models.validation import Verdict
from codecheck.validations.components import check_usage, validate_component_codeblock
from codecheck.validations.structural_schema import StructuralSchema

APP_HOME = "@shopify/app-bridge-ui-types"
POS = "@shopify/ui-extensions/point-of-sale"
POS_REACT = "@shopify/ui-extensions-react/point-of-sale"


class TestExplicitSchemas:
    def test_declared_enum_value(self, button_schemas):
        outcome = validate_component_codeblock('<s-button variant="primary">x</s-button>', schemas=button_schemas)
        assert outcome.verdict is Verdict.SUCCESS
        assert outcome.detail == "All components validated successfully. Found components: s-button."

    def test_undeclared_attribute(self, button_schemas):
        outcome = validate_component_codeblock(
            '<s-button variant="primary" appearance="critical">x</s-button>', schemas=button_schemas
        )
        assert outcome.verdict is Verdict.FAILED
        assert "appearance" in outcome.detail
        assert outcome.detail == (
            "Validation errors: s-button validation failed: "
            "Property 'appearance': attribute is not declared by the schema"
        )

    def test_found_components_listed_once(self, button_schemas):
        code = "<s-button>a</s-button><s-button>b</s-button><s-text>c</s-text>"
        outcome = validate_component_codeblock(code, schemas=button_schemas)
        assert outcome.detail.endswith("Found components: s-button, s-text.")

    def test_unknown_component(self, button_schemas):
        outcome = validate_component_codeblock("<s-badge>New</s-badge>", schemas=button_schemas)
        assert outcome.verdict is Verdict.FAILED
        assert outcome.detail == "Validation errors: Unknown component: s-badge"

    def test_every_problem_reported(self, button_schemas):
        code = '<s-button variant="huge">a</s-button><s-badge>b</s-badge>'
        outcome = validate_component_codeblock(code, schemas=button_schemas)
        assert "s-button validation failed: Property 'variant'" in outcome.detail
        assert "Unknown component: s-badge" in outcome.detail

    def test_generic_elements_ignored(self, button_schemas):
        outcome = validate_component_codeblock("<div><p>Only markup</p></div>", schemas=button_schemas)
        assert outcome.verdict is Verdict.SUCCESS
        assert outcome.detail == "No components found to validate."

    def test_fenced_input(self, button_schemas):
        code = "```tsx\n<!-- primary action -->\n<s-button variant=\"secondary\">Save</s-button>\n```"
        assert validate_component_codeblock(code, schemas=button_schemas).verdict is Verdict.SUCCESS

    def test_custom_validating_object(self):
        class RejectAll:
            def validate(self, attributes):
                return ["Property 'root': not allowed here"]

        outcome = validate_component_codeblock("<Thing />", schemas={"Thing": RejectAll()})
        assert outcome.verdict is Verdict.FAILED
        assert "Thing validation failed: Property 'root': not allowed here" in outcome.detail

    def test_malformed_schema_document(self):
        outcome = validate_component_codeblock("<Thing />", schemas={"Thing": {"type": 12}})
        assert outcome.verdict is Verdict.FAILED
        assert outcome.detail.startswith("Invalid input: schemas:")

    def test_validator_exception_becomes_failed(self):
        class Broken:
            def validate(self, attributes):
                raise RuntimeError("schema backend unavailable")

        outcome = validate_component_codeblock("<Thing />", schemas={"Thing": Broken()})
        assert outcome.verdict is Verdict.FAILED
        assert outcome.detail == "Failed to parse code block: schema backend unavailable"


class TestExpressionAttributes:
    def test_value_constraint_becomes_note(self, button_schemas):
        outcome = validate_component_codeblock("<s-button variant={kind}>Go</s-button>", schemas=button_schemas)
        assert outcome.verdict is Verdict.SUCCESS
        assert "s-button: attribute 'variant' is present but unverifiable (expression kind)" in outcome.detail

    def test_undeclared_expression_attribute_fails(self, button_schemas):
        outcome = validate_component_codeblock("<s-button appearance={kind}>Go</s-button>", schemas=button_schemas)
        assert outcome.verdict is Verdict.FAILED
        assert "appearance" in outcome.detail

    def test_check_usage_splits_problems_and_notes(self, button_schemas):
        usage = ComponentUsage(
            "s-button",
            {"variant": ExpressionValue("kind"), "disabled": "yes"},
        )
        problem, notes = check_usage(usage, StructuralSchema(button_schemas["s-button"]))
        assert problem == "s-button validation failed: Property 'disabled': 'yes' is not of type 'boolean'"
        assert len(notes) == 1


class TestBuiltinPackages:
    def test_app_home_button(self):
        outcome = validate_component_codeblock('<s-button variant="primary">Save</s-button>', package_name=APP_HOME)
        assert outcome.verdict is Verdict.SUCCESS

    def test_app_home_undeclared_attribute(self):
        outcome = validate_component_codeblock('<s-button appearance="primary">Save</s-button>', package_name=APP_HOME)
        assert outcome.verdict is Verdict.FAILED
        assert "appearance" in outcome.detail

    def test_app_home_bad_enum_value(self):
        outcome = validate_component_codeblock('<s-button variant="huge">Save</s-button>', package_name=APP_HOME)
        assert outcome.verdict is Verdict.FAILED
        assert "Property 'variant'" in outcome.detail

    def test_app_home_numeric_attributes(self):
        code = '<s-number-field label="Quantity" min="1" max="10" step="1"></s-number-field>'
        assert validate_component_codeblock(code, package_name=APP_HOME).verdict is Verdict.SUCCESS

    def test_app_home_unknown_tag(self):
        outcome = validate_component_codeblock("<s-carousel></s-carousel>", package_name=APP_HOME)
        assert outcome.verdict is Verdict.FAILED
        assert "Unknown component: s-carousel" in outcome.detail

    def test_pos_factory_call(self):
        code = (
            "const button = root.createComponent(Button, {title: 'Pay', onPress: () => pay()});\n"
            "root.append(button);\n"
        )
        outcome = validate_component_codeblock(code, package_name=POS)
        assert outcome.verdict is Verdict.SUCCESS
        assert "Found components: Button." in outcome.detail

    def test_pos_react_ignores_factory_calls(self):
        code = "const button = root.createComponent(Button, {title: 'Pay'});"
        outcome = validate_component_codeblock(code, package_name=POS_REACT)
        assert outcome.detail == "No components found to validate."

    def test_pos_react_markup(self):
        code = '<Screen name="Home" title="Home"><Text variant="body">Hi</Text></Screen>'
        outcome = validate_component_codeblock(code, package_name=POS_REACT)
        assert outcome.verdict is Verdict.SUCCESS
        assert "Found components: Screen, Text." in outcome.detail

    def test_app_home_search_and_password_fields(self):
        code = (
            '<s-search-field label="Search" placeholder="Find products"></s-search-field>\n'
            '<s-password-field label="Password" minLength="8" required></s-password-field>\n'
        )
        outcome = validate_component_codeblock(code, package_name=APP_HOME)
        assert outcome.verdict is Verdict.SUCCESS
        assert "Unknown component" not in outcome.detail

    def test_app_home_date_picker_in_query_container(self):
        code = (
            '<s-query-container containerName="sidebar">'
            '<s-date-picker type="range" name="period"></s-date-picker>'
            "</s-query-container>"
        )
        outcome = validate_component_codeblock(code, package_name=APP_HOME)
        assert outcome.verdict is Verdict.SUCCESS

    def test_pos_react_date_field(self):
        outcome = validate_component_codeblock('<DateField label="Date" />', package_name=POS_REACT)
        assert outcome.verdict is Verdict.SUCCESS
        assert "Found components: DateField." in outcome.detail

    def test_pos_react_segmented_control(self):
        code = '<SegmentedControl segments={segments} selected="day" onSelect={(id) => setSelected(id)} />'
        outcome = validate_component_codeblock(code, package_name=POS_REACT)
        assert "Unknown component" not in outcome.detail
        assert outcome.verdict is Verdict.SUCCESS

    def test_pos_toggle_switch_without_props_suffix(self):
        outcome = validate_component_codeblock("<ToggleSwitch value={enabled} />", package_name=POS_REACT)
        assert outcome.verdict is Verdict.SUCCESS

    def test_pos_missing_required(self):
        outcome = validate_component_codeblock('<Badge text="New" />', package_name=POS_REACT)
        assert outcome.verdict is Verdict.FAILED
        assert "Property 'variant': required attribute is missing" in outcome.detail


class TestInputShape:
    def test_unsupported_package(self):
        outcome = validate_component_codeblock("<Button />", package_name="@acme/widgets")
        assert outcome.verdict is Verdict.FAILED
        assert outcome.detail.startswith("Unsupported package: @acme/widgets.")

    def test_both_resolver_specs(self, button_schemas):
        outcome = validate_component_codeblock("<Button />", schemas=button_schemas, package_name=APP_HOME)
        assert outcome.verdict is Verdict.FAILED
        assert outcome.detail.startswith("Invalid input:")

    def test_no_resolver_spec(self):
        outcome = validate_component_codeblock("<Button />")
        assert outcome.detail.startswith("Invalid input:")

    def test_empty_code(self, button_schemas):
        outcome = validate_component_codeblock("", schemas=button_schemas)
        assert outcome.detail.startswith("Invalid input:")
