"""
Tests for TypeSpec rendering: enums, models and full documents.
"""
from generation.enum_generator import (
    format_enum_member,
    generate_enum_namespaces,
    get_enum_type,
    group_enums_by_model,
)
from generation.model_formatter import format_field, format_model_definition
from generation.templates import EMPTY_MODELS_PLACEHOLDER, render_document
from generator.config import GeneratorConfig
from parsing.models import EnumDefinition, Field, TableModel


def _company() -> TableModel:
    return TableModel(
        name="Company",
        table_name="companies",
        comment="Client companies",
        primary_key="id",
        fields=[
            Field(name="id", type="int64", nullable=False),
            Field(name="name", type="string", nullable=False,
                  description="Legal name", metadata="limit: 100"),
            Field(name="status", type="int32", nullable=True, metadata="default: 0"),
        ],
    )


STATUS_ENUM = EnumDefinition(field_name="status", model_name="Company", values=["active", "archived"])


class TestEnumGenerator:
    """Test enum namespace generation."""

    def test_no_enums_renders_nothing(self):
        assert generate_enum_namespaces([]) == ""

    def test_namespace_per_model(self):
        enums = [
            STATUS_ENUM,
            EnumDefinition(field_name="round_status", model_name="Company", values=["series_a"]),
            EnumDefinition(field_name="role", model_name="User", values=["admin"]),
        ]
        assert generate_enum_namespaces(enums) == (
            "  namespace CompanyEnums {\n"
            "    enum Status {\n"
            "      active,\n"
            "      archived,\n"
            "    }\n"
            "\n"
            "    enum RoundStatus {\n"
            "      series_a,\n"
            "    }\n"
            "  }\n"
            "\n"
            "  namespace UserEnums {\n"
            "    enum Role {\n"
            "      admin,\n"
            "    }\n"
            "  }"
        )

    def test_group_keeps_first_seen_order(self):
        enums = [
            EnumDefinition(field_name="a", model_name="User", values=["x"]),
            EnumDefinition(field_name="b", model_name="Company", values=["y"]),
            EnumDefinition(field_name="c", model_name="User", values=["z"]),
        ]
        grouped = group_enums_by_model(enums)
        assert list(grouped) == ["User", "Company"]
        assert [e.field_name for e in grouped["User"]] == ["a", "c"]

    def test_get_enum_type(self):
        assert get_enum_type("status", "Company", [STATUS_ENUM]) == "CompanyEnums.Status"
        assert get_enum_type("status", "User", [STATUS_ENUM]) is None
        assert get_enum_type("name", "Company", [STATUS_ENUM]) is None

    def test_member_quoting(self):
        assert format_enum_member("series_a") == "series_a"
        assert format_enum_member("in-progress") == "`in-progress`"
        assert format_enum_member("1st") == "`1st`"


class TestModelFormatter:
    """Test model rendering."""

    def test_model_definition(self):
        assert format_model_definition(_company()) == (
            "  /** Client companies */\n"
            "  model Company {\n"
            "    id: int64;\n"
            "    /** Legal name */\n"
            "    name: string; // limit: 100\n"
            "    status: int32 | null; // default: 0\n"
            "  }"
        )

    def test_enum_field_uses_enum_type(self):
        rendered = format_model_definition(_company(), [STATUS_ENUM])
        assert "    status: CompanyEnums.Status | null; // default: 0" in rendered

    def test_optional_marker(self):
        field = Field(name="nickname", type="string", nullable=True)
        assert format_field(field, "User", [], optional_marker=True) == "    nickname?: string | null;"
        required = Field(name="email", type="string", nullable=False)
        assert format_field(required, "User", [], optional_marker=True) == "    email: string;"


class TestRenderDocument:
    """Test full document rendering."""

    def test_empty_document(self):
        assert render_document([], []) == (
            'import "@typespec/http";\n'
            'import "@typespec/openapi3";\n'
            "using TypeSpec.Http;\n"
            "\n"
            '@service(#{ title: "Rails API" })\n'
            '@server("http://localhost:3000", "api")\n'
            '@route("/api/v1")\n'
            "namespace Api {\n"
            f"{EMPTY_MODELS_PLACEHOLDER}\n"
            "}\n"
        )

    def test_enums_before_models(self):
        document = render_document([_company()], [STATUS_ENUM])
        assert document.index("namespace CompanyEnums {") < document.index("model Company {")
        assert document.endswith("  }\n}\n")

    def test_config_controls_preamble(self):
        config = GeneratorConfig(service_title="Shop API", namespace="Shop", route_prefix="/v2")
        document = render_document([_company()], [], config)
        assert '@service(#{ title: "Shop API" })' in document
        assert '@route("/v2")' in document
        assert "namespace Shop {" in document

    def test_deterministic(self):
        assert render_document([_company()], [STATUS_ENUM]) == render_document([_company()], [STATUS_ENUM])
