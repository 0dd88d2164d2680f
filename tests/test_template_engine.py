"""
Test the Jinja2 template engine and naming filters.

This test validates that the naming functions are usable from templates and
that rendered output goes through declaration spacing.
"""

from pathlib import Path

import pytest
from jinja2 import TemplateNotFound

from proto_oas_generator.generator.filters import FILTERS, endpoint_name, proto_comment
from proto_oas_generator.generator.template_engine import ProtoTemplateEngine
from proto_oas_generator.naming.endpoint import Endpoint

SERVICE_TEMPLATE = """service {{ title | service_name }} {
}
{% for name in messages %}
message {{ name | camel_case }} {
}
{% endfor %}
"""


class TestProtoTemplateEngine:
    """Test class for template rendering."""

    @pytest.fixture
    def engine(self, tmp_path: Path) -> ProtoTemplateEngine:
        """Create an engine loading templates from a temporary directory."""
        (tmp_path / "service.proto.j2").write_text(SERVICE_TEMPLATE, encoding="utf-8")
        return ProtoTemplateEngine(tmp_path)

    def test_all_filters_registered(self, engine: ProtoTemplateEngine) -> None:
        """Test that every naming filter is available to templates."""
        for name in FILTERS:
            assert name in engine.env.filters

    def test_render_template_cleans_spacing(self, engine: ProtoTemplateEngine) -> None:
        """Test that rendered templates get one blank line between declarations."""
        rendered = engine.render_template(
            "service.proto.j2",
            {"title": "Pet Store", "messages": ["pet", "error_response"]},
        )
        assert rendered == (
            "service PetStoreService {\n}\n\nmessage Pet {\n}\n\nmessage ErrorResponse {\n}\n"
        )

    def test_missing_template(self, engine: ProtoTemplateEngine) -> None:
        """Test that unknown templates raise."""
        with pytest.raises(TemplateNotFound):
            engine.render_template("missing.proto.j2", {})

    def test_render_string_name_filters(self, engine: ProtoTemplateEngine) -> None:
        """Test the package, service and enum filters."""
        assert engine.render_string("{{ 'Pet Store!' | package_name }}", {}) == "petstore_"
        assert engine.render_string("{{ 'pet store' | service_name }}", {}) == "petStoreService"
        assert engine.render_string("{{ 'Cats & Dogs' | enum_name }}", {}) == "Cats_AND_Dogs"
        assert engine.render_string("{{ 'Status' | enum_value_name('in stock') }}", {}) == "STATUS_IN_STOCK"
        assert engine.render_string("{{ 'listPets_json' | operation_name }}", {}) == "Listpets"

    def test_render_string_endpoint_filter(self, engine: ProtoTemplateEngine) -> None:
        """Test naming endpoints from paths, mappings and Endpoint objects."""
        assert engine.render_string("{{ '/pets/{petId}' | endpoint_name('get') }}", {}) == "GetPetsPetId"
        assert engine.render_string("{{ op | endpoint_name }}", {"op": {"path": "/pets", "verb": "get"}}) == "GetPets"
        assert (
            engine.render_string("{{ Endpoint('/pets', 'get', 'list pets') | endpoint_name }}", {}) == "ListPets"
        )

    def test_render_string_comment_filter(self, engine: ProtoTemplateEngine) -> None:
        """Test that descriptions render as comment lines."""
        rendered = engine.render_string("{{ doc | proto_comment(2) }}", {"doc": "Pets\nin the store"})
        assert rendered == "  // Pets\n  // in the store"


class TestFilters:
    """Test class for filter helpers."""

    def test_endpoint_name_accepts_operation_id_key(self) -> None:
        """Test both operationId spellings in mappings."""
        assert endpoint_name({"path": "/pets", "verb": "get", "operationId": "listPets"}) == "Listpets"
        assert endpoint_name({"path": "/pets", "verb": "get", "operation_id": "list-pets"}) == "ListPets"

    def test_endpoint_name_accepts_endpoint(self) -> None:
        """Test naming an Endpoint instance."""
        assert endpoint_name(Endpoint(path="/pets.json", verb="list")) == "ListPets"

    def test_proto_comment(self) -> None:
        """Test comment formatting edge cases."""
        assert proto_comment("") == ""
        assert proto_comment("  Pets  ") == "// Pets"
        assert proto_comment("a\n\nb") == "// a\n//\n// b"

    def test_endpoint_name_null_fields(self) -> None:
        """Test that null path and verb values from JSON are treated as empty."""
        assert endpoint_name({"path": None, "verb": "get"}) == "Get"
        assert endpoint_name({"path": "/pets", "verb": None}) == "Pets"
        assert endpoint_name({"path": None, "verb": None, "operationId": None}) == ""
