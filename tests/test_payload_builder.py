"""
Unit tests for PayloadBuilder Module

Tests:
- overlay: Merge precedence and empty-value handling
- PayloadBuilder.build_create: Blank schema seeding, read-only stripping
- PayloadBuilder.build_update: Partial payloads
- PayloadBuilder.to_xml: Entity envelopes
"""

import xml.etree.ElementTree as ET

import pytest

from prestashop_connector.builder import (
    CUSTOMER_PAYLOAD,
    PRODUCT_PAYLOAD,
    PayloadBuilder,
    TranslatableField,
    overlay,
)


# ============================================================================
# FIXTURES
# ============================================================================


@pytest.fixture
def product_template():
    """Blank schema as returned for products (JSON output)"""
    return {
        "id": "",
        "price": "",
        "state": "",
        "active": "",
        "date_add": "",
        "date_upd": "",
        "location": "",
        "supplier_reference": "",
        "cache_default_attribute": "",
        "quantity_discount": "",
        "associations": {"categories": []},
        "name": [{"id": "1", "value": ""}, {"id": "2", "value": ""}],
    }


@pytest.fixture
def builder(mock_client, product_template):
    mock_client.get_blank_schema.return_value = product_template
    return PayloadBuilder(mock_client)


# ============================================================================
# OVERLAY TESTS
# ============================================================================


class TestOverlay:
    """Test template merging"""

    def test_precedence(self):
        payload = overlay(
            {"a": "template", "b": "template", "c": "template"},
            required={"b": "required", "c": "required"},
            optional={"c": "optional"},
        )

        assert payload == {"a": "template", "b": "required", "c": "optional"}

    def test_empty_required_values_do_not_blank_template(self):
        payload = overlay({"price": "0.000000"}, required={"price": None, "note": ""})

        assert payload == {"price": "0.000000"}

    def test_inputs_not_modified(self):
        template = {"a": 1}
        overlay(template, required={"b": 2}, optional={"c": 3})

        assert template == {"a": 1}


# ============================================================================
# CREATE PATH TESTS
# ============================================================================


class TestBuildCreate:
    """Test creation payloads"""

    def test_fetches_blank_schema(self, builder, mock_client):
        builder.build_create(PRODUCT_PAYLOAD, required={"price": 10})

        mock_client.get_blank_schema.assert_called_once_with("products", "product")

    def test_readonly_fields_removed(self, builder):
        payload = builder.build_create(PRODUCT_PAYLOAD, required={"price": 10})

        for key in (
            "associations",
            "date_add",
            "date_upd",
            "location",
            "supplier_reference",
            "cache_default_attribute",
            "quantity_discount",
        ):
            assert key not in payload

    def test_readonly_fields_absent_from_xml(self, builder):
        payload = builder.build_create(PRODUCT_PAYLOAD, optional={"date_add": "2024-01-01"})
        xml = builder.to_xml(PRODUCT_PAYLOAD, payload)

        assert "<date_add>" not in xml
        assert "<associations>" not in xml

    def test_fields_overlaid_and_normalized(self, builder):
        payload = builder.build_create(
            PRODUCT_PAYLOAD,
            required={"price": 19.9, "state": 1},
            optional={"active": True},
        )

        assert payload["price"] == 19.9
        assert payload["state"] == 1
        assert payload["active"] == "1"

    def test_template_languages_become_translatable(self, builder):
        payload = builder.build_create(PRODUCT_PAYLOAD)

        assert isinstance(payload["name"], TranslatableField)
        assert len(payload["name"]) == 2

    def test_translatable_overrides_template(self, builder):
        payload = builder.build_create(
            PRODUCT_PAYLOAD,
            translatable={"name": {"translations": [{"id": 1, "value": "Shoe"}]}},
        )
        xml = builder.to_xml(PRODUCT_PAYLOAD, payload)

        name = ET.fromstring(xml).find("product/name")
        assert [(l.get("id"), l.text) for l in name] == [("1", "Shoe")]

    def test_list_template_uses_first_entry(self, mock_client):
        mock_client.get_blank_schema.return_value = [{"email": "", "date_add": ""}]

        payload = PayloadBuilder(mock_client).build_create(CUSTOMER_PAYLOAD)

        assert payload == {"email": ""}

    def test_requires_client(self):
        with pytest.raises(ValueError):
            PayloadBuilder().build_create(PRODUCT_PAYLOAD)


# ============================================================================
# UPDATE PATH TESTS
# ============================================================================


class TestBuildUpdate:
    """Test partial payloads"""

    def test_only_supplied_fields_and_id(self, mock_client):
        builder = PayloadBuilder(mock_client)

        payload = builder.build_update(
            CUSTOMER_PAYLOAD,
            12,
            required={"email": "a@b.com", "firstname": None, "lastname": ""},
            optional={"note": "", "newsletter": False},
        )

        assert payload == {"id": 12, "email": "a@b.com", "newsletter": "0"}
        mock_client.get_blank_schema.assert_not_called()

    def test_readonly_fields_removed(self):
        payload = PayloadBuilder().build_update(
            CUSTOMER_PAYLOAD, 3, optional={"date_upd": "2024-01-01", "company": "ACME"}
        )

        assert payload == {"id": 3, "company": "ACME"}

    def test_birthday_keeps_date_only(self):
        payload = PayloadBuilder().build_update(
            CUSTOMER_PAYLOAD, 3, required={"birthday": "1990-02-03T00:00:00"}
        )

        assert payload["birthday"] == "1990-02-03"
