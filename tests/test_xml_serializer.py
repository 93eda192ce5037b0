"""Tests for XML write envelopes."""
import xml.etree.ElementTree as ET

from prestashop_connector.builder import TranslatableField, get_serializer, serialize_entity
from prestashop_connector.builder.multilang import Translation
from prestashop_connector.builder.xml_serializer import XML_DECLARATION, SERIALIZERS


class TestSerializeEntity:
    """Test envelope structure."""

    def test_envelope(self):
        xml = serialize_entity("order", {"id": 5, "current_state": 3})

        assert xml.startswith(XML_DECLARATION)
        root = ET.fromstring(xml.split("\n", 1)[1])
        assert root.tag == "prestashop"
        assert root[0].tag == "order"
        assert root.find("order/id").text == "5"
        assert root.find("order/current_state").text == "3"

    def test_none_is_empty_element(self):
        xml = serialize_entity("customer", {"note": None})
        assert "<note />" in xml

    def test_integral_float(self):
        root = ET.fromstring(serialize_entity("product", {"price": 20.0, "weight": 1.5}).split("\n", 1)[1])

        assert root.find("product/price").text == "20"
        assert root.find("product/weight").text == "1.5"

    def test_nested_and_repeated(self):
        payload = {"associations": {"categories": {"category": [{"id": 2}, {"id": 3}]}}}

        root = ET.fromstring(serialize_entity("product", payload).split("\n", 1)[1])

        ids = [c.find("id").text for c in root.findall("product/associations/categories/category")]
        assert ids == ["2", "3"]

    def test_translatable(self):
        payload = {"name": TranslatableField([Translation("1", "Shoe"), Translation("2", "Chaussure")])}

        xml = serialize_entity("product", payload)

        assert '<name><language id="1">Shoe</language><language id="2">Chaussure</language></name>' in xml

    def test_special_characters_escaped(self):
        xml = serialize_entity("order", {"note": "a < b & c"})
        assert "a &lt; b &amp; c" in xml


class TestGetSerializer:
    """Test serializer lookup."""

    def test_known_entities(self):
        for entity in ("customer", "order", "product", "specific_price", "stock_available"):
            assert get_serializer(entity) is SERIALIZERS[entity]

    def test_fallback(self):
        xml = get_serializer("address")({"city": "Lyon"})
        assert "<prestashop><address><city>Lyon</city></address></prestashop>" in xml
