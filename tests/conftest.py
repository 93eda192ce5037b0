"""Shared fixtures."""

from unittest.mock import Mock

import pytest

from prestashop_connector.api.prestashop_client import PrestaShopClient


@pytest.fixture
def mock_client():
    """Client double: canned responses, real collection extraction"""
    client = Mock()
    client.request.return_value = {}
    client.get_blank_schema.return_value = {}
    client.extract_collection.side_effect = PrestaShopClient.extract_collection
    return client
