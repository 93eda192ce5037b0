"""Map connector resources to PrestaShop webservice endpoints."""
from typing import Optional
from difflib import SequenceMatcher


class EndpointMapper:
    """Maps resource names to webservice endpoints and XML entity names."""

    # Resource name (singular or plural) -> collection endpoint
    MAPPING = {
        # Customers
        'customer': 'customers',
        'customers': 'customers',

        # Orders
        'order': 'orders',
        'orders': 'orders',

        # Products
        'product': 'products',
        'products': 'products',

        # Specific prices
        'specific_price': 'specific_prices',
        'specific_prices': 'specific_prices',
        'specificprice': 'specific_prices',

        # Stock
        'stock_available': 'stock_availables',
        'stock_availables': 'stock_availables',
        'stock': 'stock_availables',
    }

    # Collection endpoint -> singular element name used in XML bodies and
    # blank-schema responses
    ENTITIES = {
        'addresses': 'address',
        'carriers': 'carrier',
        'cart_rules': 'cart_rule',
        'carts': 'cart',
        'categories': 'category',
        'combinations': 'combination',
        'configurations': 'configuration',
        'countries': 'country',
        'currencies': 'currency',
        'customer_messages': 'customer_message',
        'customer_threads': 'customer_thread',
        'customers': 'customer',
        'employees': 'employee',
        'groups': 'group',
        'languages': 'language',
        'manufacturers': 'manufacturer',
        'messages': 'message',
        'order_carriers': 'order_carrier',
        'order_details': 'order_detail',
        'order_histories': 'order_history',
        'order_payments': 'order_payment',
        'order_states': 'order_state',
        'orders': 'order',
        'products': 'product',
        'shop_groups': 'shop_group',
        'shops': 'shop',
        'specific_price_rules': 'specific_price_rule',
        'specific_prices': 'specific_price',
        'stock_availables': 'stock_available',
        'stores': 'store',
        'suppliers': 'supplier',
        'tags': 'tag',
    }

    @staticmethod
    def get_endpoint(resource: str) -> Optional[str]:
        """
        Get the collection endpoint for a resource name.

        Uses exact match first, then fuzzy matching for high confidence.

        Args:
            resource: Resource name (e.g. "customer", "Specific Price")

        Returns:
            str: Endpoint (e.g. "customers"), or None if no mapping found
        """
        if not resource:
            return None

        key = resource.lower().strip().replace(' ', '_').replace('-', '_')

        if key in EndpointMapper.MAPPING:
            return EndpointMapper.MAPPING[key]

        if key in EndpointMapper.ENTITIES:
            return key

        best_match = None
        best_score = 0

        for name, endpoint in EndpointMapper.MAPPING.items():
            similarity = SequenceMatcher(None, key, name).ratio()
            if similarity > best_score and similarity >= 0.8:
                best_score = similarity
                best_match = endpoint

        return best_match

    @staticmethod
    def get_entity(endpoint: str) -> str:
        """
        Get the singular element name for an endpoint.

        Args:
            endpoint: Collection endpoint (e.g. "specific_prices")

        Returns:
            str: Entity name (e.g. "specific_price")
        """
        endpoint = endpoint.strip('/').split('/')[0]
        if endpoint in EndpointMapper.ENTITIES:
            return EndpointMapper.ENTITIES[endpoint]
        if endpoint.endswith('ies'):
            return endpoint[:-3] + 'y'
        if endpoint.endswith('s'):
            return endpoint[:-1]
        return endpoint

    @staticmethod
    def get_all_endpoints() -> list:
        """
        Get list of all known collection endpoints.

        Returns:
            list: Sorted endpoints
        """
        return sorted(EndpointMapper.ENTITIES.keys())
