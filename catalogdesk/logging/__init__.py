from .product_payloads import product_to_loggable, products_to_loggable

__all__ = ["product_to_loggable", "products_to_loggable"]
