from .entities import PRODUCT_FIELDS, Draft, Product, ProductField, ProductId
from .helpers import clean_text, format_decimal, is_blank, parse_price, survives_float
from .serialization import as_draft, draft_to_product, product_from_payload, products_from_payload

__all__ = [
    "PRODUCT_FIELDS",
    "Draft",
    "Product",
    "ProductField",
    "ProductId",
    "as_draft",
    "clean_text",
    "draft_to_product",
    "format_decimal",
    "is_blank",
    "parse_price",
    "product_from_payload",
    "products_from_payload",
    "survives_float",
]
