"""Domain services for digital product rollups."""

from collections.abc import Iterable

from src.domain.models import DigitalProduct, ProductRollup, RankedProduct
from src.utils.decimal_utils import ZERO


def rank_products(products: Iterable[DigitalProduct]) -> list[RankedProduct]:
    """Rank products by unit sales, highest first.

    The sort is stable: products with equal sales keep their input order.
    """
    ordered = sorted(products, key=lambda product: product.sales, reverse=True)
    return [
        RankedProduct(rank=index, product=product)
        for index, product in enumerate(ordered, start=1)
    ]


def compute_product_rollup(
    products: Iterable[DigitalProduct],
) -> ProductRollup:
    """Aggregate sales, gross revenue and fees across products.

    Args:
        products: Digital products of a single account.

    Returns:
        ProductRollup: Totals and the sales ranking.
    """
    products = list(products)
    return ProductRollup(
        total_sales=sum(product.sales for product in products),
        total_gross=sum((product.gross_revenue for product in products), ZERO),
        total_fees=sum((product.platform_fee for product in products), ZERO),
        ranking=rank_products(products),
    )


__all__ = ["rank_products", "compute_product_rollup"]
