"""
Order line builder

Pure computation: matches requested lines against looked-up products,
checks stock and prices every line. Nothing is written here; stock
decrements are staged in an explicit {product_id: new_quantity} mapping
and the looked-up products are never mutated.

Author: TM3
Date: 2025-10-17
"""
from dataclasses import dataclass, field
from typing import Dict, Iterable, List

from orderdesk.domain.errors import OrderCreationError, OrderError
from orderdesk.domain.order import OrderLine, OrderProductRequest
from orderdesk.domain.product import Product


@dataclass
class OrderLinePlan:
    """Priced lines plus the stock decrements they require"""
    lines: List[OrderLine] = field(default_factory=list)
    new_quantities: Dict[str, int] = field(default_factory=dict)
    products: Dict[str, Product] = field(default_factory=dict)

    @property
    def updated_products(self) -> List[Product]:
        """Copies of the decremented products carrying their new quantities"""
        return [
            self.products[product_id].with_quantity(quantity)
            for product_id, quantity in self.new_quantities.items()
        ]


def build_order_lines(
    requests: Iterable[OrderProductRequest],
    products: Iterable[Product],
) -> OrderLinePlan:
    """
    Validate requested lines against products and price them

    Lines are processed in the order given. Several lines for the same
    product draw from the same stock: each one is checked against the
    quantity left by the previous ones.

    Args:
        requests: Requested product IDs and quantities
        products: Products returned by the batch lookup

    Returns:
        OrderLinePlan with one OrderLine per request

    Raises:
        OrderCreationError: On the first unknown product or stock shortage
    """
    by_id = {product.id: product for product in products}
    new_quantities: Dict[str, int] = {}
    lines: List[OrderLine] = []

    for request in requests:
        product = by_id.get(request.id)
        if product is None:
            raise OrderCreationError(OrderError.product_not_found(request.id))

        available = new_quantities.get(product.id, product.quantity)
        if request.quantity > available:
            raise OrderCreationError(OrderError.insufficient_stock(
                product_id=product.id,
                product_name=product.name,
                requested=request.quantity,
                available=available,
            ))

        new_quantities[product.id] = available - request.quantity
        lines.append(OrderLine(
            product_id=product.id,
            quantity=request.quantity,
            price=product.price,
        ))

    return OrderLinePlan(lines=lines, new_quantities=new_quantities, products=by_id)
