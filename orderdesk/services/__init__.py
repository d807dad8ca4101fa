"""
Service Layer - Business Logic

Author: TM3
Date: 2025-10-17
"""
from orderdesk.services.order_line_builder import OrderLinePlan, build_order_lines
from orderdesk.services.create_order_service import (
    CreateOrderResult,
    CreateOrderService,
    create_order,
)

__all__ = [
    'OrderLinePlan',
    'build_order_lines',
    'CreateOrderResult',
    'CreateOrderService',
    'create_order',
]
