"""
orderdesk - order placement backend

Validates order requests, decrements inventory and persists orders
with their priced lines.
"""
__version__ = "1.0.0"
