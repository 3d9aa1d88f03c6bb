"""
Order Status Enum.

Only PENDING is assigned today; the rest are reserved for later
workflow stages.
"""
from enum import Enum


class OrderStatus(str, Enum):
    """Order status values."""

    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    SHIPPED = "SHIPPED"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"
