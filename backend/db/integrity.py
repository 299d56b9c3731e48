"""
Order total audit.

orders.total is stored independently of order_items, and the sample data
ships with totals that disagree with their lines. This audit recomputes
each total from quantity * unit_price and reports the differences.
"""

from dataclasses import dataclass
from decimal import Decimal

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from db.models import Order

CENTS = Decimal("0.01")


@dataclass(frozen=True)
class OrderTotalMismatch:
    order_id: int
    stored_total: Decimal
    calculated_total: Decimal

    @property
    def difference(self) -> Decimal:
        return self.stored_total - self.calculated_total


def calculated_total(order: Order) -> Decimal:
    total = sum((Decimal(item.quantity) * Decimal(item.unit_price) for item in order.items), Decimal("0"))
    return total.quantize(CENTS)


async def audit_order_totals(db: AsyncSession) -> list[OrderTotalMismatch]:
    """Orders whose stored total differs from the sum of their line items."""
    result = await db.execute(select(Order).options(selectinload(Order.items)).order_by(Order.order_id))
    mismatches = []
    for order in result.scalars():
        stored = Decimal(order.total or 0).quantize(CENTS)
        calculated = calculated_total(order)
        if stored != calculated:
            mismatches.append(OrderTotalMismatch(order.order_id, stored, calculated))
    return mismatches
