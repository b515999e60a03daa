"""Order state service - selections and running totals for one order"""

import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Callable, Dict, List, Optional

from app.exceptions import ServiceValidationError
from domain.enums import Category
from domain.models import MenuItem, OrderSnapshot
from repositories.menu_repository import MenuCatalog

logger = logging.getLogger("lunchtray.order")

TAX_RATE = Decimal("0.08")
CENT = Decimal("0.01")
ZERO = Decimal("0.00")

OrderListener = Callable[[OrderSnapshot], None]


def calculate_tax(subtotal: Decimal, tax_rate: Decimal) -> Decimal:
    """Tax on a subtotal, rounded half-up to whole cents."""
    return (subtotal * tax_rate).quantize(CENT, rounding=ROUND_HALF_UP)


class OrderState:
    """
    Authoritative holder of an in-progress order.

    An order has at most one entree, one side and one accompaniment. Selecting
    a category again replaces the previous item. Subtotal, tax and total are
    derived from the current selections and are consistent whenever a public
    method returns.

    Not thread-safe: one owner drives an order at a time (see
    OrderSessionRegistry for the shared case).
    """

    def __init__(self, catalog: MenuCatalog, tax_rate: Decimal = TAX_RATE):
        tax_rate = Decimal(str(tax_rate))
        if not 0 <= tax_rate <= 1:
            raise ServiceValidationError(
                "Tax rate must be between 0 and 1", details={"tax_rate": str(tax_rate)}
            )
        self._catalog = catalog
        self._tax_rate = tax_rate
        self._selections: Dict[Category, Optional[MenuItem]] = {c: None for c in Category}
        self._subtotal = ZERO
        self._tax = ZERO
        self._total = ZERO
        self._listeners: List[OrderListener] = []

    # ------------------------------------------------------------------
    # Read accessors
    # ------------------------------------------------------------------

    @property
    def entree(self) -> Optional[MenuItem]:
        return self._selections[Category.ENTREE]

    @property
    def side(self) -> Optional[MenuItem]:
        return self._selections[Category.SIDE]

    @property
    def accompaniment(self) -> Optional[MenuItem]:
        return self._selections[Category.ACCOMPANIMENT]

    @property
    def subtotal(self) -> Decimal:
        return self._subtotal

    @property
    def tax(self) -> Decimal:
        return self._tax

    @property
    def total(self) -> Decimal:
        return self._total

    @property
    def tax_rate(self) -> Decimal:
        return self._tax_rate

    def selection(self, category: Category) -> Optional[MenuItem]:
        """Current item for a category, or None when the category is unset"""
        return self._selections[Category(category)]

    def selections(self) -> Dict[Category, Optional[MenuItem]]:
        """Copy of all three selections keyed by category"""
        return dict(self._selections)

    def snapshot(self) -> OrderSnapshot:
        """Immutable view of the current selections and totals"""
        return OrderSnapshot(
            entree=self.entree,
            side=self.side,
            accompaniment=self.accompaniment,
            subtotal=self._subtotal,
            tax=self._tax,
            total=self._total,
        )

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def set_entree(self, name: str) -> MenuItem:
        """Select (or replace) the entree by catalog name."""
        return self.select(Category.ENTREE, name)

    def set_side(self, name: str) -> MenuItem:
        """Select (or replace) the side by catalog name."""
        return self.select(Category.SIDE, name)

    def set_accompaniment(self, name: str) -> MenuItem:
        """Select (or replace) the accompaniment by catalog name."""
        return self.select(Category.ACCOMPANIMENT, name)

    def select(self, category: Category, name: str) -> MenuItem:
        """
        Put the named catalog item into a category, replacing any previous one.

        The lookup happens before anything is changed, so a failed lookup
        leaves the order exactly as it was.

        Args:
            category: Slot to fill
            name: Catalog name of the item

        Returns:
            The MenuItem now selected for the category

        Raises:
            CatalogLookupError: If the catalog has no such item in the category
        """
        category = Category(category)
        item = self._catalog.lookup(category, name)

        previous = self._selections[category]
        self._selections[category] = item
        self._recalculate()

        if previous is None:
            logger.info(f"Selected {category.value} '{item.key}' ({item.price})")
        else:
            logger.info(
                f"Replaced {category.value} '{previous.key}' ({previous.price}) "
                f"with '{item.key}' ({item.price})"
            )
        logger.debug(f"Order totals: subtotal={self._subtotal} tax={self._tax} total={self._total}")

        self._notify()
        return item

    def reset_order(self) -> None:
        """Clear every selection and zero the totals."""
        for category in Category:
            self._selections[category] = None
        self._recalculate()
        logger.info("Order reset")
        self._notify()

    def _recalculate(self) -> None:
        # Always re-summed from the selections; nothing is carried between calls.
        self._subtotal = sum(
            (item.price for item in self._selections.values() if item is not None),
            ZERO,
        )
        self._tax = calculate_tax(self._subtotal, self._tax_rate)
        self._total = self._subtotal + self._tax

    # ------------------------------------------------------------------
    # Change notification
    # ------------------------------------------------------------------

    def subscribe(self, listener: OrderListener) -> Callable[[], None]:
        """
        Register a listener called with a snapshot after every completed change.

        Returns:
            A callable that removes the listener; calling it twice is harmless.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        if not self._listeners:
            return
        snapshot = self.snapshot()
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception:
                logger.exception(f"Order listener {listener!r} failed")
