"""Customer account navigation model (public store "My account" menu)."""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Literal

from paypal_commerce.domain.models.model_kind import ModelKind


class CustomerNavigationTab(IntEnum):
    """Built-in customer navigation tabs (platform numbering)."""

    INFO = 0
    ADDRESSES = 10
    ORDERS = 20
    BACK_IN_STOCK_SUBSCRIPTIONS = 30
    RETURN_REQUESTS = 40
    DOWNLOADABLE_PRODUCTS = 50
    REWARD_POINTS = 60
    CHANGE_PASSWORD = 70
    AVATAR = 80
    FORUM_SUBSCRIPTIONS = 90
    PRODUCT_REVIEWS = 100
    VENDOR_INFO = 110
    GDPR_TOOLS = 120
    CHECK_GIFT_CARD_BALANCE = 130
    MULTI_FACTOR_AUTHENTICATION = 140


@dataclass(kw_only=True)
class CustomerNavigationItem:
    """One entry of the customer navigation menu.

    Attributes:
        route_name: Route the entry links to.
        title: Localized title.
        tab: Tab number (built-in CustomerNavigationTab or a plugin's own).
        item_class: CSS class of the entry.
    """

    route_name: str
    title: str
    tab: int
    item_class: str = ""


@dataclass(kw_only=True)
class CustomerNavigationModel:
    """Customer navigation menu (mutable, handlers edit it in place).

    Attributes:
        items: Menu entries in display order.
        selected_tab: Currently selected tab.
    """

    items: list[CustomerNavigationItem] = field(default_factory=list)
    selected_tab: int = CustomerNavigationTab.INFO
    kind: Literal[ModelKind.CUSTOMER_NAVIGATION] = field(
        default=ModelKind.CUSTOMER_NAVIGATION, init=False
    )

    def index_of_tab(self, tab: int) -> int:
        """Return the index of the first item with the given tab, or -1."""
        for index, item in enumerate(self.items):
            if item.tab == tab:
                return index
        return -1
