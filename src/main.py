from textual import on
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import LoadingIndicator

from utils.logger import get_logger
from utils.messages import QuitRequestedMessage
from utils.state import ShopState
from views.scr_cart import CartScreen
from views.scr_manage_catalog import ManageCatalogScreen
from views.scr_past_orders import PastOrdersScreen
from views.scr_prod_search import ProdSearchScreen

_logger = get_logger(__name__)


class ShopApp(App):
    BINDINGS = [
        Binding("ctrl+t", "switch_light", "Toggle Theme", show=True),
    ]

    MODES = {
        "prod_search": ProdSearchScreen,
        "cart": CartScreen,
        "past_orders": PastOrdersScreen,
        "catalog": ManageCatalogScreen,
    }

    MODE_TITLES = {
        "prod_search": "Search Products",
        "cart": "Cart",
        "past_orders": "Past Orders",
        "catalog": "Manage Catalog",
    }

    CSS_PATH = [
        "views/styles/index.tcss",
        "views/styles/search_prod.tcss",
        "views/styles/cart.tcss",
        "views/styles/past_orders.tcss",
        "views/styles/catalog.tcss",
    ]

    state: ShopState

    def __init__(self, state: ShopState | None = None):
        super().__init__()
        self.state = state or ShopState.demo()

    def compose(self) -> ComposeResult:
        yield LoadingIndicator()

    async def on_mount(self) -> None:
        _logger.debug(
            f"Starting with {len(self.state.catalog)} products "
            f"for shopper {self.state.user.uid}"
        )
        await self.switch_mode("prod_search")

    def action_switch_light(self):
        if self.theme == "textual-dark":
            self.theme = "solarized-light"
        else:
            self.theme = "textual-dark"
        self.notify(f"Theme changed to {self.theme}")

    @on(QuitRequestedMessage)
    def handle_quit(self):
        _logger.info(
            f"Quitting, {len(self.state.user.order_history)} order(s) this session"
        )
        self.exit()


def main() -> None:
    ShopApp().run()


if __name__ == "__main__":
    main()
