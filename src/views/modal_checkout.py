from textual import events, on, work
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, MarkdownViewer

from store.cart import Cart
from store.models import User
from utils.logger import get_logger
from utils.pure import format_currency, generate_markdown_table
from views.modal_dialog import DialogModal

_logger = get_logger(__name__)


def order_summary_markdown(user: User, cart: Cart) -> str:
    headers = ["Product Name", "Unit Price", "Quantity", "Total Price"]
    rows = [
        [
            line.product.name,
            format_currency(line.product.price),
            line.qty,
            format_currency(line.line_total),
        ]
        for line in cart.items
    ]
    md = "### Order Summary\n\n"
    md += f"Ship To: {user.name}, {user.address}\n\n"
    md += generate_markdown_table(headers, rows, ["l", "c", "c", "c"])
    md += f"\n\n**Subtotal:** {format_currency(cart.get_total())}"
    return md


class CheckoutModal(ModalScreen[bool]):
    """
    A modal screen for check out, showing a table of all items in the cart.
    Return True if an order was placed, False otherwise.
    """

    def compose(self) -> ComposeResult:
        with Vertical():
            yield MarkdownViewer("", show_table_of_contents=False)
            with Horizontal():
                yield Button("Go Back", id="btn-quit")
                yield Button("Place Order", id="btn-submit", variant="primary")

    async def on_mount(self):
        state = self.app.state
        await self.query_one(MarkdownViewer).document.update(
            order_summary_markdown(state.user, state.cart)
        )
        self.query_one("#btn-submit").focus()

    def on_key(self, event: events.Key) -> None:
        if event.key == "escape":
            self.dismiss(False)

    @on(Button.Pressed, "#btn-submit")
    @work()
    async def handle_submit(self):
        if not await self.app.push_screen_wait(
            DialogModal(
                "Place order? This cannot be undone.",
                primary_text="Yes",
                secondary_text="No",
                tone="positive",
            )
        ):
            self.dismiss(False)
            return

        result = self.app.state.place_order()
        if not result.ok:
            _logger.info(f"Checkout refused: {result.reason}")
            self.notify(result.reason, severity="warning")
            self.dismiss(False)
            return

        self.notify(f"Order placed successfully! Order ID: {result.order_id}")
        self.dismiss(True)

    @on(Button.Pressed, "#btn-quit")
    def handle_quit(self):
        self.dismiss(False)
