from typing import Optional

from textual import events, on
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.reactive import reactive
from textual.screen import ModalScreen
from textual.validation import Number
from textual.widgets import Button, Input, Label, MarkdownViewer

from store.models import CartLine, Product
from utils.logger import get_logger
from utils.pure import format_currency, generate_markdown_table

_logger = get_logger(__name__)

ADDED_TEXT = "Product added to cart successfully!"
UPDATED_TEXT = "Updated cart item quantity."
NO_STOCK_TEXT = "Not enough stock available!"


class ProdDetailModal(ModalScreen[bool]):
    """
    prod detail, plus ordering
    Will return true of cart changed, false if not
    """

    CSS = """
    #input-order-qty {
        width: 10;
    }
    #btn-sub-qty, #btn-add-qty {
        min-width: 4;
    }
    """

    order_qty = reactive(1, init=False)

    def __init__(self, pid: str) -> None:
        super().__init__()

        self._pid = pid

        self._prod: Optional[Product] = None
        self._existing_line: Optional[CartLine] = None

    def compose(self) -> ComposeResult:
        with Horizontal(id="hort-prod-detail"):
            yield MarkdownViewer("", show_table_of_contents=False)
            with Vertical():
                yield Label("Order Quantity")
                with Horizontal():
                    yield Button("-", id="btn-sub-qty")
                    yield Input(value="1", id="input-order-qty", type="integer")
                    yield Button("+", id="btn-add-qty")
                with Horizontal():
                    yield Button("Go Back", id="btn-quit")
                    yield Button("Add to Cart", id="btn-addcart", variant="primary")

    async def on_mount(self):
        self._prod = self.app.state.catalog.get_product(self._pid)
        if self._prod is None:
            self.notify("Product is no longer available.", severity="error")
            self.dismiss(False)
            return

        table_rows = [
            ["ID", self._prod.pid],
            ["Name", self._prod.name],
            ["Price", format_currency(self._prod.price)],
            ["Description", self._prod.descr],
            ["Image", self._prod.image],
            ["Stock", self._prod.stock],
        ]
        md_table_str = generate_markdown_table(
            ["Attribute", "Value"], table_rows, ["l", "l"]
        )
        header_md = f"### Product Detail: {self._prod.name}\n\n"
        await self.query_one(MarkdownViewer).document.update(header_md + md_table_str)

        order_btn = self.query_one("#btn-addcart", Button)
        qty_input = self.query_one("#input-order-qty", Input)
        if self._prod.stock < 1:
            order_btn.label = "Out of Stock"
            order_btn.disabled = True
            order_btn.variant = "warning"
        qty_input.validators = [Number(minimum=1, maximum=max(self._prod.stock, 1))]

        self._existing_line = self.app.state.cart.get_line(self._pid)
        if self._existing_line:
            self.order_qty = self._existing_line.qty
            order_btn.label = "Update Cart"
        # the watcher does not fire when the qty is unchanged
        self.watch_order_qty(self.order_qty)

        qty_input.focus()

    def on_key(self, event: events.Key) -> None:
        if event.key == "escape":
            self.dismiss(False)

    async def on_input_changed(self, message: Input.Changed) -> None:
        # skip stale events from values we set ourselves in watch_order_qty
        if (
            message.input.id == "input-order-qty"
            and message.value.isdigit()
            and message.value == message.input.value
            and self.focused == message.input
        ):
            self.order_qty = int(message.value)

    def watch_order_qty(self, qty: int):
        stock = self._prod.stock if self._prod else 0
        self.query_one("#btn-sub-qty", Button).disabled = qty <= 1
        self.query_one("#btn-add-qty", Button).disabled = qty >= stock

        qty_input = self.query_one("#input-order-qty", Input)
        if qty_input.value != str(qty):
            qty_input.value = str(qty)

    @on(Button.Pressed, "#btn-add-qty")
    def handle_add_qty(self):
        self.order_qty += 1

    @on(Button.Pressed, "#btn-sub-qty")
    def handle_sub_qty(self):
        self.order_qty -= 1

    @on(Button.Pressed, "#btn-quit")
    def handle_quit(self):
        self.dismiss(False)

    @on(Button.Pressed, "#btn-addcart")
    def handle_addcart(self):
        cart = self.app.state.cart
        if self._existing_line:
            changed = cart.update_quantity(self._pid, self.order_qty)
            success_text = UPDATED_TEXT
        else:
            changed = cart.add_item(self._prod, self.order_qty)
            success_text = ADDED_TEXT

        if not changed:
            _logger.info(f"Cart rejected {self.order_qty} x {self._pid}")
            self.app.notify(NO_STOCK_TEXT, severity="warning")
            return

        self.app.notify(success_text)
        self.dismiss(True)
