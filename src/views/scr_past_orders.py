from typing import List, Optional

from textual import on, work
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.events import ScreenResume
from textual.reactive import reactive
from textual.validation import Number
from textual.widgets import Button, DataTable, Input, Label, MarkdownViewer, Select

from store.models import ORDER_STATUSES, Order
from utils.pure import format_currency, generate_markdown_table, page_count
from views.base_screen import BaseScreen
from views.modal_dialog import DialogModal


def order_detail_markdown(order: Optional[Order]) -> str:
    if not order:
        return "### Select an order to view its details."

    header = (
        f"### Order #{order.order_id}\n"
        f"Date: {order.odate:%Y-%m-%d %H:%M}  \n"
        f"Status: {order.status}  \n"
        f"Ship To: {order.user.address}\n\n"
    )
    rows = [
        [
            line.product.name,
            line.qty,
            format_currency(line.uprice),
            format_currency(line.line_total),
        ]
        for line in order.items
    ]
    table = generate_markdown_table(
        ["Product", "Qty", "Unit Price", "Line Total"], rows, ["l", "r", "r", "r"]
    )
    return header + table + f"\n\n**Grand Total:** {format_currency(order.total)}"


class PastOrdersScreen(BaseScreen):
    """
    The shopper's past orders with pagination, details and status changes.

    Layout:
    - Markdown detail view at the top, showing selected order details.
    - Orders table below (reverse chronological), 5 per page with Prev/Next.
    - Status picker applying to the highlighted order.
    """

    page_idx = reactive(1, init=False)
    page_cnt = reactive(1)

    def __init__(self) -> None:
        super().__init__()
        self._orders: List[Order] = []

    def compose(self) -> ComposeResult:
        yield from super().compose()
        with Vertical():
            yield MarkdownViewer(id="md-order-detail", show_table_of_contents=False)
            yield DataTable(id="table-orders")
        with Horizontal(id="hort-table-control"):
            yield Button("<", id="btn-prev")
            yield Input("1", id="input-page", type="integer")
            yield Label(" / 1", id="label-total-page-cnt")
            yield Button(">", id="btn-next")
            yield Select(
                [(s.title(), s) for s in ORDER_STATUSES],
                prompt="Status",
                id="select-status",
            )
            yield Button("Set Status", id="btn-set-status")
            yield Button("Cancel Order", id="btn-cancel-order", variant="error")

    def on_mount(self) -> None:
        table = self.query_one(DataTable)
        table.cursor_type = "row"
        table.zebra_stripes = True
        table.add_columns("Order ID", "Date", "Status", "Total")

        self._load_orders(1)

    @on(ScreenResume)
    def handle_refresh(self):
        self._load_orders(self.page_idx)

    @on(DataTable.RowHighlighted)
    async def handle_row_highlight(self) -> None:
        await self._render_detail(self.selected_order())

    def selected_order(self) -> Optional[Order]:
        table = self.query_one(DataTable)
        if table.row_count == 0:
            return None
        row_values = table.get_row_at(table.cursor_row)
        return self.app.state.user.get_order(str(row_values[0]))

    def watch_page_idx(self, old: int, new: int) -> None:
        self.query_one("#input-page", Input).value = str(new)
        self._load_orders(new)

    def _refresh_buttons(self) -> None:
        has_orders = bool(self._orders)
        self.query_one("#btn-prev", Button).disabled = self.page_idx <= 1
        self.query_one("#btn-next", Button).disabled = self.page_idx >= self.page_cnt
        self.query_one("#btn-set-status", Button).disabled = not has_orders
        self.query_one("#btn-cancel-order", Button).disabled = not has_orders
        self.query_one("#input-page", Input).validators = [
            Number(minimum=1, maximum=self.page_cnt)
        ]

    @on(Button.Pressed, "#btn-prev")
    def handle_prev(self) -> None:
        if self.page_idx > 1:
            self.page_idx -= 1

    @on(Button.Pressed, "#btn-next")
    def handle_next(self) -> None:
        if self.page_idx < self.page_cnt:
            self.page_idx += 1

    @on(Input.Changed, "#input-page")
    def handle_page_input(self, ev: Input.Changed) -> None:
        if ev.value and ev.value.isdigit():
            new_idx = max(1, min(int(ev.value), self.page_cnt))
            if new_idx != self.page_idx:
                self.page_idx = new_idx

    @on(Button.Pressed, "#btn-set-status")
    def handle_set_status(self) -> None:
        order = self.selected_order()
        status = self.query_one("#select-status", Select).value
        if order is None or status == Select.BLANK:
            self.notify("Pick an order and a status first.", severity="warning")
            return
        self._apply_status(order, status)

    @on(Button.Pressed, "#btn-cancel-order")
    @work()
    async def handle_cancel_order(self) -> None:
        order = self.selected_order()
        if order is None:
            return
        if await self.app.push_screen_wait(
            DialogModal(
                f"Cancel order {order.order_id}?",
                primary_text="Yes",
                secondary_text="No",
                tone="error",
            )
        ):
            self._apply_status(order, "cancelled")

    def _apply_status(self, order: Order, status: str) -> None:
        if order.update_status(status):
            self.notify(f"Order {order.order_id} is now {status}.")
        else:
            self.notify(f"Unknown status {status!r}.", severity="error")
        self._load_orders(self.page_idx)

    def _load_orders(self, page: int) -> None:
        orders, total = self.app.state.user.list_orders(page)
        table = self.query_one(DataTable)
        cursor_row = table.cursor_row
        table.clear()
        for o in orders:
            table.add_row(
                o.order_id,
                f"{o.odate:%Y-%m-%d %H:%M}",
                o.status,
                format_currency(o.total),
            )
        self._orders = orders
        self.page_cnt = page_count(total)
        self.query_one("#label-total-page-cnt", Label).update(f" / {self.page_cnt}")
        self._refresh_buttons()
        if orders:
            table.move_cursor(row=min(cursor_row, len(orders) - 1))
        self.call_later(self._render_detail, self.selected_order())

    async def _render_detail(self, order: Optional[Order]) -> None:
        await self.query_one("#md-order-detail", MarkdownViewer).document.update(
            order_detail_markdown(order)
        )
