from typing import List

from textual import on
from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.events import ScreenResume
from textual.reactive import reactive
from textual.validation import Number
from textual.widgets import DataTable, Input, Label

from store.models import Product
from utils.pure import PAGE_SIZE, format_currency, page_count, paginate
from views.base_screen import BaseScreen
from views.modal_prod_detail import ProdDetailModal


def _parse_price(value: str, default: float) -> float:
    try:
        return float(value)
    except ValueError:
        return default


class ProdSearchScreen(BaseScreen):
    """
    Browse the catalog by keyword and price range, 5 results per page.
    """

    page_idx = reactive(1, init=False)
    page_cnt = reactive(1)
    query_str = reactive("")

    def compose(self) -> ComposeResult:
        yield from super().compose()
        yield Input(
            id="input-search", placeholder="Start typing to search something..."
        )
        with Horizontal(id="hort-price-range"):
            yield Label("Price from ")
            yield Input(
                id="input-min-price",
                placeholder="0",
                type="number",
                validators=[Number(minimum=0.0)],
            )
            yield Label(" to ")
            yield Input(
                id="input-max-price",
                placeholder="any",
                type="number",
                validators=[Number(minimum=0.0)],
            )
        yield DataTable(id="table-search-result")
        with Horizontal(id="hort-page"):
            yield Input("1", id="input-page", type="integer")  # page idx start from 1
            yield Label(" / 1", id="label-total-page-cnt")

    def on_mount(self):
        table = self.query_one(DataTable)
        table.cursor_type = "row"
        table.zebra_stripes = True
        table.add_columns("ID", "Name", "Price", "Stock")
        self.update_search_result()

        self.query_one("#input-search").focus()

    def current_results(self) -> List[Product]:
        """Catalog products matching the keyword and the price range inputs."""
        catalog = self.app.state.catalog
        min_price = _parse_price(self.query_one("#input-min-price", Input).value, 0.0)
        max_price = _parse_price(
            self.query_one("#input-max-price", Input).value, float("inf")
        )
        in_range = {p.pid for p in catalog.filter_by_price(min_price, max_price)}
        return [p for p in catalog.search_products(self.query_str) if p.pid in in_range]

    async def on_input_changed(self, message: Input.Changed) -> None:
        if message.input.id == "input-search":
            self.query_str = message.value
        if message.input.id in ("input-search", "input-min-price", "input-max-price"):
            self.page_idx = 1
            self.update_search_result()
        if message.input.id == "input-page" and message.value.isdigit():
            self.page_idx = int(message.value)

    @on(DataTable.RowSelected, "#table-search-result")
    def handle_row_selected(self, event: DataTable.RowSelected) -> None:
        pid = event.data_table.get_row(event.row_key)[0]
        self.app.push_screen(ProdDetailModal(pid))

    def validate_page_idx(self, page_idx):
        return max(1, min(page_idx, self.page_cnt))

    def watch_page_idx(self, _, new_page_idx):
        self.query_one("#input-page", Input).value = str(new_page_idx)
        self.update_search_result()

    @on(ScreenResume)
    def handle_refresh(self) -> None:
        self.update_search_result()

    def update_search_result(self) -> None:
        results, total = paginate(self.current_results(), self.page_idx)

        table = self.query_one(DataTable)
        table.clear()
        table.add_rows(
            [p.pid, p.name, format_currency(p.price), p.stock] for p in results
        )
        self.page_cnt = page_count(total, PAGE_SIZE)
        self.query_one("#label-total-page-cnt", Label).update(f" / {self.page_cnt}")
        self.query_one("#input-page", Input).validators = [
            Number(minimum=1, maximum=self.page_cnt)
        ]
