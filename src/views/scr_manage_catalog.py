from __future__ import annotations

from typing import Optional

from textual import on, work
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.validation import Number
from textual.widgets import Button, Input, Label, MarkdownViewer, OptionList
from textual.widgets.option_list import Option

from store.models import Product
from utils.pure import format_currency, generate_markdown_table
from views.base_screen import BaseScreen
from views.modal_dialog import DialogModal


def product_markdown(prod: Product) -> str:
    rows = [
        ["ID", prod.pid],
        ["Name", prod.name],
        ["Price", format_currency(prod.price)],
        ["Description", prod.descr],
        ["Image", prod.image],
        ["Stock", prod.stock],
    ]
    md_table = generate_markdown_table(["Attribute", "Value"], rows, ["l", "l"])
    return f"### Product Detail: {prod.name}\n\n" + md_table


class ManageCatalogScreen(BaseScreen):
    """
    Look up products to inspect or remove them, and add new ones.
    """

    current_pid: Optional[str] = None

    def compose(self) -> ComposeResult:
        yield from super().compose()
        with Vertical():
            yield Input(id="input-search", placeholder="Search for product...")
            yield OptionList(id="optlist-prods")
            yield MarkdownViewer(id="md-prod", show_table_of_contents=False)
            yield Button("Remove Product", id="btn-remove", variant="error")
            with Horizontal(id="hort-new-product"):
                with Vertical():
                    yield Label("ID")
                    yield Input(id="input-new-pid")
                    yield Label("Name")
                    yield Input(id="input-new-name")
                    yield Label("Description")
                    yield Input(id="input-new-descr")
                with Vertical():
                    yield Label("Price ($)")
                    yield Input(
                        id="input-new-price",
                        type="number",
                        validators=[Number(minimum=0.0)],
                    )
                    yield Label("Stock")
                    yield Input(
                        id="input-new-stock",
                        type="integer",
                        validators=[Number(minimum=0)],
                    )
                    yield Label("Image")
                    yield Input(id="input-new-image", placeholder="optional")
            yield Button("Add Product", id="btn-add", variant="success")

    def on_mount(self) -> None:
        self.query_one("#md-prod").add_class("hidden")
        self.query_one("#btn-remove").add_class("hidden")
        self.update_optlist("")

    def on_input_changed(self, message: Input.Changed) -> None:
        if message.input.id == "input-search":
            self.update_optlist(message.value)

    def on_option_list_option_selected(self, message: OptionList.OptionSelected):
        self.current_pid = message.option.id
        self.render_product()

    def handle_catalog_change(self) -> None:
        self.update_optlist(self.query_one("#input-search", Input).value)

    def update_optlist(self, query: str):
        """
        fill option list with search results
        """
        opt_list = self.query_one("#optlist-prods", OptionList)
        opt_list.clear_options()
        opt_list.add_options(
            [
                Option(f"{p.pid} {p.name}", id=p.pid)
                for p in self.app.state.catalog.search_products(query)
            ]
        )

    @work(exclusive=True)
    async def render_product(self) -> None:
        prod = self.app.state.catalog.get_product(self.current_pid)
        md_prod = self.query_one("#md-prod", MarkdownViewer)
        btn_remove = self.query_one("#btn-remove")
        if prod is None:
            md_prod.add_class("hidden")
            btn_remove.add_class("hidden")
            return

        await md_prod.document.update(product_markdown(prod))
        md_prod.remove_class("hidden")
        btn_remove.remove_class("hidden")

    def read_new_product(self) -> Optional[Product]:
        """Build a product from the form, or None if a field is missing or invalid."""
        fields = {
            name: self.query_one(f"#input-new-{name}", Input)
            for name in ("pid", "name", "descr", "price", "stock", "image")
        }
        for name in ("pid", "name", "price", "stock"):
            field = fields[name]
            if not field.value.strip() or not field.is_valid:
                field.focus()
                field.add_class("-invalid")
                return None
        try:
            price = float(fields["price"].value)
            stock = int(fields["stock"].value)
        except ValueError:
            return None
        return Product(
            pid=fields["pid"].value.strip(),
            name=fields["name"].value.strip(),
            price=price,
            descr=fields["descr"].value.strip(),
            image=fields["image"].value.strip(),
            stock=stock,
        )

    @on(Button.Pressed, "#btn-add")
    def handle_add(self) -> None:
        prod = self.read_new_product()
        if prod is None:
            self.notify("Please fill in ID, name, price and stock.", severity="error")
            return

        if not self.app.state.catalog.add_product(prod):
            self.notify(f"Product ID {prod.pid} is already taken.", severity="error")
            return

        for field in self.query("#hort-new-product Input").results(Input):
            field.value = ""
        self.notify(f"Product {prod.name} added.")
        self.handle_catalog_change()

    @on(Button.Pressed, "#btn-remove")
    @work()
    async def handle_remove(self) -> None:
        if self.current_pid is None:
            return
        if not await self.app.push_screen_wait(
            DialogModal(
                f"Remove product {self.current_pid} from the catalog?",
                primary_text="Yes",
                secondary_text="No",
                tone="error",
            )
        ):
            return

        self.app.state.catalog.remove_product(self.current_pid)
        self.notify(f"Product {self.current_pid} removed.")
        self.current_pid = None
        self.render_product()
        self.handle_catalog_change()
