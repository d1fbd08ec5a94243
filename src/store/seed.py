# sample data loaded at startup

from store.catalog import Catalog
from store.models import Product, User

SAMPLE_PRODUCTS = [
    Product(
        pid="1",
        name="Wireless Headphones",
        price=99.99,
        descr="High-quality wireless headphones with noise cancellation",
        image="headphones.jpg",
        stock=50,
    ),
    Product(
        pid="2",
        name="Smart Watch",
        price=199.99,
        descr="Feature-rich smartwatch with health tracking",
        image="smartwatch.jpg",
        stock=30,
    ),
    Product(
        pid="3",
        name="Mechanical Keyboard",
        price=89.50,
        descr="Tenkeyless keyboard with hot-swappable switches",
        image="keyboard.jpg",
        stock=20,
    ),
    Product(
        pid="4",
        name="USB-C Cable",
        price=9.99,
        descr="Braided 2m charging and data cable",
        image="usbc-cable.jpg",
        stock=200,
    ),
    Product(
        pid="5",
        name="Bluetooth Speaker",
        price=45.00,
        descr="Portable waterproof speaker with 12h battery",
        image="speaker.jpg",
        stock=0,
    ),
]

DEMO_USER = dict(
    uid="1",
    name="John Doe",
    email="john@example.com",
    address="123 Main St, City, Country",
)


def load_catalog() -> Catalog:
    catalog = Catalog()
    for product in SAMPLE_PRODUCTS:
        catalog.add_product(product)
    return catalog


def demo_user() -> User:
    return User(**DEMO_USER)
