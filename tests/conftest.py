"""Shared fixtures: a Store schema holding an array of Products."""

import pytest

from pipeforge.domain import (
    ArrayValue,
    DataSchema,
    IntValue,
    NativeType,
    Record,
    RecordSet,
    RecordValue,
    SchemaColumnArray,
    SchemaColumnSingle,
    StringValue,
)


@pytest.fixture
def product_schema():
    """Product: name (string), pricing (int)."""
    return DataSchema(
        id="Product",
        columns=[
            SchemaColumnSingle(id="name", type=NativeType.STRING),
            SchemaColumnSingle(id="pricing", type=NativeType.INT),
        ],
    )


@pytest.fixture
def store_schema(product_schema):
    """Store: store_name (string), stock (array of Product)."""
    return DataSchema(
        id="Store",
        columns=[
            SchemaColumnSingle(id="store_name", type=NativeType.STRING),
            SchemaColumnArray(id="stock", type=product_schema.as_type()),
        ],
    )


@pytest.fixture
def make_product(product_schema):
    """Factory for Product record values."""

    def _make(name: str, pricing: int) -> RecordValue:
        record = Record(product_schema)
        record.set("name", StringValue(name))
        record.set("pricing", IntValue(pricing))
        return RecordValue(record)

    return _make


@pytest.fixture
def make_store(store_schema, product_schema):
    """Factory for Store records from (name, pricing) pairs."""

    def _make(store_name: str, products: list[tuple[str, int]]) -> Record:
        record = Record(store_schema)
        record.set("store_name", StringValue(store_name))
        elements = []
        for name, pricing in products:
            product = Record(product_schema)
            product.set("name", StringValue(name))
            product.set("pricing", IntValue(pricing))
            elements.append(RecordValue(product))
        record.set("stock", ArrayValue(product_schema.as_type(), elements))
        return record

    return _make


@pytest.fixture
def item_schema():
    """Flat schema used for record set tests."""
    return DataSchema(
        id="Item",
        columns=[
            SchemaColumnSingle(id="id", type=NativeType.INT),
            SchemaColumnSingle(id="label", type=NativeType.STRING),
        ],
    )


@pytest.fixture
def make_item(item_schema):
    def _make(item_id: int, label: str) -> Record:
        record = Record(item_schema)
        record.set("id", IntValue(item_id))
        record.set("label", StringValue(label))
        return record

    return _make


@pytest.fixture
def make_item_set(item_schema):
    def _make(records: list[Record]) -> RecordSet:
        return RecordSet(item_schema, list(records))

    return _make
