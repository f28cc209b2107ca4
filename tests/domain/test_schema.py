"""Tests for pipeforge.domain.schema."""

from pipeforge.domain import (
    CustomType,
    DataSchema,
    NativeType,
    SchemaColumnArray,
    SchemaColumnSingle,
)


class TestSchemaTypes:
    def test_native_type_names(self):
        assert NativeType.STRING.type_name == "string"
        assert NativeType.INT.type_name == "int"
        assert NativeType.FLOAT.type_name == "float"
        assert NativeType.DATE.type_name == "date"
        assert NativeType.BOOL.type_name == "bool"
        assert all(t.is_native for t in NativeType)

    def test_custom_type(self, product_schema):
        custom = CustomType(name="Product", schema=product_schema)
        assert custom.type_name == "Product"
        assert custom.is_native is False

    def test_custom_type_without_schema(self):
        """A label-only custom type carries no schema."""
        custom = CustomType(name="CPE")
        assert custom.schema is None
        assert custom.type_name == "CPE"

    def test_custom_types_equal_only_for_same_schema(self, product_schema):
        other = DataSchema(id="Product", columns=list(product_schema.columns))
        assert product_schema.as_type() == CustomType("Product", product_schema)
        assert product_schema.as_type() != other.as_type()

    def test_native_never_equals_custom(self):
        assert NativeType.STRING != CustomType("string")


class TestSchemaColumns:
    def test_single_column(self):
        column = SchemaColumnSingle(id="name", type=NativeType.STRING)
        assert column.id == "name"
        assert column.type == NativeType.STRING
        assert column.is_array is False

    def test_array_column_reports_element_type(self, product_schema):
        column = SchemaColumnArray(id="stock", type=product_schema.as_type())
        assert column.is_array is True
        assert column.type.type_name == "Product"


class TestDataSchema:
    def test_get_column(self, store_schema):
        assert store_schema.get_column("stock").is_array is True
        assert store_schema.get_column("missing") is None

    def test_column_ids_keep_declaration_order(self, store_schema):
        assert store_schema.column_ids() == ["store_name", "stock"]

    def test_self_referencing_schema(self):
        """Schemas may reference themselves through a custom type."""
        node = DataSchema(id="Node")
        node.columns.append(SchemaColumnSingle(id="value", type=NativeType.INT))
        node.columns.append(SchemaColumnArray(id="children", type=node.as_type()))

        assert node.get_column("children").type.schema is node
        assert node.as_type() == node.as_type()
