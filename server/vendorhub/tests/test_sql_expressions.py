from sqlalchemy import Column, Date, MetaData, Table, select
from sqlalchemy.dialects import postgresql, sqlite

from vendorhub.sql_expressions import month_bucket


def _orders_table():
    metadata = MetaData()
    return Table("purchase_orders", metadata, Column("order_date", Date))


def test_month_bucket_compiles_to_postgres_to_char():
    orders = _orders_table()

    expression = month_bucket(orders.c.order_date, dialect_name="postgresql")
    compiled = str(select(expression).compile(dialect=postgresql.dialect()))

    assert "to_char(date_trunc(" in compiled
    assert "strftime" not in compiled


def test_month_bucket_uses_strftime_on_sqlite():
    orders = _orders_table()

    expression = month_bucket(orders.c.order_date, dialect_name="sqlite")
    compiled = str(select(expression).compile(dialect=sqlite.dialect()))

    assert "strftime(" in compiled
