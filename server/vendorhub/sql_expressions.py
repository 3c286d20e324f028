from sqlalchemy import func


def month_bucket(column, *, dialect_name: str):
    """Return SQL expression rendering a date column as its ``YYYY-MM`` month key."""
    if dialect_name == "postgresql":
        return func.to_char(func.date_trunc("month", column), "YYYY-MM")

    # SQLite/test fallback
    return func.strftime("%Y-%m", column)
