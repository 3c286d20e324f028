from decimal import Decimal, ROUND_HALF_UP


def quantize_money(value: Decimal | float | int | str | None) -> Decimal | None:
    if value is None:
        return None
    return Decimal(str(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)


def line_total(qty: int | None, unit_price: Decimal | float | int | str | None) -> Decimal:
    return quantize_money(Decimal(qty or 0) * Decimal(str(unit_price or 0)))
