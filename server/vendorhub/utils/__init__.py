from .money import line_total, quantize_money

__all__ = ["line_total", "quantize_money"]
