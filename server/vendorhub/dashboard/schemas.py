from pydantic import BaseModel


class DashboardCounts(BaseModel):
    vendors: int
    products: int
    open_purchase_orders: int
    total_purchase_orders: int
