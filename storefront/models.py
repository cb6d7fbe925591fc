# storefront/models.py
from pydantic import BaseModel
from typing import Any, Optional, Union

class Health(BaseModel):
    status: str = "ok"
    message: str = "Backend is running"

class Category(BaseModel):
    id: str
    name: Any
    description: str = ""
    image: Optional[str] = None

class Statistics(BaseModel):
    totalProducts: int
    totalOrders: int
    totalSales: Union[int, float]
    pendingOrders: int

class ErrorBody(BaseModel):
    error: str
