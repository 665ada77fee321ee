from .requests import CreateOrderRequestSchema

__all__ = ["CreateOrderRequestSchema"]
