"""
Excepciones del servicio de inventario.

Cada error lleva un código estable y el status HTTP con el que la capa
de vistas lo traduce.
"""
from typing import Optional

from rest_framework import status


class ErrorCodes:
    """Códigos de error centralizados."""
    DUPLICATE_PRODUCT = "DUPLICATE_PRODUCT"
    SUPPLIER_NOT_FOUND = "SUPPLIER_NOT_FOUND"
    PRODUCT_NOT_FOUND = "PRODUCT_NOT_FOUND"
    INSUFFICIENT_STOCK = "INSUFFICIENT_STOCK"
    INVALID_STOCK_AMOUNT = "INVALID_STOCK_AMOUNT"


class InventoryServiceError(Exception):
    """Excepción base de las operaciones de inventario."""
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.code = code

    def __str__(self):
        code_details = f" [Code: {self.code}]" if self.code else ""
        return f"{self.message}{code_details}"

    def to_data(self) -> dict:
        return {"error_type": self.code}


class DuplicateProduct(InventoryServiceError):
    """Ya existe un producto activo con el mismo nombre y proveedor."""
    status_code = status.HTTP_409_CONFLICT

    def __init__(self, name: str, supplier_id: int):
        super().__init__(
            message=f"Ya existe un producto activo '{name}' para el proveedor {supplier_id}",
            code=ErrorCodes.DUPLICATE_PRODUCT
        )
        self.name = name
        self.supplier_id = supplier_id


class SupplierNotFound(InventoryServiceError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, supplier_id: int):
        super().__init__(
            message=f"Proveedor no encontrado: {supplier_id}",
            code=ErrorCodes.SUPPLIER_NOT_FOUND
        )
        self.supplier_id = supplier_id


class ProductNotFound(InventoryServiceError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, code: int):
        super().__init__(
            message=f"Producto no encontrado: {code}",
            code=ErrorCodes.PRODUCT_NOT_FOUND
        )
        self.product_code = code


class InsufficientStock(InventoryServiceError):
    """La disminución dejaría el stock en negativo."""

    def __init__(self, current_stock: int):
        super().__init__(
            message=f"No hay suficiente stock disponible. Stock actual: {current_stock}",
            code=ErrorCodes.INSUFFICIENT_STOCK
        )
        self.current_stock = current_stock

    def to_data(self) -> dict:
        return {"error_type": self.code, "current_stock": self.current_stock}


class InvalidStockAmount(InventoryServiceError):

    def __init__(self, amount):
        super().__init__(
            message=f"La cantidad debe ser un entero no negativo. Recibido: {amount}",
            code=ErrorCodes.INVALID_STOCK_AMOUNT
        )
        self.amount = amount
