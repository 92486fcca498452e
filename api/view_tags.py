"""Utilities to standardize OpenAPI/Swagger tags across the project.

Use tags in the format: "<Category> - <Level>"
Examples: "Products - Public", "Products - Admin"

This module exposes small helpers that return lists suitable for both
drf-yasg (`swagger_auto_schema`) and drf-spectacular (`extend_schema`).
"""

from typing import List


def tag_name(category: str, level: str) -> str:
    """Return a single tag name following the project's convention.

    Args:
        category: High-level category name, e.g. 'Products'
        level: Sub-level like 'Public' or 'Admin'

    Returns:
        A tag string like 'Products - Public'
    """
    return f"{category} - {level}"


def tags(category: str, level: str) -> List[str]:
    """Return a list with a single tag element (convenience for decorators)."""
    return [tag_name(category, level)]


def products_public() -> List[str]:
    return tags('Products', 'Public')


def products_admin() -> List[str]:
    return tags('Products', 'Admin')


def suppliers_public() -> List[str]:
    return tags('Suppliers', 'Public')


def notifications_admin() -> List[str]:
    return tags('Notifications', 'Admin')
