"""
Shopping list item rules.

Items are plain dicts as stored in smart_shopping_lists.items. Every function
returns a new list and leaves its input untouched.
"""

from typing import Any, Dict, List


def new_item(product: Dict[str, Any], quantity: float = 1) -> Dict[str, Any]:
    return {
        "product_id": product["id"],
        "product_name": product["name"],
        "quantity": quantity,
        "unit": product.get("unit"),
        "price": float(product.get("price") or 0),
        "store_id": product.get("store_id"),
        "checked": False,
    }


def add_quantity(items: List[Dict[str, Any]], product: Dict[str, Any], quantity: float) -> List[Dict[str, Any]]:
    """Add quantity of a product, merging into its existing line so each product appears once"""
    if any(item["product_id"] == product["id"] for item in items):
        return [
            {**item, "quantity": item["quantity"] + quantity} if item["product_id"] == product["id"] else dict(item)
            for item in items
        ]
    return [dict(item) for item in items] + [new_item(product, quantity)]


def add_item(items: List[Dict[str, Any]], product: Dict[str, Any]) -> List[Dict[str, Any]]:
    """Add one of a product: a new unchecked line, or +1 on the existing line"""
    return add_quantity(items, product, 1)


def change_quantity(items: List[Dict[str, Any]], product_id: str, delta: float) -> List[Dict[str, Any]]:
    """Shift a line's quantity by delta, never below zero; lines reaching zero are dropped"""
    updated = []
    for item in items:
        if item["product_id"] == product_id:
            item = {**item, "quantity": max(0, item["quantity"] + delta)}
        else:
            item = dict(item)
        if item["quantity"] > 0:
            updated.append(item)
    return updated


def remove_item(items: List[Dict[str, Any]], product_id: str) -> List[Dict[str, Any]]:
    return [dict(item) for item in items if item["product_id"] != product_id]


def toggle_checked(items: List[Dict[str, Any]], product_id: str) -> List[Dict[str, Any]]:
    return [
        {**item, "checked": not item.get("checked", False)} if item["product_id"] == product_id else dict(item)
        for item in items
    ]


def calculate_total(items: List[Dict[str, Any]]) -> float:
    return round(sum(float(item["price"]) * item["quantity"] for item in items), 2)


def contains(items: List[Dict[str, Any]], product_id: str) -> bool:
    return any(item["product_id"] == product_id for item in items)
