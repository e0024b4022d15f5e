from typing import Iterable, List

CURRENCY = "XAF"
FREE_SHIPPING_THRESHOLD = 50000
FLAT_SHIPPING_COST = 7500


def effective_price(product) -> int:
    return product.get("salePrice") or product["price"]


def format_price(amount: int, currency: str = CURRENCY) -> str:
    """``44500`` -> ``"44,500 XAF"``."""
    return f"{int(amount):,} {currency}"


def parse_price(text: str, currency: str = CURRENCY) -> int:
    digits = text.replace(currency, "").replace(",", "").strip()
    return int(digits)


def filter_by_price_range(products: Iterable, low: int, high: int) -> List:
    """Keep products whose effective price lies in ``[low, high]``, bounds included."""
    return [p for p in products if low <= effective_price(p) <= high]


def sort_products(products: Iterable, sort_by: str = "newest") -> List:
    products = list(products)
    if sort_by == "price-low":
        return sorted(products, key=effective_price)
    if sort_by == "price-high":
        return sorted(products, key=effective_price, reverse=True)
    return sorted(products, key=lambda p: p.get("createdAt") or "", reverse=True)


def cart_summary(lines: Iterable,
                 threshold: int = FREE_SHIPPING_THRESHOLD,
                 flat_cost: int = FLAT_SHIPPING_COST) -> dict:
    subtotal = sum(effective_price(line["product"]) * line["quantity"] for line in lines)
    shipping = 0 if subtotal >= threshold else flat_cost
    return {
        "subtotal": subtotal,
        "shipping": shipping,
        "total": subtotal + shipping,
        "missingForFreeShipping": max(threshold - subtotal, 0),
    }
