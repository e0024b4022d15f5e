from typing import List, Optional
from models import db
from models.product import Product
from app.exceptions import NotFoundError
from app.schemas.product import ProductCreate, ProductPatch, ProductQuery

ALL_CATEGORIES = "all"


def list_products(filters: Optional[ProductQuery] = None) -> List[Product]:
    """Newest-first product listing.

    ``category`` is an exact match unless it is the ``"all"`` sentinel;
    ``search`` is a case-insensitive substring match on name or description
    on every backend. ``limit`` and ``offset`` page through the result without
    any total count.
    """
    filters = filters or ProductQuery()
    query = Product.query
    if filters.category and filters.category != ALL_CATEGORIES:
        query = query.filter(Product.category == filters.category)
    if filters.search:
        pattern = f"%{filters.search}%"
        query = query.filter(
            db.or_(Product.name.ilike(pattern), Product.description.ilike(pattern))
        )
    query = query.order_by(Product.created_at.desc())
    if filters.limit:
        query = query.limit(filters.limit)
    if filters.offset:
        query = query.offset(filters.offset)
    return query.all()


def get_product(product_id: str) -> Product:
    product = db.session.get(Product, product_id)
    if not product:
        raise NotFoundError("Produit non trouvé")
    return product


def create_product(data: ProductCreate) -> Product:
    product = Product(**data.model_dump())
    db.session.add(product)
    db.session.flush()
    return product


def update_product(product_id: str, patch: ProductPatch) -> Product:
    product = get_product(product_id)
    for field, value in patch.changes().items():
        setattr(product, field, value)
    db.session.flush()
    return product


def delete_product(product_id: str) -> bool:
    """Hard delete. Returns False when no product matched."""
    product = db.session.get(Product, product_id)
    if not product:
        return False
    db.session.delete(product)
    return True


__all__ = [
    "ALL_CATEGORIES",
    "list_products",
    "get_product",
    "create_product",
    "update_product",
    "delete_product",
]
