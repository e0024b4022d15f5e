from models import db, new_id
from datetime import datetime

CATEGORIES = ("clothes", "perfumes", "accessories")


class Product(db.Model):
    __tablename__ = "products"
    __table_args__ = (
        db.Index("ix_products_category_created", "category", "created_at"),
    )

    id = db.Column(db.String(36), primary_key=True, default=new_id)

    # Core details
    name = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text, nullable=False)
    category = db.Column(db.String(20), nullable=False)           # clothes, perfumes, accessories

    # Pricing, whole XAF
    price = db.Column(db.Integer, nullable=False)
    sale_price = db.Column(db.Integer, nullable=True)

    # Media & care info
    image_url = db.Column(db.String(500), nullable=False)
    materials = db.Column(db.Text, nullable=True)
    care = db.Column(db.Text, nullable=True)

    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    cart_items = db.relationship(
        "CartItem", back_populates="product", cascade="all, delete-orphan", lazy=True
    )

    @property
    def effective_price(self) -> int:
        return self.sale_price or self.price

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "price": self.price,
            "salePrice": self.sale_price,
            "category": self.category,
            "imageUrl": self.image_url,
            "materials": self.materials,
            "care": self.care,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }

    def __repr__(self):
        return f"<Product name={self.name} price={self.price}>"
