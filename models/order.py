from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey
from models import db, new_id
from datetime import datetime


class Order(db.Model):
    __tablename__ = "orders"
    __table_args__ = (
        db.Index("ix_orders_user_created", "user_id", "created_at"),
    )
    id = Column(String(36), primary_key=True, default=new_id)
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False)
    total_amount = Column(Integer, nullable=False)  # subtotal + shipping, fixed at checkout
    shipping_cost = Column(Integer, nullable=False, default=0)
    shipping_name = Column(String(100), nullable=False)
    shipping_address = Column(Text, nullable=False)
    shipping_city = Column(String(100), nullable=False)
    shipping_phone = Column(String(30), nullable=False)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)

    items = db.relationship("OrderItem", backref="order", cascade="all, delete-orphan", lazy=True)

    def to_dict(self, with_items=False):
        data = {
            "id": self.id,
            "userId": self.user_id,
            "totalAmount": self.total_amount,
            "shippingCost": self.shipping_cost,
            "shippingName": self.shipping_name,
            "shippingAddress": self.shipping_address,
            "shippingCity": self.shipping_city,
            "shippingPhone": self.shipping_phone,
            "notes": self.notes,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }
        if with_items:
            data["items"] = [oi.to_dict() for oi in self.items]
        return data


class OrderItem(db.Model):
    __tablename__ = "order_items"
    id = db.Column(db.String(36), primary_key=True, default=new_id)
    order_id = db.Column(db.String(36), db.ForeignKey("orders.id"), nullable=False)

    # Snapshot taken at purchase time; no FK so product edits/deletes leave history intact
    product_id = db.Column(db.String(36), nullable=False)
    product_name = db.Column(db.String(200), nullable=False)
    product_price = db.Column(db.Integer, nullable=False)
    quantity = db.Column(db.Integer, nullable=False)

    def to_dict(self):
        return {
            "id": self.id,
            "orderId": self.order_id,
            "productId": self.product_id,
            "productName": self.product_name,
            "productPrice": self.product_price,
            "quantity": self.quantity,
        }
