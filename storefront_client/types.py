from typing import List, Optional, TypedDict


class User(TypedDict):
    id: str
    username: str
    email: str
    isAdmin: bool


class Session(TypedDict):
    user: User
    token: str


class Product(TypedDict):
    id: str
    name: str
    description: str
    price: int
    salePrice: Optional[int]
    category: str
    imageUrl: str
    materials: Optional[str]
    care: Optional[str]
    createdAt: Optional[str]


class CartItem(TypedDict):
    id: str
    userId: str
    productId: str
    quantity: int


class CartLine(CartItem):
    product: Product


class OrderItem(TypedDict):
    id: str
    orderId: str
    productId: str
    productName: str
    productPrice: int
    quantity: int


class Order(TypedDict, total=False):
    id: str
    userId: str
    totalAmount: int
    shippingCost: int
    shippingName: str
    shippingAddress: str
    shippingCity: str
    shippingPhone: str
    notes: Optional[str]
    createdAt: str
    items: List[OrderItem]
