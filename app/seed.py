import logging
from models import db
from models.product import Product
from models.user import User
from app.utils.db import transactional
from app.utils.passwords import hash_password

ADMIN_ACCOUNT = {"username": "admin", "email": "admin@luxe.com", "password": "admin123"}

SAMPLE_PRODUCTS = [
    {
        "name": "Essence de Luxe",
        "description": "Un parfum exquis qui combine des notes florales et boisées pour un parfum sophistiqué. Parfait pour toute occasion, ce parfum luxueux incarne élégance et raffinement.",
        "price": 60000,
        "sale_price": 44500,
        "category": "perfumes",
        "image_url": "/api/placeholder/perfume1.jpg",
        "materials": "100% huiles de parfum premium, alcool dénaturé, eau",
        "care": "Conserver dans un endroit frais et sec, à l'abri de la lumière directe du soleil.",
    },
    {
        "name": "Sac en Cuir Classique",
        "description": "Sac à main en cuir véritable fait à la main avec une finition premium. Spacieux et élégant, parfait pour un usage quotidien.",
        "price": 140000,
        "sale_price": None,
        "category": "accessories",
        "image_url": "/api/placeholder/bag1.jpg",
        "materials": "100% cuir véritable, doublure en tissu",
        "care": "Nettoyer avec un chiffon doux et sec. Éviter l'exposition prolongée au soleil.",
    },
    {
        "name": "T-shirt Coton Premium",
        "description": "T-shirt en coton biologique ultra-doux avec une coupe moderne. Confort exceptionnel et style intemporel.",
        "price": 22500,
        "sale_price": None,
        "category": "clothes",
        "image_url": "/api/placeholder/tshirt1.jpg",
        "materials": "100% coton biologique",
        "care": "Lavage en machine à 30°C. Ne pas blanchir.",
    },
    {
        "name": "Foulard en Soie",
        "description": "Foulard en soie pure avec des motifs élégants. Accessoire polyvalent qui ajoute une touche de sophistication.",
        "price": 32500,
        "sale_price": 24500,
        "category": "accessories",
        "image_url": "/api/placeholder/scarf1.jpg",
        "materials": "100% soie naturelle",
        "care": "Nettoyage à sec uniquement.",
    },
    {
        "name": "Lunettes de Soleil Design",
        "description": "Lunettes de soleil de designer avec protection UV400. Monture métallique durable et verres polarisés.",
        "price": 97500,
        "sale_price": None,
        "category": "accessories",
        "image_url": "/api/placeholder/sunglasses1.jpg",
        "materials": "Monture en métal, verres polarisés",
        "care": "Nettoyer avec un chiffon en microfibre.",
    },
    {
        "name": "Parfum Floral",
        "description": "Fragrance florale légère avec des notes de jasmin et de rose. Parfait pour la journée.",
        "price": 47500,
        "sale_price": None,
        "category": "perfumes",
        "image_url": "/api/placeholder/perfume2.jpg",
        "materials": "Huiles essentielles naturelles, alcool",
        "care": "Conserver à température ambiante.",
    },
    {
        "name": "Chemise Décontractée",
        "description": "Chemise en lin respirante avec une coupe décontractée. Idéale pour les occasions casual chic.",
        "price": 39000,
        "sale_price": None,
        "category": "clothes",
        "image_url": "/api/placeholder/shirt1.jpg",
        "materials": "55% lin, 45% coton",
        "care": "Lavage en machine à 40°C. Repasser à température moyenne.",
    },
    {
        "name": "Senteur de Minuit",
        "description": "Parfum intense avec des notes boisées et épicées. Pour les soirées spéciales.",
        "price": 67500,
        "sale_price": None,
        "category": "perfumes",
        "image_url": "/api/placeholder/perfume3.jpg",
        "materials": "Concentré de parfum, base alcoolique",
        "care": "Tenir à l'écart de la chaleur et de la lumière.",
    },
]


def seed_database() -> int:
    """Seed an empty catalog. Returns the number of products created, 0 if skipped."""
    if db.session.query(Product.id).first():
        logging.info("Database already seeded")
        return 0

    with transactional("Failed to seed database"):
        if not User.query.filter_by(email=ADMIN_ACCOUNT["email"]).first():
            db.session.add(
                User(
                    username=ADMIN_ACCOUNT["username"],
                    email=ADMIN_ACCOUNT["email"],
                    password=hash_password(ADMIN_ACCOUNT["password"]),
                    is_admin=True,
                )
            )
        for data in SAMPLE_PRODUCTS:
            db.session.add(Product(**data))
    logging.info("Database seeded with %s products", len(SAMPLE_PRODUCTS))
    return len(SAMPLE_PRODUCTS)
