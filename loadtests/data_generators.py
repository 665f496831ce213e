"""Faker-based data generators for Locust load test scenarios.

Each generator produces payloads that pass the API's request schemas
(camelCase keys) and the domain's validation rules.
"""

import random
import uuid

from faker import Faker

fake = Faker()

CONDITIONS = ["new", "refurbished", "used"]
BRANDS = ["Apple", "Samsung", "Google", "Lenovo", "Dell", "Sony", "Bose"]


def shopper_credentials() -> dict:
    """Generate a unique username (3-50 chars) and a password."""
    return {
        "username": f"{fake.user_name()[:30]}-{uuid.uuid4().hex[:8]}",
        "password": fake.password(length=12),
    }


def address_data() -> dict:
    """Generate an address whose phone meets the 10-character minimum."""
    return {
        "fullName": fake.name()[:255],
        "addressLine1": fake.street_address()[:255],
        "city": fake.city()[:100],
        "state": fake.state_abbr(),
        "postalCode": fake.zipcode()[:20],
        "country": "US",
        "phone": f"555{random.randint(1000000, 9999999)}",
    }


def order_data(delivery_method: str | None = None) -> dict:
    address = address_data()
    delivery_method = delivery_method or random.choice(["standard", "express", "next_day"])
    fee = {"standard": 0.0, "express": 9.99, "next_day": 19.99}[delivery_method]
    return {
        "paymentMethod": random.choice(["credit_card", "paypal"]),
        "deliveryMethod": delivery_method,
        "deliveryFee": fee,
        "shippingAddress": address,
        "billingAddress": address,
    }


def product_data(category_id: str, stock: int | None = None) -> dict:
    """Generate a CreateProductRequest payload."""
    brand = random.choice(BRANDS)
    price = round(random.uniform(50.0, 2000.0), 2)
    return {
        "name": f"{brand} {fake.word().capitalize()} {random.randint(1, 99)}",
        "description": fake.sentence(nb_words=12),
        "brand": brand,
        "imageUrl": f"https://img.example.com/{uuid.uuid4().hex[:12]}.jpg",
        "price": price,
        "originalPrice": round(price * random.uniform(1.0, 1.4), 2),
        "condition": random.choice(CONDITIONS),
        "categoryId": category_id,
        "stock": random.randint(20, 200) if stock is None else stock,
    }


def product_filters() -> dict:
    """Generate a random combination of catalogue query parameters."""
    params = {}
    if random.random() < 0.5:
        params["condition"] = random.sample(CONDITIONS, k=random.randint(1, 2))
    if random.random() < 0.3:
        params["brand"] = random.choice(BRANDS)
    if random.random() < 0.3:
        params["minPrice"] = random.choice([0, 100, 500])
        params["maxPrice"] = params["minPrice"] + random.choice([200, 1000])
    if random.random() < 0.2:
        params["search"] = fake.word()
    return params


def chatbot_message() -> str:
    return random.choice(
        [
            "hi",
            "Do you have any laptops?",
            "Which smartphone should I buy?",
            "What is the warranty on refurbished items?",
            "How do returns work?",
        ]
    )
