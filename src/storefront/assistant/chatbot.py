"""Keyword-matched shopping assistant replies.

Rules are checked in order; the first rule with a keyword contained in the
lower-cased message wins.
"""

from protean.exceptions import ValidationError

RULES: list[tuple[tuple[str, ...], str]] = [
    (("hello", "hi"), "Hello! Welcome to Borabyte. How can I help you today?"),
    (
        ("laptop", "computer"),
        "We have a great selection of laptops in new, refurbished, and used conditions. "
        "Would you like me to recommend some based on your budget?",
    ),
    (
        ("phone", "smartphone"),
        "I'd be happy to help you find a smartphone. We carry all major brands including Apple, Samsung, "
        "and Google. Do you have a specific brand in mind?",
    ),
    (
        ("headphone", "audio"),
        "Our headphone collection includes noise-cancelling, wireless, and gaming options from brands "
        "like Sony, Bose, and Apple.",
    ),
    (
        ("refurbished",),
        "Our refurbished products are thoroughly tested and come with a 90-day warranty. They're a great "
        "way to save money while still getting quality electronics.",
    ),
    (
        ("price", "cost"),
        "We offer competitive pricing across all conditions. New items come with full manufacturer "
        "warranties, refurbished items have a 90-day warranty, and used items are priced based on condition.",
    ),
    (
        ("warranty",),
        "New products come with full manufacturer warranties. Refurbished products include a 90-day "
        "warranty. Used products have a 30-day return policy for any functional issues.",
    ),
    (
        ("return", "refund"),
        "We offer a 30-day return policy on all products. If you're not satisfied, you can return the item "
        "for a full refund or exchange.",
    ),
]

FALLBACK_REPLY = (
    "I'm here to help with any questions about our electronics. You can ask about specific products, "
    "warranties, shipping, returns, or get recommendations based on your needs."
)


def reply_to(message: str | None) -> str:
    if not message or not message.strip():
        raise ValidationError({"message": ["Message is required"]})

    text = message.lower()
    for keywords, reply in RULES:
        if any(keyword in text for keyword in keywords):
            return reply
    return FALLBACK_REPLY
