from __future__ import annotations

from typing import List

from viewer.leaderboard import Product
from viewer.store import Dataset

_IMDB_REVIEWS = [
    ("This movie is absolutely fantastic! The acting, storyline, and cinematography are all top-notch. "
     "I would definitely recommend it to anyone looking for a great film experience.", "positive", 9, 2019, "Drama"),
    ("Terrible movie. Poor acting and a confusing plot that makes no sense. I couldn't even finish watching it.",
     "negative", 2, 2018, "Horror"),
    ("An okay film with decent performances. Not groundbreaking but entertaining enough for a weekend watch.",
     "positive", 6, 2020, "Comedy"),
    ("One of the worst movies I've ever seen. The dialogue is cringe-worthy and the special effects look like "
     "they were made in the 90s.", "negative", 1, 2017, "Sci-Fi"),
    ("Brilliant storytelling with exceptional character development. This film will stay with you long after "
     "the credits roll.", "positive", 10, 2021, "Drama"),
    ("Mediocre at best. The movie has potential but fails to deliver on most fronts. Expected much more from "
     "this director.", "negative", 4, 2019, "Action"),
    ("A masterpiece of modern cinema. Every scene is crafted with precision and the performances are nothing "
     "short of spectacular.", "positive", 10, 2022, "Thriller"),
    ("Boring and predictable. I fell asleep halfway through and didn't miss anything important when I woke up.",
     "negative", 3, 2018, "Romance"),
]

# (sepal_length, sepal_width, petal_length, petal_width, species)
_IRIS = [
    (5.1, 3.5, 1.4, 0.2, "setosa"), (4.9, 3.0, 1.4, 0.2, "setosa"), (4.7, 3.2, 1.3, 0.2, "setosa"),
    (4.6, 3.1, 1.5, 0.2, "setosa"), (5.0, 3.6, 1.4, 0.2, "setosa"), (7.0, 3.2, 4.7, 1.4, "versicolor"),
    (6.4, 3.2, 4.5, 1.5, "versicolor"), (6.9, 3.1, 4.9, 1.5, "versicolor"), (5.5, 2.3, 4.0, 1.3, "versicolor"),
    (6.5, 2.8, 4.6, 1.5, "versicolor"), (6.3, 3.3, 6.0, 2.5, "virginica"), (5.8, 2.7, 5.1, 1.9, "virginica"),
    (7.1, 3.0, 5.9, 2.1, "virginica"), (6.3, 2.9, 5.6, 1.8, "virginica"), (6.5, 3.0, 5.8, 2.2, "virginica"),
    (4.8, 3.4, 1.6, 0.2, "setosa"), (4.8, 3.0, 1.4, 0.1, "setosa"), (4.3, 3.0, 1.1, 0.1, "setosa"),
    (5.7, 2.8, 4.5, 1.3, "versicolor"), (6.3, 3.3, 4.7, 1.6, "versicolor"), (4.9, 2.4, 3.3, 1.0, "versicolor"),
    (7.7, 2.6, 6.9, 2.3, "virginica"), (6.0, 2.2, 5.0, 1.5, "virginica"), (6.9, 3.2, 5.7, 2.3, "virginica"),
    (5.6, 2.8, 4.9, 2.0, "virginica"),
]

_IRIS_ORIGIN = {
    "setosa": ("white", "North America", 1936),
    "versicolor": ("purple", "Eastern North America", 1753),
    "virginica": ("blue", "Southeastern United States", 1860),
}

_CUSTOMERS = [
    ("CUST001", "Alice Johnson", 28, "Female", "New York", 156.78, "Electronics", "2024-01-15", "Credit Card", 4.2, "Gold"),
    ("CUST002", "Bob Smith", 34, "Male", "Los Angeles", 89.99, "Clothing", "2024-01-16", "PayPal", 3.8, "Silver"),
    ("CUST003", "Carol Davis", 42, "Female", "Chicago", 234.56, "Home & Garden", "2024-01-17", "Debit Card", 4.7, "Platinum"),
    ("CUST004", "David Wilson", 25, "Male", "Houston", 67.23, "Books", "2024-01-18", "Credit Card", 4.1, "Bronze"),
    ("CUST005", "Eva Martinez", 31, "Female", "Phoenix", 445.67, "Electronics", "2024-01-19", "Apple Pay", 4.9, "Platinum"),
    ("CUST006", "Frank Brown", 38, "Male", "Philadelphia", 123.45, "Sports & Outdoors", "2024-01-20", "Credit Card", 3.6, "Silver"),
]

_CUSTOMER_FIELDS = (
    "customer_id", "name", "age", "gender", "location", "purchase_amount",
    "product_category", "purchase_date", "payment_method", "customer_satisfaction", "loyalty_tier",
)


def default_datasets() -> List[Dataset]:
    imdb_rows = [
        {"id": i, "review": review, "sentiment": sentiment, "rating": rating,
         "length": len(review), "year": year, "genre": genre}
        for i, (review, sentiment, rating, year, genre) in enumerate(_IMDB_REVIEWS, start=1)
    ]
    iris_rows = []
    for i, (sl, sw, pl, pw, species) in enumerate(_IRIS, start=1):
        color, origin, discovered = _IRIS_ORIGIN[species]
        iris_rows.append({
            "id": i, "sepal_length": sl, "sepal_width": sw, "petal_length": pl, "petal_width": pw,
            "species": species, "color": color, "origin": origin, "discovered_year": discovered,
        })
    customer_rows = [dict(zip(_CUSTOMER_FIELDS, values)) for values in _CUSTOMERS]

    return [
        Dataset(
            id=1,
            name="IMDB Movie Reviews",
            description="Large movie review dataset for binary sentiment classification",
            updated="Jan 15, 2024",
            size="Medium",
            format="CSV",
            price=0,
            domain=["Sentiment Analysis", "NLP"],
            language=["English"],
            license="MIT",
            quality="High",
            version="1.0",
            actual_data=imdb_rows,
        ),
        Dataset(
            id=2,
            name="Iris Flower Dataset",
            description="Classic dataset for classification of iris flower species based on sepal and petal measurements",
            updated="Dec 10, 2023",
            size="Small",
            format="CSV",
            price=0,
            domain=["Machine Learning", "Classification"],
            language=["English"],
            license="Public Domain",
            quality="Very High",
            version="1.0",
            actual_data=iris_rows,
        ),
        Dataset(
            id=3,
            name="Customer Purchase Dataset",
            description="E-commerce customer purchase data with demographics and transaction details",
            updated="Feb 20, 2024",
            size="Medium",
            format="JSONL",
            price=0,
            domain=["E-commerce", "Analytics"],
            language=["English"],
            license="Apache 2.0",
            quality="High",
            version="2.1",
            actual_data=customer_rows,
        ),
    ]


def default_products() -> List[Product]:
    return [
        Product(
            id=1, name="Atlas LM", description="General purpose large language model", license="Proprietary", price=30,
            intelligence="Very High", speed="Medium", input=["text", "image"], output=["text"],
        ),
        Product(
            id=2, name="Nimbus Chat", description="Fast conversational assistant model", license="Proprietary", price=8,
            intelligence="High", speed="Very Fast", input=["text", "audio"], output=["text", "audio"],
        ),
        Product(
            id=3, name="Orca 13B", description="Open weights chat model", license="MIT", price=0,
            intelligence="Medium", speed="Fast", input=["text"], output=["text"],
        ),
        Product(
            id=4, name="Sparrow 7B", description="Compact open model for text tasks", license="Apache 2.0", price=0,
            intelligence="Medium", speed="Very Fast", input=["text"], output=["text"],
        ),
        Product(
            id=5, name="Lexi Base", description="Encoder model for classification and tagging", license="Apache 2.0", price=0,
            intelligence="Low", speed="Fast", input=["text"], output=["text"],
        ),
    ]
