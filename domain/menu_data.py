"""
Built-in lunch menu.

Raw rows are kept as plain dicts so the menu can be edited without touching
model code; `default_menu_items()` wraps them into MenuItem instances.
"""

from decimal import Decimal

from domain.enums import Category
from domain.models.menu_item import MenuItem

MENU_ROWS: list[dict[str, str]] = [
    {
        "key": "cauliflower",
        "name": "Cauliflower",
        "description": "Whole cauliflower, brined, roasted, and deep fried",
        "price": "7.00",
        "category": "entree",
    },
    {
        "key": "chili",
        "name": "Three Bean Chili",
        "description": "Black beans, red beans, kidney beans, slow cooked, topped with onion",
        "price": "4.00",
        "category": "entree",
    },
    {
        "key": "pasta",
        "name": "Mushroom Pasta",
        "description": "Penne pasta, mushrooms, basil, with plum tomatoes cooked in garlic and olive oil",
        "price": "5.50",
        "category": "entree",
    },
    {
        "key": "skillet",
        "name": "Spicy Black Bean Skillet",
        "description": "Seasonal vegetables, black beans, house spice blend, served with avocado and quick pickled onions",
        "price": "5.50",
        "category": "entree",
    },
    {
        "key": "salad",
        "name": "Summer Salad",
        "description": "Heirloom tomatoes, butter lettuce, peaches, avocado, balsamic dressing",
        "price": "2.50",
        "category": "side",
    },
    {
        "key": "soup",
        "name": "Butternut Squash Soup",
        "description": "Roasted butternut squash, roasted peppers, chili oil",
        "price": "3.00",
        "category": "side",
    },
    {
        "key": "potatoes",
        "name": "Spicy Potatoes",
        "description": "Marble potatoes, roasted, and fried in house spice blend",
        "price": "2.00",
        "category": "side",
    },
    {
        "key": "rice",
        "name": "Coconut Rice",
        "description": "Rice, coconut milk, lime, and sugar",
        "price": "1.50",
        "category": "side",
    },
    {
        "key": "bread",
        "name": "Lunch Roll",
        "description": "Fresh baked roll made in house",
        "price": "0.50",
        "category": "accompaniment",
    },
    {
        "key": "berries",
        "name": "Mixed Berries",
        "description": "Strawberries, blueberries, raspberries, and huckleberries",
        "price": "1.00",
        "category": "accompaniment",
    },
    {
        "key": "pickles",
        "name": "Pickled Veggies",
        "description": "Pickled cucumbers and carrots, made in house",
        "price": "0.50",
        "category": "accompaniment",
    },
]


def default_menu_items() -> list[MenuItem]:
    """Return the built-in menu as MenuItem instances, in menu order."""
    return [
        MenuItem(
            key=row["key"],
            name=row["name"],
            description=row["description"],
            price=Decimal(row["price"]),
            category=Category(row["category"]),
        )
        for row in MENU_ROWS
    ]
