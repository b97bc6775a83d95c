from __future__ import annotations

from typing import Any

from menu_api.menu.models import MenuItem

SEED_MENU: tuple[dict[str, Any], ...] = (
    {
        "id": 1,
        "name": "Classic Burger",
        "description": "Juicy beef patty with fresh toppings",
        "price": 12.99,
        "category": "entree",
        "ingredients": ["beef", "lettuce", "tomato", "cheese"],
        "available": True,
    },
    {
        "id": 2,
        "name": "Chicken Caesar Salad",
        "description": "Crisp romaine lettuce with grilled chicken",
        "price": 11.50,
        "category": "entree",
        "ingredients": ["chicken", "romaine", "parmesan", "croutons"],
        "available": True,
    },
    {
        "id": 3,
        "name": "Mozzarella Sticks",
        "description": "Golden fried mozzarella with marinara sauce",
        "price": 8.99,
        "category": "appetizer",
        "ingredients": ["mozzarella", "breading", "marinara"],
        "available": True,
    },
    {
        "id": 4,
        "name": "Chocolate Lava Cake",
        "description": "Warm chocolate cake with molten center",
        "price": 7.99,
        "category": "dessert",
        "ingredients": ["chocolate", "flour", "eggs", "butter"],
        "available": True,
    },
    {
        "id": 5,
        "name": "Fresh Lemonade",
        "description": "Refreshing homemade lemonade",
        "price": 3.99,
        "category": "beverage",
        "ingredients": ["lemon juice", "water", "sugar"],
        "available": True,
    },
    {
        "id": 6,
        "name": "Apple Pie",
        "description": "Classic apple pie with cinnamon spice",
        "price": 4.50,
        "category": "dessert",
        "ingredients": ["apples", "cinnamon", "flour", "sugar"],
        "available": True,
    },
    {
        "id": 7,
        "name": "Chicken Over Rice",
        "description": "Grilled chicken served over seasoned yellow rice with white sauce",
        "price": 10.50,
        "category": "entree",
        "ingredients": ["Chicken", "Rice", "White Sauce", "Pita"],
        "available": True,
    },
    {
        "id": 8,
        "name": "Fish over Rice",
        "description": "Grilled fish of fry served over white sauces and Hot sauces",
        "price": 18.00,
        "category": "entree",
        "ingredients": ["Fry Fish", "Rice", "Shrimp", "lettuces", "white sauces"],
    },
)


def load_seed_items() -> list[MenuItem]:
    return [MenuItem.model_validate(item) for item in SEED_MENU]
