"""Editable static menu configuration."""

from __future__ import annotations

# Canonical item values consumed by lunchtray.data (which wraps these into MenuItem instances).
ITEM_META_BY_ID: dict[str, dict[str, str | float]] = {
    "cauliflower": {
        "name": "Cauliflower",
        "description": "Whole cauliflower, brined, roasted, and deep fried",
        "price": 7.00,
        "image": "cauliflower.png",
    },
    "three_bean_chili": {
        "name": "Three Bean Chili",
        "description": "Black beans, red beans, kidney beans, slow cooked, topped with onion",
        "price": 4.00,
        "image": "three_bean_chili.png",
    },
    "mushroom_pasta": {
        "name": "Mushroom Pasta",
        "description": "Penne pasta, mushrooms, basil, with plum tomatoes cooked in garlic and olive oil",
        "price": 5.50,
        "image": "mushroom_pasta.png",
    },
    "spicy_black_bean_skillet": {
        "name": "Spicy Black Bean Skillet",
        "description": "Seasonal vegetables, black beans, house spice blend, served with avocado and quick pickled onions",
        "price": 5.50,
        "image": "spicy_black_bean_skillet.png",
    },
    "summer_salad": {
        "name": "Summer Salad",
        "description": "Heirloom tomatoes, butter lettuce, peaches, avocado, balsamic dressing",
        "price": 2.50,
        "image": "summer_salad.png",
    },
    "butternut_squash_soup": {
        "name": "Butternut Squash Soup",
        "description": "Roasted butternut squash, roasted peppers, chili oil",
        "price": 3.00,
        "image": "butternut_squash_soup.png",
    },
    "spicy_potatoes": {
        "name": "Spicy Potatoes",
        "description": "Marble potatoes, roasted, and fried in house spice blend",
        "price": 2.00,
        "image": "spicy_potatoes.png",
    },
    "coconut_rice": {
        "name": "Coconut Rice",
        "description": "Rice, coconut milk, lime, and sugar",
        "price": 1.50,
        "image": "coconut_rice.png",
    },
    "lunch_roll": {
        "name": "Lunch Roll",
        "description": "Fresh baked roll made in house",
        "price": 0.50,
        "image": "lunch_roll.png",
    },
    "mixed_berries": {
        "name": "Mixed Berries",
        "description": "Strawberries, blueberries, raspberries, and huckleberries",
        "price": 1.00,
        "image": "mixed_berries.png",
    },
    "pickled_veggies": {
        "name": "Pickled Veggies",
        "description": "Pickled cucumbers and carrots, made in house",
        "price": 0.50,
        "image": "pickled_veggies.png",
    },
}

MENU_ITEM_IDS_BY_KIND: dict[str, list[str]] = {
    "entree": [
        "cauliflower",
        "three_bean_chili",
        "mushroom_pasta",
        "spicy_black_bean_skillet",
    ],
    "side_dish": [
        "summer_salad",
        "butternut_squash_soup",
        "spicy_potatoes",
        "coconut_rice",
    ],
    "accompaniment": [
        "lunch_roll",
        "mixed_berries",
        "pickled_veggies",
    ],
}
