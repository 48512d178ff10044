"""
Static menu served by the public demo page.

Prices are display strings, so carts built from this menu use the demo cart
variant (name as key, currency-string price).
"""

DEMO_RESTAURANT_NAME = "Kerala Kitchen"

DEMO_MENU_ITEMS = [
    {
        "name": "Kerala Parotta",
        "description": "Flaky layered flatbread, perfect with any curry",
        "price": "₹40",
        "image": "https://www.shutterstock.com/image-photo/kerala-paratha-porotta-spicy-beef-600w-1177440301.jpg",
        "veg": True,
        "category": "Breakfast",
    },
    {
        "name": "Puttu & Kadala",
        "description": "Steamed rice cake with black chickpea curry",
        "price": "₹80",
        "image": "https://example.com/puttu.jpg",
        "veg": True,
        "category": "Breakfast",
    },
    {
        "name": "Beef Curry",
        "description": "Spicy traditional Kerala beef curry",
        "price": "₹180",
        "image": "https://example.com/beef.jpg",
        "veg": False,
        "category": "Lunch",
    },
    {
        "name": "Chicken Biriyani",
        "description": "Fragrant rice dish with spiced chicken",
        "price": "₹220",
        "image": "https://example.com/biriyani.jpg",
        "veg": False,
        "category": "Lunch",
    },
    {
        "name": "Fish Molee",
        "description": "Creamy coconut fish curry",
        "price": "₹220",
        "image": "https://example.com/fish.jpg",
        "veg": False,
        "category": "Dinner",
    },
    {
        "name": "Appam & Stew",
        "description": "Lacy rice pancakes with vegetable stew",
        "price": "₹150",
        "image": "https://example.com/appam.jpg",
        "veg": True,
        "category": "Dinner",
    },
    {
        "name": "Mango Lassi",
        "description": "Refreshing yogurt drink with mango",
        "price": "₹80",
        "image": "https://example.com/lassi.jpg",
        "veg": True,
        "category": "Beverages",
    },
    {
        "name": "Payasam",
        "description": "Traditional Kerala sweet pudding",
        "price": "₹100",
        "image": "https://example.com/payasam.jpg",
        "veg": True,
        "category": "Desserts",
    },
]

ALL_CATEGORIES = "All"
