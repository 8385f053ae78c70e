"""
Default expense categories, seeded the first time the category list is requested.
"""

DEFAULT_CATEGORIES = [
    {"name": "Housing", "icon": "home", "color": "red"},
    {"name": "Utilities", "icon": "bolt", "color": "blue"},
    {"name": "Transportation", "icon": "car", "color": "green"},
    {"name": "Food & Groceries", "icon": "utensils", "color": "orange"},
    {"name": "Insurance", "icon": "shield", "color": "purple"},
    {"name": "Entertainment", "icon": "play", "color": "pink"},
    {"name": "Other", "icon": "ellipsis-h", "color": "gray"},
]

# Colour reported for a category that has no stored row
FALLBACK_CATEGORY_COLOR = "gray"

# Icon values meaning "use the category icon"
PLACEHOLDER_ICONS = {"default", ""}
