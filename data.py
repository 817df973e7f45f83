OPTION_TITLES = {
    "1": "Print menu",
    "2": "Add item",
    "q": "Quit",
}

MENU = [
    {"name": "Coffee", "prices": {"small": 1.65, "medium": 1.80, "large": 1.95}},
    {"name": "Latte", "prices": {"small": 2.45, "medium": 2.85, "large": 3.25}},
    {"name": "Hot Tea", "prices": {"small": 1.40, "medium": 1.60, "large": 1.80}},
]
