# EduShelf brand colors

# Main color palette
colors = {
    "indigo": "#4C6EF5",
    "violet": "#7950F2",
    "blue": "#228BE6",
    "teal": "#12B886",
    "green": "#40C057",
    "yellow": "#FAB005",
    "orange": "#FD7E14",
    "pink": "#E64980",
    "red": "#FA5252",
    "gray": "#868E96",
}

# Gradient placeholders (dmc ThemeIcon ``gradient`` prop) per card category
placeholder_gradients = {
    "default": {"from": "gray", "to": "indigo", "deg": 135},
    "blog": {"from": "blue", "to": "violet", "deg": 135},
    "course": {"from": "indigo", "to": "cyan", "deg": 135},
    "instructor": {"from": "teal", "to": "lime", "deg": 135},
    "category": {"from": "orange", "to": "yellow", "deg": 135},
    "user": {"from": "pink", "to": "grape", "deg": 135},
}

# Badge colors for course levels
level_colors = {
    "beginner": "green",
    "intermediate": "yellow",
    "advanced": "red",
}

online_color = colors["green"]
