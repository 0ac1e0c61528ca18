TEAMS = ["Vikings", "Dragons", "Elites", "Lions", "Warriors", "Falcons"]

HALF_LENGTH_SECONDS = 45 * 60     # First Half / Second Half boundary
TICK_SECONDS        = 1.0
STORAGE_KEY         = "gameState"

STAT_ROWS = [
    # (label, TeamStats attribute, is_event_list)
    ("Shots", "shots", False),
    ("Saves", "saves", False),
    ("Fouls", "fouls", False),
    ("Yellow Cards", "yellow_cards", True),
    ("Red Cards", "red_cards", True),
]
