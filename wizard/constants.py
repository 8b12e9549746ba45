"""Game constants for Wizard."""

# Game limits
MIN_PLAYERS = 3
MAX_PLAYERS = 6

# Card mechanics
MIN_CARD_VALUE = 1
MAX_CARD_VALUE = 13
FOOL_VALUE = 0
WIZARD_VALUE = 14
DECK_SIZE = 60  # 4 colors x 13 numbers + 4 Wizards + 4 Fools

# Seating
MIN_NAME_LENGTH = 2
