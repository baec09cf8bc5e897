"""
Static data for French public holidays.
"""

from typing import Dict, Tuple

# (month, day) -> name
FIXED_HOLIDAYS: Dict[Tuple[int, int], str] = {
    (1, 1): "Jour de l'an",
    (5, 1): "Fête du travail",
    (5, 8): "Victoire 1945",
    (7, 14): "Fête nationale",
    (8, 15): "Assomption",
    (11, 1): "Toussaint",
    (11, 11): "Armistice 1918",
    (12, 25): "Noël",
}

# Days after Easter Sunday -> name
EASTER_OFFSETS: Dict[int, str] = {
    1: "Lundi de Pâques",
    39: "Jeudi de l'Ascension",
    50: "Lundi de Pentecôte",
}

# First full year of the Gregorian calendar, last year datetime.date supports
MIN_YEAR = 1583
MAX_YEAR = 9999

WEEKDAY_NAMES = ["Lundi", "Mardi", "Mercredi", "Jeudi", "Vendredi", "Samedi", "Dimanche"]
