"""Battlefield grid, units, enemy AI, player learning, camera and status-panel logic for a grid tactics game."""

__version__ = "0.1.0"

__all__ = [
    "units",
    "board",
    "camera",
    "enemy_ai",
    "learning",
    "field_menu",
    "hud_status",
]