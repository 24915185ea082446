"""Campus flower guide: catalogue, bloom map, routes, quiz, check-in log, album and command line."""

__version__ = "0.1.0"

__all__ = ["album", "campus", "checkin", "cli", "flowers", "navigation", "pathfinding", "quiz"]