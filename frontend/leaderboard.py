"""Static leaderboard shown on the rankings screen."""

LEADERBOARD = [
    {"id": "1", "name": "Alex Chen", "avatar": "🧑‍💻", "points": 2450, "level": 12,
     "streak": 15, "badges": ["🏆", "⚡", "🧠"], "rank": 1},
    {"id": "2", "name": "Sarah Kim", "avatar": "👩‍🔬", "points": 2380, "level": 11,
     "streak": 12, "badges": ["🎯", "⚡", "🌟"], "rank": 2},
    {"id": "3", "name": "Marcus Johnson", "avatar": "👨‍🎓", "points": 2290, "level": 10,
     "streak": 8, "badges": ["🚀", "🧠", "💎"], "rank": 3},
    {"id": "4", "name": "Emma Wilson", "avatar": "👩‍💼", "points": 2150, "level": 9,
     "streak": 6, "badges": ["🎯", "🌟"], "rank": 4},
    {"id": "5", "name": "You", "avatar": "🙋‍♂️", "points": 1890, "level": 8,
     "streak": 4, "badges": ["⚡", "🌟"], "rank": 5},
    {"id": "6", "name": "David Park", "avatar": "👨‍🏫", "points": 1720, "level": 7,
     "streak": 3, "badges": ["🧠"], "rank": 6},
    {"id": "7", "name": "Lisa Brown", "avatar": "👩‍🚀", "points": 1650, "level": 7,
     "streak": 7, "badges": ["🚀", "💎"], "rank": 7},
    {"id": "8", "name": "James Lee", "avatar": "👨‍💻", "points": 1580, "level": 6,
     "streak": 2, "badges": ["🎯"], "rank": 8},
]

_MEDALS = {1: "🥇", 2: "🥈", 3: "🥉"}


def rank_label(rank: int) -> str:
    """Medal for the podium, '#<rank>' for everyone else."""
    return _MEDALS.get(rank, f"#{rank}")


def top(n: int) -> list[dict]:
    return sorted(LEADERBOARD, key=lambda entry: entry["rank"])[:max(n, 0)]
