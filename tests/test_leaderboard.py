from frontend.leaderboard import LEADERBOARD, rank_label, top


def test_rank_labels():
    assert [rank_label(r) for r in (1, 2, 3, 4, 10)] == ["🥇", "🥈", "🥉", "#4", "#10"]


def test_top_entries_by_rank():
    assert [e["name"] for e in top(3)] == ["Alex Chen", "Sarah Kim", "Marcus Johnson"]
    assert len(top(100)) == len(LEADERBOARD)
    assert top(0) == []
