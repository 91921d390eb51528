"""Demo catalog content: two topics, two lessons, four questions, two achievements."""

from __future__ import annotations

from sqlalchemy import delete, func, select
from sqlalchemy.orm import Session

from backend.app.models import (
    Achievement,
    BadgeTier,
    Difficulty,
    Lesson,
    Question,
    QuestionType,
    Topic,
)

TOPICS = [
    {
        "key": "ai",
        "name": "AI Fundamentals",
        "description": "Basic concepts and principles of Artificial Intelligence",
        "order_index": 1,
    },
    {
        "key": "ml",
        "name": "Machine Learning",
        "description": "Introduction to Machine Learning algorithms and techniques",
        "order_index": 2,
    },
]

LESSONS = [
    {
        "key": "ai-basics",
        "topic": "ai",
        "title": "What is Artificial Intelligence?",
        "description": "Learn the fundamental concepts of AI and its applications",
        "difficulty": Difficulty.BEGINNER,
        "order_index": 1,
        "prerequisites": [],
    },
    {
        "key": "ml-basics",
        "topic": "ml",
        "title": "Introduction to Machine Learning",
        "description": "Understanding the basics of machine learning",
        "difficulty": Difficulty.BEGINNER,
        "order_index": 1,
        "prerequisites": ["ai-basics"],
    },
]

QUESTIONS = [
    {
        "lesson": "ai-basics",
        "type": QuestionType.MULTIPLE_CHOICE,
        "content": {
            "question": "What does AI stand for?",
            "options": [
                "Artificial Intelligence",
                "Automated Integration",
                "Advanced Interface",
                "Applied Innovation",
            ],
        },
        "correct_answer": {"correctIndices": [0]},
        "explanation": (
            "AI stands for Artificial Intelligence, which refers to computer systems "
            "that can perform tasks that typically require human intelligence."
        ),
        "difficulty": Difficulty.BEGINNER,
        "points": 10,
        "order_index": 1,
    },
    {
        "lesson": "ai-basics",
        "type": QuestionType.TRUE_FALSE,
        "content": {
            "statement": "AI systems can only work with numerical data.",
            "context": "Consider the various types of data that modern AI systems process.",
        },
        "correct_answer": {"correct": False},
        "explanation": (
            "This is false. AI systems can work with many types of data including text, "
            "images, audio, video, and more, not just numerical data."
        ),
        "difficulty": Difficulty.BEGINNER,
        "points": 10,
        "order_index": 2,
    },
    {
        "lesson": "ai-basics",
        "type": QuestionType.FILL_BLANK,
        "content": {
            "text": (
                "Machine Learning is a subset of {{blank1}} that enables computers to "
                "{{blank2}} without being explicitly programmed."
            ),
            "blanks": [
                {
                    "id": "blank1",
                    "acceptedAnswers": ["AI", "Artificial Intelligence", "artificial intelligence"],
                    "caseSensitive": False,
                    "position": 1,
                },
                {
                    "id": "blank2",
                    "acceptedAnswers": ["learn", "improve", "adapt"],
                    "caseSensitive": False,
                    "position": 2,
                },
            ],
        },
        "correct_answer": {
            "blanks": {
                "blank1": ["AI", "Artificial Intelligence"],
                "blank2": ["learn", "improve"],
            }
        },
        "explanation": (
            "Machine Learning is indeed a subset of AI that focuses on algorithms "
            "that can learn and improve from data."
        ),
        "difficulty": Difficulty.INTERMEDIATE,
        "points": 15,
        "order_index": 3,
    },
    {
        "lesson": "ml-basics",
        "type": QuestionType.MATCHING,
        "content": {
            "leftItems": [
                {"id": "supervised", "content": "Supervised Learning", "type": "text"},
                {"id": "unsupervised", "content": "Unsupervised Learning", "type": "text"},
                {"id": "reinforcement", "content": "Reinforcement Learning", "type": "text"},
            ],
            "rightItems": [
                {"id": "labeled", "content": "Uses labeled training data", "type": "text"},
                {"id": "patterns", "content": "Finds hidden patterns in data", "type": "text"},
                {"id": "rewards", "content": "Learns through rewards and penalties", "type": "text"},
            ],
            "instructions": "Match each type of machine learning with its correct description.",
        },
        "correct_answer": {
            "pairs": {
                "supervised": "labeled",
                "unsupervised": "patterns",
                "reinforcement": "rewards",
            }
        },
        "explanation": (
            "Supervised learning uses labeled data, unsupervised learning finds patterns "
            "in unlabeled data, and reinforcement learning uses a reward system."
        ),
        "difficulty": Difficulty.INTERMEDIATE,
        "points": 20,
        "order_index": 1,
    },
]

ACHIEVEMENTS = [
    {
        "name": "First Steps",
        "description": "Complete your first lesson",
        "criteria": {"type": "lesson_completed", "target": 1},
        "points": 50,
        "badge_tier": BadgeTier.BRONZE,
    },
    {
        "name": "Quick Learner",
        "description": "Answer 10 questions correctly in a row",
        "criteria": {"type": "streak", "target": 10},
        "points": 100,
        "badge_tier": BadgeTier.SILVER,
    },
]


def count_rows(session: Session) -> dict[str, int]:
    return {
        "topics": session.scalar(select(func.count()).select_from(Topic)),
        "lessons": session.scalar(select(func.count()).select_from(Lesson)),
        "questions": session.scalar(select(func.count()).select_from(Question)),
        "achievements": session.scalar(select(func.count()).select_from(Achievement)),
    }


def clear_database(session: Session) -> None:
    for model in (Question, Lesson, Topic, Achievement):
        session.execute(delete(model))
    session.flush()


def seed_database(session: Session, reset: bool = False) -> dict[str, int]:
    """Insert the demo catalog and return row counts.

    Does nothing when topics already exist, unless ``reset`` is set, in which
    case every table is emptied first.
    """
    if reset:
        clear_database(session)
    elif session.scalar(select(func.count()).select_from(Topic)):
        return count_rows(session)

    topics = {}
    for spec in TOPICS:
        fields = {k: v for k, v in spec.items() if k != "key"}
        topics[spec["key"]] = Topic(**fields)
    session.add_all(topics.values())

    lessons = {}
    for spec in LESSONS:
        fields = {k: v for k, v in spec.items() if k not in ("key", "topic", "prerequisites")}
        lessons[spec["key"]] = Lesson(topic=topics[spec["topic"]], prerequisites=[], **fields)
    session.add_all(lessons.values())
    # ids are assigned on flush; prerequisites reference them
    session.flush()
    for spec in LESSONS:
        lessons[spec["key"]].prerequisites = [lessons[k].id for k in spec["prerequisites"]]

    for spec in QUESTIONS:
        fields = {k: v for k, v in spec.items() if k != "lesson"}
        session.add(Question(lesson=lessons[spec["lesson"]], **fields))

    session.add_all(Achievement(**spec) for spec in ACHIEVEMENTS)
    session.commit()
    return count_rows(session)
