"""Read-only queries over the topic/lesson/question catalog."""

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from ..models import Question, Topic


def list_topics(session: Session) -> list[dict]:
    """All topics ordered by orderIndex, each with its ordered lessons."""
    stmt = (
        select(Topic)
        .options(selectinload(Topic.lessons))
        .order_by(Topic.order_index)
    )
    return [topic.to_dict() for topic in session.scalars(stmt)]


def list_lesson_questions(session: Session, lesson_id: str) -> list[dict]:
    """Questions of one lesson ordered by orderIndex (empty for unknown ids)."""
    stmt = (
        select(Question)
        .where(Question.lesson_id == lesson_id)
        .order_by(Question.order_index)
    )
    return [question.to_dict() for question in session.scalars(stmt)]
