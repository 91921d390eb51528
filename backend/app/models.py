"""SQLAlchemy ORM models for topics, lessons, questions and achievements."""

from __future__ import annotations

import enum
import uuid
from datetime import datetime, timezone

from sqlalchemy import JSON, DateTime, Enum, ForeignKey, Integer, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


def _new_id() -> str:
    return uuid.uuid4().hex


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _iso(value: datetime | None) -> str | None:
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class Difficulty(str, enum.Enum):
    BEGINNER = "BEGINNER"
    INTERMEDIATE = "INTERMEDIATE"
    ADVANCED = "ADVANCED"


class QuestionType(str, enum.Enum):
    MULTIPLE_CHOICE = "MULTIPLE_CHOICE"
    TRUE_FALSE = "TRUE_FALSE"
    FILL_BLANK = "FILL_BLANK"
    MATCHING = "MATCHING"


class BadgeTier(str, enum.Enum):
    BRONZE = "BRONZE"
    SILVER = "SILVER"
    GOLD = "GOLD"
    PLATINUM = "PLATINUM"


class Base(DeclarativeBase):
    pass


class Topic(Base):
    __tablename__ = "topics"

    id: Mapped[str] = mapped_column(String, primary_key=True, default=_new_id)
    name: Mapped[str] = mapped_column(String, nullable=False)
    description: Mapped[str | None] = mapped_column(Text)
    order_index: Mapped[int] = mapped_column(Integer, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)

    lessons: Mapped[list[Lesson]] = relationship(
        back_populates="topic",
        order_by="Lesson.order_index",
        cascade="all, delete-orphan",
    )

    def to_dict(self, include_lessons: bool = True) -> dict:
        data = {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "orderIndex": self.order_index,
            "createdAt": _iso(self.created_at),
        }
        if include_lessons:
            data["lessons"] = [lesson.to_dict() for lesson in self.lessons]
        return data


class Lesson(Base):
    __tablename__ = "lessons"

    id: Mapped[str] = mapped_column(String, primary_key=True, default=_new_id)
    topic_id: Mapped[str] = mapped_column(String, ForeignKey("topics.id"), nullable=False)
    title: Mapped[str] = mapped_column(String, nullable=False)
    description: Mapped[str | None] = mapped_column(Text)
    difficulty: Mapped[Difficulty] = mapped_column(
        Enum(Difficulty), nullable=False, default=Difficulty.BEGINNER
    )
    order_index: Mapped[int] = mapped_column(Integer, nullable=False)
    prerequisites: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)

    topic: Mapped[Topic] = relationship(back_populates="lessons")
    questions: Mapped[list[Question]] = relationship(
        back_populates="lesson",
        order_by="Question.order_index",
        cascade="all, delete-orphan",
    )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "topicId": self.topic_id,
            "title": self.title,
            "description": self.description,
            "difficulty": self.difficulty.value,
            "orderIndex": self.order_index,
            "prerequisites": list(self.prerequisites or []),
            "createdAt": _iso(self.created_at),
        }


class Question(Base):
    __tablename__ = "questions"

    id: Mapped[str] = mapped_column(String, primary_key=True, default=_new_id)
    lesson_id: Mapped[str] = mapped_column(String, ForeignKey("lessons.id"), nullable=False)
    type: Mapped[QuestionType] = mapped_column(Enum(QuestionType), nullable=False)
    content: Mapped[dict] = mapped_column(JSON, nullable=False)
    correct_answer: Mapped[dict] = mapped_column(JSON, nullable=False)
    explanation: Mapped[str | None] = mapped_column(Text)
    difficulty: Mapped[Difficulty] = mapped_column(
        Enum(Difficulty), nullable=False, default=Difficulty.BEGINNER
    )
    points: Mapped[int] = mapped_column(Integer, nullable=False, default=10)
    order_index: Mapped[int] = mapped_column(Integer, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)

    lesson: Mapped[Lesson] = relationship(back_populates="questions")

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "lessonId": self.lesson_id,
            "type": self.type.value,
            "content": self.content,
            "correctAnswer": self.correct_answer,
            "explanation": self.explanation,
            "difficulty": self.difficulty.value,
            "points": self.points,
            "orderIndex": self.order_index,
            "createdAt": _iso(self.created_at),
        }


class Achievement(Base):
    __tablename__ = "achievements"

    id: Mapped[str] = mapped_column(String, primary_key=True, default=_new_id)
    name: Mapped[str] = mapped_column(String, nullable=False, unique=True)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    criteria: Mapped[dict] = mapped_column(JSON, nullable=False)
    points: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    badge_tier: Mapped[BadgeTier] = mapped_column(Enum(BadgeTier), nullable=False)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "criteria": self.criteria,
            "points": self.points,
            "badgeTier": self.badge_tier.value,
        }
