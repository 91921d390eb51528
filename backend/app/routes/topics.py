"""REST endpoints for topics and lesson questions."""

import logging
import time

from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..db import get_session
from ..services.catalog import list_lesson_questions, list_topics

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/topics")
def get_topics(request: Request, session: Session = Depends(get_session)):
    """All topics with their lessons, ordered for display."""
    logger.debug("Topics request from origin %s", request.headers.get("origin") or "no-origin")
    started = time.perf_counter()
    try:
        topics = list_topics(session)
    except SQLAlchemyError as exc:
        logger.error("Error fetching topics: %s", exc)
        raise HTTPException(status_code=500, detail={"error": "Failed to fetch topics"}) from exc

    lesson_count = sum(len(t["lessons"]) for t in topics)
    logger.info("Fetched %d topics with %d lessons in %.1fms",
                len(topics), lesson_count, (time.perf_counter() - started) * 1000)
    return topics


@router.get("/lessons/{lesson_id}/questions")
def get_lesson_questions(lesson_id: str, session: Session = Depends(get_session)):
    """Questions for one lesson."""
    try:
        questions = list_lesson_questions(session, lesson_id)
    except SQLAlchemyError as exc:
        logger.error("Error fetching questions for lesson %s: %s", lesson_id, exc)
        raise HTTPException(
            status_code=500,
            detail={"error": "Failed to fetch questions", "lessonId": lesson_id},
        ) from exc

    logger.info("Found %d questions for lesson %s", len(questions), lesson_id)
    return questions
