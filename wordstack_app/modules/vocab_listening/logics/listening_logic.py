# File: wordstack_app/modules/vocab_listening/logics/listening_logic.py
# Listening / reading comprehension exercise: generated text + questions, AI feedback.
# Nothing is stored.

import logging
from typing import List

from flask import current_app

from wordstack_app.core.error_handlers import MalformedGenerationError
from wordstack_app.modules.AI.interface import AIInterface
from wordstack_app.modules.AI.logics.prompts import (
    build_listening_exercise_prompt,
    build_listening_feedback_prompt,
)
from wordstack_app.modules.AI.logics.response_parser import ResponseParser
from ..schemas import ListeningExerciseDTO

logger = logging.getLogger(__name__)

LISTENING_START_FAILED = 'Error generating listening lesson.'


def generate_listening_exercise() -> ListeningExerciseDTO:
    """
    Ask the generator for a short text and its comprehension questions.

    Raises MalformedGenerationError when the markers are missing or the
    number of questions is wrong.
    """
    question_count = current_app.config.get('LISTENING_QUESTION_COUNT', 3)
    prompt = build_listening_exercise_prompt(
        max_chars=current_app.config.get('LISTENING_MAX_CHARS', 300),
        question_count=question_count,
    )
    raw = AIInterface.generate_text(
        prompt,
        feature='listening_exercise',
        message=LISTENING_START_FAILED,
    )

    try:
        parsed = ResponseParser.parse_listening_exercise(
            ResponseParser.clean_markdown(raw), question_count=question_count
        )
    except MalformedGenerationError as exc:
        logger.warning(f"Listening exercise rejected: {exc.error}")
        raise MalformedGenerationError(LISTENING_START_FAILED, error=exc.error) from exc

    logger.debug(f"Listening exercise generated ({len(parsed['text'])} chars).")
    return ListeningExerciseDTO(text=parsed['text'], questions=parsed['questions'])


def check_listening_answers(text: str, questions: List[str], answers: List[str]) -> str:
    """Generated feedback on the learner's answers, returned verbatim."""
    prompt = build_listening_feedback_prompt(
        text,
        questions,
        answers,
        learner_language=current_app.config.get('LEARNER_LANGUAGE', 'Portuguese'),
    )
    return AIInterface.generate_text(
        prompt,
        feature='listening_feedback',
        message='Error processing the answers.',
    )
