from typing import Optional

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError

from wordstack_app.core.error_handlers import StorageError
from wordstack_app.models import Sentence, Word
from ..schemas import LessonSentenceDTO


class LessonService:
    @staticmethod
    def pick_random_sentence() -> Optional[LessonSentenceDTO]:
        """A random sentence of a word still being learned, or None when nothing is left."""
        try:
            sentence = (
                Sentence.query
                .join(Word, Sentence.word_id == Word.id)
                .filter(Word.status == Word.STATUS_LEARNING)
                .order_by(func.random())
                .first()
            )
        except SQLAlchemyError as exc:
            raise StorageError('Error starting lesson.', error=str(exc)) from exc

        if sentence is None:
            return None
        return LessonSentenceDTO(id=sentence.id, word_id=sentence.word_id, sentence_text=sentence.text)
