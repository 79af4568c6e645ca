# File: wordstack_app/modules/vocabulary/services/word_service.py
# Word lifecycle: add (with generated sentences/detail), check answers, delete.

import logging
from typing import List, Optional

from flask import current_app
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from wordstack_app.core.error_handlers import (
    DuplicateWordError,
    EmptyGenerationError,
    NotFoundError,
    StorageError,
)
from wordstack_app.core.extensions import db
from wordstack_app.core.signals import word_added, word_deleted, word_learned
from wordstack_app.models import Sentence, Word, WordDetail
from wordstack_app.modules.AI.interface import AIInterface
from wordstack_app.modules.AI.logics.prompts import (
    build_sentences_prompt,
    build_translation_check_prompt,
    build_word_detail_prompt,
)
from wordstack_app.modules.AI.logics.response_parser import ResponseParser
from wordstack_app.utils.db_session import transaction
from ..schemas import AddWordResultDTO, CheckAnswerResultDTO, WordDetailDTO

logger = logging.getLogger(__name__)

ADD_WORD_FAILED = 'Error adding word and generating sentences.'
CHECK_ANSWER_FAILED = 'Error checking answer.'


class WordService:
    """Orchestrates the word lifecycle against the database and the generator."""

    @staticmethod
    def list_words() -> List[Word]:
        """All words, ordered alphabetically."""
        try:
            return Word.query.order_by(Word.text).all()
        except SQLAlchemyError as exc:
            raise StorageError('Error fetching words.', error=str(exc)) from exc

    @staticmethod
    def add_word(text: str, language: Optional[str] = None) -> AddWordResultDTO:
        """
        Insert the word, generate its sentences (and detail) and store them.

        Everything happens in one transaction: a duplicate word, a failed or
        empty generation, or a database error leaves no trace of the word.
        Fewer sentences than requested is accepted.
        """
        config = current_app.config
        language = language or config['WORD_DEFAULT_LANGUAGE']
        sentence_count = config.get('SENTENCES_PER_WORD', 5)
        with_detail = bool(config.get('WORD_DETAILS_ENABLED', True))

        try:
            with transaction(db.session):
                word = Word(text=text, language=language, status=Word.STATUS_LEARNING)
                db.session.add(word)
                db.session.flush()

                raw_sentences = AIInterface.generate_text(
                    build_sentences_prompt(text, language, sentence_count),
                    feature='word_sentences',
                    context_ref=f'WORD_{word.id}',
                    message=ADD_WORD_FAILED,
                )
                sentences = ResponseParser.parse_numbered_list(ResponseParser.clean_markdown(raw_sentences))
                if not sentences:
                    raise EmptyGenerationError()

                db.session.add_all([Sentence(word_id=word.id, text=sentence) for sentence in sentences])

                if with_detail:
                    detail_text = AIInterface.generate_text(
                        build_word_detail_prompt(text, language, config.get('LEARNER_LANGUAGE', 'Portuguese')),
                        feature='word_detail',
                        context_ref=f'WORD_{word.id}',
                        message=ADD_WORD_FAILED,
                    )
                    db.session.add(WordDetail(word_id=word.id, detail_text=detail_text))

                word_id = word.id
        except IntegrityError as exc:
            # The only unique constraint touched here is words.text.
            raise DuplicateWordError(error=str(exc.orig)) from exc
        except SQLAlchemyError as exc:
            raise StorageError(ADD_WORD_FAILED, error=str(exc)) from exc

        logger.info(f"Word '{text}' (#{word_id}) added with {len(sentences)} sentences.")
        word_added.send(
            current_app._get_current_object(),
            word_id=word_id,
            word=text,
            language=language,
            sentence_count=len(sentences),
            has_detail=with_detail,
        )
        return AddWordResultDTO(id=word_id, word=text, sentence_count=len(sentences), has_detail=with_detail)

    @staticmethod
    def check_translation(sentence_id: int, word_id: int, original_sentence: str, user_answer: str) -> CheckAnswerResultDTO:
        """
        Ask the generator whether the translation is right.

        A correct answer consumes the sentence; when it was the word's last
        one the word becomes 'learned'. A wrong answer changes nothing.
        """
        verdict = AIInterface.generate_text(
            build_translation_check_prompt(original_sentence, user_answer),
            feature='translation_check',
            context_ref=f'SENTENCE_{sentence_id}',
            message=CHECK_ANSWER_FAILED,
        )

        if not ResponseParser.is_correct_verdict(verdict):
            return CheckAnswerResultDTO(correct=False)

        # TODO: lock the word row (SELECT ... FOR UPDATE) so two concurrent correct
        # answers cannot both read a stale remaining count.
        try:
            with transaction(db.session):
                deleted = Sentence.query.filter_by(id=sentence_id, word_id=word_id).delete(synchronize_session=False)
                remaining = Sentence.query.filter_by(word_id=word_id).count()
                learned = False
                # Only the answer that consumes the last sentence flips the word.
                if deleted and remaining == 0:
                    updated = Word.query.filter_by(id=word_id, status=Word.STATUS_LEARNING).update(
                        {'status': Word.STATUS_LEARNED}, synchronize_session=False
                    )
                    learned = updated == 1
        except SQLAlchemyError as exc:
            raise StorageError(CHECK_ANSWER_FAILED, error=str(exc)) from exc

        if learned:
            logger.info(f"Word #{word_id} learned.")
            word_learned.send(current_app._get_current_object(), word_id=word_id)

        return CheckAnswerResultDTO(correct=True, word_learned=learned, remaining=remaining)

    @staticmethod
    def delete_word(word_id: int) -> None:
        """Delete a word; the database cascades to its sentences and detail."""
        try:
            with transaction(db.session):
                deleted = Word.query.filter_by(id=word_id).delete(synchronize_session=False)
        except SQLAlchemyError as exc:
            raise StorageError('Server error while deleting the word.', error=str(exc)) from exc

        if not deleted:
            raise NotFoundError('Word not found.')

        db.session.expire_all()
        word_deleted.send(current_app._get_current_object(), word_id=word_id)

    @staticmethod
    def get_word_detail(word_id: int) -> WordDetailDTO:
        """The generated explanation of a word."""
        try:
            row = (
                db.session.query(Word, WordDetail)
                .join(WordDetail, WordDetail.word_id == Word.id)
                .filter(Word.id == word_id)
                .first()
            )
        except SQLAlchemyError as exc:
            raise StorageError('Error fetching word detail.', error=str(exc)) from exc

        if row is None:
            raise NotFoundError('Word detail not found.')

        word, detail = row
        return WordDetailDTO(word_id=word.id, word=word.text, detail=detail.detail_text)
