# File: wordstack_app/modules/vocabulary/events.py
# Signal subscribers for the vocabulary module.

import logging

from wordstack_app.core.signals import word_added, word_deleted, word_learned

logger = logging.getLogger(__name__)


@word_added.connect
def on_word_added(sender, **kwargs):
    logger.info(
        "Vocabulary: word #%s '%s' (%s) ready with %s sentences, detail=%s",
        kwargs.get('word_id'),
        kwargs.get('word'),
        kwargs.get('language'),
        kwargs.get('sentence_count'),
        kwargs.get('has_detail'),
    )


@word_learned.connect
def on_word_learned(sender, **kwargs):
    logger.info("Vocabulary: word #%s has no sentences left and is now learned", kwargs.get('word_id'))


@word_deleted.connect
def on_word_deleted(sender, **kwargs):
    logger.info("Vocabulary: word #%s deleted", kwargs.get('word_id'))
