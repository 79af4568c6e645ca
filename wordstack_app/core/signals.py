"""
Central Signal Registry.

Usage:
    # Publisher (sender)
    from wordstack_app.core.signals import word_learned
    word_learned.send(None, word_id=1)

    # Subscriber (receiver) - in module's events.py
    @word_learned.connect
    def on_word_learned(sender, **kwargs):
        ...
"""
from blinker import Namespace

vocabulary_signals = Namespace()

# Signal: Fired after a word and its generated sentences are committed
# Payload: word_id, word, language, sentence_count, has_detail
word_added = vocabulary_signals.signal('word_added')

# Signal: Fired when the last sentence of a word is answered correctly
# Payload: word_id
word_learned = vocabulary_signals.signal('word_learned')

# Signal: Fired when a word (and its sentences/detail) is deleted
# Payload: word_id
word_deleted = vocabulary_signals.signal('word_deleted')
