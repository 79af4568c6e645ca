from flask import request, jsonify

from wordstack_app.utils.validation import load_payload
from .. import blueprint
from ..schemas import AddWordSchema, CheckTranslationSchema
from ..services.lesson_service import LessonService
from ..services.word_service import WordService


@blueprint.route('', methods=['GET'])
def list_words():
    """API: All words, alphabetically."""
    words = WordService.list_words()
    return jsonify([word.to_dict() for word in words]), 200


@blueprint.route('/add', methods=['POST'])
def add_word():
    """
    API: Add a word and generate its example sentences.
    Body: { "word": "...", "language": "en-US" }
    """
    data = load_payload(AddWordSchema(), request.get_json(silent=True), 'The word is required.')

    result = WordService.add_word(data['word'], data.get('language'))
    return jsonify({
        'id': result.id,
        'word': result.word,
        'sentences': result.sentence_count,
        'message': f'{result.sentence_count} sentences were generated and saved.'
    }), 201


@blueprint.route('/lesson/start', methods=['GET'])
def start_lesson():
    """API: A random sentence to translate."""
    sentence = LessonService.pick_random_sentence()
    if sentence is None:
        return jsonify({'message': 'Congratulations! No new sentences to learn.'}), 404

    return jsonify({
        'id': sentence.id,
        'word_id': sentence.word_id,
        'sentence_text': sentence.sentence_text
    }), 200


@blueprint.route('/lesson/check', methods=['POST'])
def check_answer():
    """
    API: Check the learner's translation of a sentence.
    Body: { "sentenceId", "wordId", "originalSentence", "userAnswer" }
    """
    data = load_payload(
        CheckTranslationSchema(),
        request.get_json(silent=True),
        'Not enough data to check the answer.'
    )

    result = WordService.check_translation(
        data['sentence_id'], data['word_id'], data['original_sentence'], data['user_answer']
    )

    if not result.correct:
        return jsonify({'correct': False, 'message': 'Incorrect answer.'}), 200

    if result.word_learned:
        message = 'Correct answer! Word completed!'
    else:
        message = f'Correct answer! {result.remaining} sentences left.'
    return jsonify({
        'correct': True,
        'wordLearned': result.word_learned,
        'remaining': result.remaining,
        'message': message
    }), 200


@blueprint.route('/<int:word_id>/detail', methods=['GET'])
def word_detail(word_id):
    """API: Generated meanings and usage of a word."""
    detail = WordService.get_word_detail(word_id)
    return jsonify({'word_id': detail.word_id, 'word': detail.word, 'detail': detail.detail}), 200


@blueprint.route('/<int:word_id>', methods=['DELETE'])
def delete_word(word_id):
    """API: Delete a word with its sentences and detail."""
    WordService.delete_word(word_id)
    return jsonify({'message': 'Word and its associated sentences were deleted successfully.'}), 200
