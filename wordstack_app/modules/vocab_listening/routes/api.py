from flask import jsonify, request

from wordstack_app.utils.validation import load_payload
from .. import blueprint
from ..logics.listening_logic import check_listening_answers, generate_listening_exercise
from ..schemas import ListeningCheckSchema


@blueprint.route('/start', methods=['GET'])
def start_listening():
    """API: A new text with its comprehension questions."""
    exercise = generate_listening_exercise()
    return jsonify({'text': exercise.text, 'questions': exercise.questions}), 200


@blueprint.route('/check', methods=['POST'])
def check_listening():
    """
    API: Feedback on the learner's answers.
    Body: { "text": "...", "questions": [...], "answers": [...] }
    """
    data = load_payload(
        ListeningCheckSchema(),
        request.get_json(silent=True),
        'Not enough data to check the answers.'
    )
    feedback = check_listening_answers(data['text'], data['questions'], data['answers'])
    return jsonify({'feedback': feedback}), 200
