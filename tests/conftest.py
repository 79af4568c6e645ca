import os
import sys

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from wordstack_app import create_app, db
from wordstack_app.core.config import Config


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_ENGINE_OPTIONS = {
        'connect_args': {'check_same_thread': False}
    }
    GEMINI_API_KEY = None
    LOG_DIR = None
    LOG_LEVEL = 'WARNING'
    WORD_DETAILS_ENABLED = True


class FakeAIClient:
    """
    Stands in for the Gemini client.

    Answers are queued per feature; the last queued answer of a feature is
    reused once the queue runs dry. An Exception instance is raised instead of
    returned, a (False, msg) tuple is returned as a failed generation.
    """

    def __init__(self):
        self.answers = {}
        self.calls = []

    def answer(self, feature, *answers):
        self.answers.setdefault(feature, []).extend(answers)
        return self

    def replace(self, feature, *answers):
        self.answers[feature] = list(answers)
        return self

    def prompts_for(self, feature):
        return [call['prompt'] for call in self.calls if call['feature'] == feature]

    def generate_content(self, prompt, feature='default', context_ref='N/A'):
        self.calls.append({'prompt': prompt, 'feature': feature, 'context_ref': context_ref})
        queue = self.answers.get(feature)
        if not queue:
            return False, f"No canned answer for {feature}"
        answer = queue.pop(0) if len(queue) > 1 else queue[0]
        if isinstance(answer, Exception):
            raise answer
        if isinstance(answer, tuple):
            return answer
        return True, answer


FIVE_SENTENCES = (
    "1. The apple is red.\n"
    "2. She ate an apple for lunch.\n"
    "3. An apple a day keeps the doctor away.\n"
    "4. He picked the ripest apple from the tree.\n"
    "5. Apple pie is my favourite dessert.\n"
)


@pytest.fixture
def ai_client():
    client = FakeAIClient()
    client.answer('word_sentences', FIVE_SENTENCES)
    client.answer('word_detail', "Apple: the round fruit of a tree of the rose family.")
    return client


@pytest.fixture
def app(ai_client):
    app = create_app(TestConfig, ai_client=ai_client)
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()
