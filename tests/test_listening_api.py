import pytest


LISTENING_REPLY = (
    "[START_TEXT]\n"
    "The museum opens at nine. Entry is free on Sundays.\n"
    "[END_TEXT]\n"
    "[START_QUESTIONS]\n"
    "1. When does the museum open?\n"
    "2. How much is entry on Sundays?\n"
    "3. What kind of place is described?\n"
    "[END_QUESTIONS]"
)


class TestListeningStart:

    def test_start(self, client, ai_client):
        ai_client.replace('listening_exercise', LISTENING_REPLY)

        response = client.get('/api/listening/start')

        assert response.status_code == 200
        data = response.get_json()
        assert data['text'] == 'The museum opens at nine. Entry is free on Sundays.'
        assert data['questions'] == [
            'When does the museum open?',
            'How much is entry on Sundays?',
            'What kind of place is described?',
        ]

    def test_prompt_format(self, client, ai_client):
        ai_client.replace('listening_exercise', LISTENING_REPLY)

        client.get('/api/listening/start')

        prompt = ai_client.prompts_for('listening_exercise')[0]
        assert '300 characters' in prompt
        assert 'exactly 3 comprehension questions' in prompt
        for marker in ('[START_TEXT]', '[END_TEXT]', '[START_QUESTIONS]', '[END_QUESTIONS]'):
            assert marker in prompt

    def test_fenced_reply_is_accepted(self, client, ai_client):
        ai_client.replace('listening_exercise', f"```\n{LISTENING_REPLY}\n```")

        response = client.get('/api/listening/start')

        assert response.status_code == 200
        assert len(response.get_json()['questions']) == 3

    def test_malformed_reply(self, client, ai_client):
        ai_client.replace('listening_exercise', LISTENING_REPLY.replace('3. What kind of place is described?\n', ''))

        response = client.get('/api/listening/start')

        assert response.status_code == 500
        data = response.get_json()
        assert data['message'] == 'Error generating listening lesson.'
        assert data['code'] == 'MALFORMED_GENERATION'
        assert 'Expected 3 questions' in data['error']

    def test_generation_failure(self, client, ai_client):
        ai_client.replace('listening_exercise', (False, 'quota'))

        response = client.get('/api/listening/start')

        assert response.status_code == 500
        assert response.get_json()['error'] == 'quota'


class TestListeningCheck:

    BODY = {
        'text': 'The museum opens at nine.',
        'questions': ['When does it open?', 'Is it a museum?', 'Is it free?'],
        'answers': ['At nine.', 'Yes.', 'I do not know.'],
    }

    def test_feedback(self, client, ai_client):
        ai_client.replace('listening_feedback', 'Muito bem! Duas respostas corretas.')

        response = client.post('/api/listening/check', json=self.BODY)

        assert response.status_code == 200
        assert response.get_json() == {'feedback': 'Muito bem! Duas respostas corretas.'}

        prompt = ai_client.prompts_for('listening_feedback')[0]
        assert '"The museum opens at nine."' in prompt
        assert '3. Question: "Is it free?"' in prompt
        assert 'Answer: "I do not know."' in prompt
        assert 'Portuguese' in prompt

    @pytest.mark.parametrize('missing', ['text', 'questions', 'answers'])
    def test_missing_field(self, client, missing):
        body = dict(self.BODY)
        body.pop(missing)

        response = client.post('/api/listening/check', json=body)

        assert response.status_code == 400
        assert response.get_json()['message'] == 'Not enough data to check the answers.'

    def test_answers_must_match_questions(self, client):
        body = dict(self.BODY, answers=['At nine.'])

        response = client.post('/api/listening/check', json=body)

        assert response.status_code == 400

    def test_generation_failure(self, client, ai_client):
        ai_client.replace('listening_feedback', (False, 'down'))

        response = client.post('/api/listening/check', json=self.BODY)

        assert response.status_code == 500
        assert response.get_json()['message'] == 'Error processing the answers.'
