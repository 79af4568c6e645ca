# File: wordstack_app/modules/AI/logics/prompts.py
# Prompt templates sent to the text generation client.
# The response formats requested here are the ones response_parser reads back.

SENTENCES_PROMPT = (
    "Generate exactly {count} sentences in the language \"{language}\" using the word \"{word}\". "
    "The sentences must have different levels of complexity and explore different contexts. "
    "Format the answer as a numbered list, with each sentence on a new line and no other text. "
    "Example:\n"
    "{example}"
)

WORD_DETAIL_PROMPT = (
    "As a language tutor, explain the word \"{word}\" (language \"{language}\") "
    "to a learner whose native language is {learner_language}.\n"
    "1. List its main meanings.\n"
    "2. Describe the contexts in which it is commonly used, with a short example for each.\n"
    "3. Mention common expressions or collocations that include it.\n"
    "Keep the explanation clear and concise."
)

TRANSLATION_CHECK_PROMPT = (
    "Is the following translation correct? Answer only with the word 'CORRECT' or 'INCORRECT'. "
    "Original sentence: \"{original}\". Translation: \"{answer}\"."
)

LISTENING_EXERCISE_PROMPT = (
    "Write a text in English for an intermediate-level student.\n"
    "The text must be at most {max_chars} characters long.\n"
    "Explore a varied context (everyday life, academic, cultural, a short news item, etc.). "
    "Change the theme on every request.\n"
    "After the text, write exactly {question_count} comprehension questions about it, in English.\n\n"
    "Format your answer EXACTLY as follows, without any other text or formatting:\n"
    "[START_TEXT]\n"
    "(Your English text here)\n"
    "[END_TEXT]\n"
    "[START_QUESTIONS]\n"
    "{question_lines}\n"
    "[END_QUESTIONS]"
)

LISTENING_FEEDBACK_PROMPT = (
    "Evaluate a student's answers to the following reading comprehension questions.\n"
    "Be a friendly grader and give constructive feedback in {learner_language}.\n"
    "Say whether each answer is correct, partially correct or incorrect, and briefly explain why.\n\n"
    "Original text: \"{text}\"\n\n"
    "Questions and student answers:\n"
    "{qa_block}\n\n"
    "Give overall feedback on the answers in a single paragraph."
)

_ORDINALS = ('first', 'second', 'third', 'fourth', 'fifth', 'sixth', 'seventh', 'eighth', 'ninth', 'tenth')


def _ordinal(index):
    return _ORDINALS[index] if index < len(_ORDINALS) else f"#{index + 1}"


def build_sentences_prompt(word, language, count=5):
    example = "\n".join(f"{i}. Sentence {i}." for i in range(1, count + 1))
    return SENTENCES_PROMPT.format(count=count, language=language, word=word, example=example)


def build_word_detail_prompt(word, language, learner_language):
    return WORD_DETAIL_PROMPT.format(word=word, language=language, learner_language=learner_language)


def build_translation_check_prompt(original, answer):
    return TRANSLATION_CHECK_PROMPT.format(original=original, answer=answer)


def build_listening_exercise_prompt(max_chars=300, question_count=3):
    question_lines = "\n".join(
        f"{i + 1}. (Your {_ordinal(i)} question here)" for i in range(question_count)
    )
    return LISTENING_EXERCISE_PROMPT.format(
        max_chars=max_chars,
        question_count=question_count,
        question_lines=question_lines,
    )


def build_listening_feedback_prompt(text, questions, answers, learner_language):
    """Pair each question with the answer at the same position."""
    qa_lines = []
    for index, (question, answer) in enumerate(zip(questions, answers), start=1):
        qa_lines.append(f"{index}. Question: \"{question}\"\n   Answer: \"{answer}\"")
    return LISTENING_FEEDBACK_PROMPT.format(
        learner_language=learner_language,
        text=text,
        qa_block="\n".join(qa_lines),
    )
