"""
Response Parser - Pure functions to clean and parse AI outputs.

The generator answers in free text; everything here is plain string work so
that model-output drift can be tested without a database or network.
"""
import re
from typing import Dict, List, Union

from wordstack_app.core.error_handlers import MalformedGenerationError

NUMBERING_PATTERN = re.compile(r'^\d+\.\s*')

TEXT_START = '[START_TEXT]'
TEXT_END = '[END_TEXT]'
QUESTIONS_START = '[START_QUESTIONS]'
QUESTIONS_END = '[END_QUESTIONS]'

CORRECT_TOKEN = 'CORRECT'
INCORRECT_TOKEN = 'INCORRECT'


class ResponseParser:
    """Utility to clean and structure AI responses."""

    @staticmethod
    def clean_markdown(text: str) -> str:
        """
        Remove markdown code blocks from text.
        Example: ```markdown ... ``` -> ...
        """
        if not text:
            return ""

        cleaned = re.sub(r'^```\w*\s*', '', text.strip())
        cleaned = re.sub(r'\s*```$', '', cleaned)
        return cleaned.strip()

    @staticmethod
    def parse_numbered_list(text: str) -> List[str]:
        """
        Turn a numbered list into its items, in order.

        "1. Hi.\\n3.  Bye. \\n" -> ["Hi.", "Bye."]

        Numbering gaps are ignored and lines without a number are kept as they
        are. The number of items is not checked here.
        """
        if not text:
            return []

        items = []
        for line in text.splitlines():
            line = line.strip()
            if not line:
                continue
            item = NUMBERING_PATTERN.sub('', line).strip()
            if item:
                items.append(item)
        return items

    @staticmethod
    def extract_section(text: str, start_marker: str, end_marker: str) -> str:
        """Return the trimmed text between the first start marker and the next end marker."""
        if not text or start_marker not in text:
            raise MalformedGenerationError(error=f"Missing marker {start_marker}.")

        after_start = text.split(start_marker, 1)[1]
        if end_marker not in after_start:
            raise MalformedGenerationError(error=f"Missing marker {end_marker}.")

        return after_start.split(end_marker, 1)[0].strip()

    @staticmethod
    def parse_listening_exercise(text: str, question_count: int = 3) -> Dict[str, Union[str, List[str]]]:
        """
        Split a listening exercise into its text and its questions.

        Expected layout:
            [START_TEXT] ... [END_TEXT]
            [START_QUESTIONS] 1. ... 2. ... 3. ... [END_QUESTIONS]
        """
        passage = ResponseParser.extract_section(text, TEXT_START, TEXT_END)
        questions_block = ResponseParser.extract_section(text, QUESTIONS_START, QUESTIONS_END)
        questions = ResponseParser.parse_numbered_list(questions_block)

        if not passage:
            raise MalformedGenerationError(error="The exercise text is empty.")
        if len(questions) != question_count:
            raise MalformedGenerationError(
                error=f"Expected {question_count} questions, got {len(questions)}."
            )

        return {'text': passage, 'questions': questions}

    @staticmethod
    def is_correct_verdict(text: str) -> bool:
        """
        Read a CORRECT / INCORRECT verdict.

        Case-insensitive substring match on CORRECT; occurrences that belong to
        INCORRECT do not count.
        """
        if not text:
            return False
        upper = text.upper()
        return CORRECT_TOKEN in upper.replace(INCORRECT_TOKEN, '')
