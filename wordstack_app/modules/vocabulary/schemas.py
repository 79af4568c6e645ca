from dataclasses import dataclass
from typing import Optional

from marshmallow import EXCLUDE, Schema, fields, pre_load, validate


class _StrippedSchema(Schema):
    """Trims surrounding whitespace from every string field before validation."""

    class Meta:
        unknown = EXCLUDE

    @pre_load
    def strip_strings(self, data, **kwargs):
        if not isinstance(data, dict):
            return data
        return {key: value.strip() if isinstance(value, str) else value for key, value in data.items()}


# --- Request Schemas ---

class AddWordSchema(_StrippedSchema):
    word = fields.Str(required=True, validate=validate.Length(min=1, max=255))
    language = fields.Str(load_default=None, allow_none=True, validate=validate.Length(max=20))


class CheckTranslationSchema(_StrippedSchema):
    sentence_id = fields.Int(required=True, data_key='sentenceId', validate=validate.Range(min=1))
    word_id = fields.Int(required=True, data_key='wordId', validate=validate.Range(min=1))
    original_sentence = fields.Str(required=True, data_key='originalSentence', validate=validate.Length(min=1))
    user_answer = fields.Str(required=True, data_key='userAnswer', validate=validate.Length(min=1))


# --- Result DTOs ---

@dataclass
class AddWordResultDTO:
    id: int
    word: str
    sentence_count: int
    has_detail: bool = False


@dataclass
class CheckAnswerResultDTO:
    correct: bool
    word_learned: Optional[bool] = None
    remaining: Optional[int] = None


@dataclass
class LessonSentenceDTO:
    id: int
    word_id: int
    sentence_text: str


@dataclass
class WordDetailDTO:
    word_id: int
    word: str
    detail: str
