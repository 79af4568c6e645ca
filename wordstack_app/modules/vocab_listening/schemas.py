from dataclasses import dataclass, field
from typing import List

from marshmallow import EXCLUDE, Schema, ValidationError, fields, validate, validates_schema


class ListeningCheckSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    text = fields.Str(required=True, validate=validate.Length(min=1))
    questions = fields.List(fields.Str(), required=True, validate=validate.Length(min=1))
    answers = fields.List(fields.Str(), required=True, validate=validate.Length(min=1))

    @validates_schema
    def validate_pairs(self, data, **kwargs):
        if len(data['questions']) != len(data['answers']):
            raise ValidationError('Every question needs exactly one answer.', 'answers')


@dataclass
class ListeningExerciseDTO:
    text: str
    questions: List[str] = field(default_factory=list)
