from datetime import datetime, timezone
from wordstack_app.core.extensions import db


class Word(db.Model):
    """
    A vocabulary entry being learned.
    Starts as 'learning' and becomes 'learned' once its last sentence is answered.
    """
    __tablename__ = 'words'

    STATUS_LEARNING = 'learning'
    STATUS_LEARNED = 'learned'

    id = db.Column(db.Integer, primary_key=True)
    text = db.Column(db.String(255), nullable=False, unique=True)
    language = db.Column(db.String(20), nullable=False, default='en-US')
    status = db.Column(db.String(20), nullable=False, default=STATUS_LEARNING, index=True)
    created_at = db.Column(db.DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    # Rows are removed by the database (ON DELETE CASCADE), not by the ORM.
    sentences = db.relationship(
        'Sentence', backref='word', lazy='dynamic',
        cascade='all, delete-orphan', passive_deletes=True
    )
    detail = db.relationship(
        'WordDetail', backref='word', uselist=False,
        cascade='all, delete-orphan', passive_deletes=True
    )

    def to_dict(self):
        return {
            'id': self.id,
            'word': self.text,
            'language': self.language,
            'status': self.status,
            'created_at': self.created_at.isoformat() if self.created_at else None
        }


class Sentence(db.Model):
    """An example sentence for a word; deleted once translated correctly."""
    __tablename__ = 'sentences'

    id = db.Column(db.Integer, primary_key=True)
    word_id = db.Column(db.Integer, db.ForeignKey('words.id', ondelete='CASCADE'), nullable=False, index=True)
    text = db.Column(db.Text, nullable=False)
    created_at = db.Column(db.DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))


class WordDetail(db.Model):
    """Generated explanatory text (meanings, usage contexts) for a word. Stored verbatim."""
    __tablename__ = 'word_details'

    word_id = db.Column(db.Integer, db.ForeignKey('words.id', ondelete='CASCADE'), primary_key=True)
    detail_text = db.Column(db.Text, nullable=False)
    created_at = db.Column(db.DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
