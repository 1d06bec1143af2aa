"""
Business logic for answers.

Answers belong to exactly one question.  The parent question must exist
when an answer is written; the existence check and the insert are a
single statement so a concurrent question delete cannot leave an
orphan behind.  The ``answers`` table also declares
``ON DELETE CASCADE`` and every connection enables foreign keys.
"""

import logging
import sqlite3
from typing import List, Union

from forum_api.app.core.db import Database
from forum_api.app.core.exceptions import NotFound
from forum_api.app.schemas.answer import AnswerCreate, AnswerRead
from forum_api.app.services.validation import parse_identifier, validate_answer_content

logger = logging.getLogger(__name__)

_ANSWER_COLUMNS = "id, question_id, content, created_at, updated_at"


class AnswerService:
    """Service for answers scoped to a parent question."""

    def __init__(self, db: Database) -> None:
        self.db = db

    def create_answer(self, question_id: Union[int, str], data: AnswerCreate) -> AnswerRead:
        """Attach a new answer to a question.

        Raises ``InvalidIdentifier`` for a malformed ID,
        ``ValidationError`` for empty or oversized content and
        ``NotFound`` when the question does not exist.
        """
        qid = parse_identifier(question_id)
        content = validate_answer_content(data.content)
        with self.db.transaction("Unable to create answers.") as cursor:
            cursor.execute(
                """
                INSERT INTO answers (content, question_id)
                SELECT ?, id FROM questions WHERE id = ?
                """,
                (content, qid),
            )
            if cursor.rowcount == 0:
                raise NotFound()
            answer_id = cursor.lastrowid
            row = cursor.execute(
                f"SELECT {_ANSWER_COLUMNS} FROM answers WHERE id = ?",
                (answer_id,),
            ).fetchone()
        logger.info("Created answer %s for question %s", answer_id, qid)
        return self._row_to_answer_read(row)

    def list_answers(self, question_id: Union[int, str]) -> List[AnswerRead]:
        """Return the answers of a question, newest first.

        The question lookup and the answer listing run as one query, so
        an existing question without answers yields an empty list while
        a missing question raises ``NotFound``.
        """
        qid = parse_identifier(question_id)
        with self.db.cursor("Unable to fetch answers.") as cursor:
            rows = cursor.execute(
                """
                SELECT a.id, q.id AS question_id, a.content, a.created_at, a.updated_at
                FROM questions q
                LEFT JOIN answers a ON a.question_id = q.id
                WHERE q.id = ?
                ORDER BY a.created_at DESC, a.id DESC
                """,
                (qid,),
            ).fetchall()
        if not rows:
            raise NotFound()
        return [self._row_to_answer_read(row) for row in rows if row["id"] is not None]

    def delete_answers(self, question_id: Union[int, str]) -> int:
        """Delete every answer of a question and return how many were removed.

        Succeeds with ``0`` when the question has no answers.
        """
        qid = parse_identifier(question_id)
        with self.db.transaction("Unable to delete answers.") as cursor:
            exists = cursor.execute("SELECT 1 FROM questions WHERE id = ?", (qid,)).fetchone()
            if not exists:
                raise NotFound()
            deleted = self.delete_for_question(cursor, qid)
        logger.info("Deleted %s answers of question %s", deleted, qid)
        return deleted

    @staticmethod
    def delete_for_question(cursor: sqlite3.Cursor, question_id: int) -> int:
        """Delete the answers of ``question_id`` inside the caller's transaction."""
        cursor.execute("DELETE FROM answers WHERE question_id = ?", (question_id,))
        return cursor.rowcount

    @staticmethod
    def _row_to_answer_read(row: sqlite3.Row) -> AnswerRead:
        return AnswerRead(
            id=row["id"],
            question_id=row["question_id"],
            content=row["content"],
            created_at=row["created_at"],
            updated_at=row["updated_at"],
        )
