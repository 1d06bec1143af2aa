"""
Service layer for questions.

This module provides the question lifecycle: create, fetch one, list,
search, update and delete.  Deleting a question removes its answers in
the same transaction, so either both disappear or neither does.

All queries use parameterized statements.  Identifiers and required
fields are validated before the store is touched.
"""

import logging
import sqlite3
from typing import List, Optional, Union

from forum_api.app.core.db import NOW_SQL, Database
from forum_api.app.core.exceptions import NotFound
from forum_api.app.schemas.question import QuestionCreate, QuestionRead, QuestionUpdate
from forum_api.app.services.answer_service import AnswerService
from forum_api.app.services.validation import normalize_filters, parse_identifier, require_text

logger = logging.getLogger(__name__)


class QuestionService:
    """Service class for managing questions."""

    def __init__(self, db: Database) -> None:
        self.db = db

    def create_question(self, data: QuestionCreate) -> QuestionRead:
        """Insert a new question and return the created record.

        ``created_at`` and ``updated_at`` are filled by the store from the
        same clock reading, so they are equal on a fresh record.
        """
        require_text(data.title, data.description, data.category)
        with self.db.transaction("Unable to create question.") as cursor:
            cursor.execute(
                """
                INSERT INTO questions (title, description, category)
                VALUES (?, ?, ?)
                """,
                (data.title, data.description, data.category),
            )
            question_id = cursor.lastrowid
            row = cursor.execute("SELECT * FROM questions WHERE id = ?", (question_id,)).fetchone()
        logger.info("Created question %s", question_id)
        return self._row_to_question_read(row)

    def get_question(self, question_id: Union[int, str]) -> QuestionRead:
        """Retrieve a single question by its ID."""
        qid = parse_identifier(question_id)
        with self.db.cursor("Unable to fetch question.") as cursor:
            row = cursor.execute("SELECT * FROM questions WHERE id = ?", (qid,)).fetchone()
        if not row:
            raise NotFound()
        return self._row_to_question_read(row)

    def list_questions(self) -> List[QuestionRead]:
        """Return all questions, most recent first."""
        with self.db.cursor("Unable to fetch questions.") as cursor:
            rows = cursor.execute(
                "SELECT * FROM questions ORDER BY created_at DESC, id DESC"
            ).fetchall()
        return [self._row_to_question_read(row) for row in rows]

    def search_questions(
        self,
        title: Optional[str] = None,
        category: Optional[str] = None,
    ) -> List[QuestionRead]:
        """Search questions by title and/or category.

        Each supplied filter is a case-insensitive substring match; when
        both are given a question must match both.  Matching compares
        Unicode-casefolded text with ``instr`` so ``%`` and ``_`` in a
        filter are taken literally.  At least one filter is required.
        """
        title_filter, category_filter = normalize_filters(title, category)
        where_clauses = []
        params: list = []
        if title_filter is not None:
            where_clauses.append("instr(casefold(title), ?) > 0")
            params.append(title_filter)
        if category_filter is not None:
            where_clauses.append("instr(casefold(category), ?) > 0")
            params.append(category_filter)
        query = (
            "SELECT * FROM questions WHERE "
            + " AND ".join(where_clauses)
            + " ORDER BY created_at DESC, id DESC"
        )
        with self.db.cursor("Unable to search questions.") as cursor:
            rows = cursor.execute(query, tuple(params)).fetchall()
        return [self._row_to_question_read(row) for row in rows]

    def update_question(self, question_id: Union[int, str], data: QuestionUpdate) -> QuestionRead:
        """Overwrite a question's title, description and optionally category.

        ``title`` and ``description`` are required.  ``category`` is kept
        when omitted and must be non-empty when given.  ``updated_at``
        never moves backwards, even if the clock does.
        """
        qid = parse_identifier(question_id)
        require_text(data.title, data.description)
        if data.category is not None:
            require_text(data.category)
        with self.db.transaction("Unable to update question.") as cursor:
            cursor.execute(
                f"""
                UPDATE questions
                SET title = ?, description = ?, category = COALESCE(?, category),
                    updated_at = MAX(updated_at, {NOW_SQL})
                WHERE id = ?
                """,
                (data.title, data.description, data.category, qid),
            )
            if cursor.rowcount == 0:
                raise NotFound()
            row = cursor.execute("SELECT * FROM questions WHERE id = ?", (qid,)).fetchone()
        logger.info("Updated question %s", qid)
        return self._row_to_question_read(row)

    def delete_question(self, question_id: Union[int, str]) -> int:
        """Delete a question together with its answers.

        Returns the number of answers removed.  If the question does not
        exist the transaction is rolled back and ``NotFound`` is raised.
        """
        qid = parse_identifier(question_id)
        with self.db.transaction("Unable to delete question.") as cursor:
            deleted_answers = AnswerService.delete_for_question(cursor, qid)
            cursor.execute("DELETE FROM questions WHERE id = ?", (qid,))
            if cursor.rowcount == 0:
                raise NotFound()
        logger.info("Deleted question %s with %s answers", qid, deleted_answers)
        return deleted_answers

    @staticmethod
    def _row_to_question_read(row: sqlite3.Row) -> QuestionRead:
        """Convert a database row to a QuestionRead schema instance."""
        return QuestionRead(
            id=row["id"],
            title=row["title"],
            description=row["description"],
            category=row["category"],
            created_at=row["created_at"],
            updated_at=row["updated_at"],
        )
