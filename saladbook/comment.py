"""Service for salad comments."""

from __future__ import annotations

import logging
import uuid

from .models import Comment, ValidationError, _repository_errors, _validation_errors


class CommentService:
    """Validates comment ratings and passes comments to storage."""

    def __init__(self, repo, logger: logging.Logger, min_rate: int, max_rate: int) -> None:
        self._repo = repo
        self._log = logger
        self._min_rate = min_rate
        self._max_rate = max_rate

    def _verify(self, comment: Comment) -> None:
        if not self._min_rate <= comment.rating <= self._max_rate:
            raise ValidationError("rate out of range")

    def create(self, comment: Comment) -> None:
        self._log.info(
            "creating comment by %s to salad %s", comment.author_id, comment.salad_id
        )
        with _validation_errors(self._log, "creating comment"):
            self._verify(comment)
        with _repository_errors(self._log, "creating comment"):
            self._repo.create(comment)

    def update(self, comment: Comment) -> None:
        self._log.info("updating comment with id %s", comment.id)
        with _validation_errors(self._log, "updating comment"):
            self._verify(comment)
        with _repository_errors(self._log, "updating comment"):
            self._repo.update(comment)

    def get_by_id(self, comment_id: uuid.UUID) -> Comment:
        self._log.info("getting comment by id %s", comment_id)
        with _repository_errors(self._log, "getting comment by id"):
            return self._repo.get_by_id(comment_id)

    def get_by_salad_and_user(self, salad_id: uuid.UUID, user_id: uuid.UUID) -> Comment:
        self._log.info(
            "getting comment by salad id %s and user id %s", salad_id, user_id
        )
        with _repository_errors(self._log, "getting comment by salad and user IDs"):
            return self._repo.get_by_salad_and_user(salad_id, user_id)

    def get_all_by_salad_id(
        self, salad_id: uuid.UUID, page: int
    ) -> tuple[list[Comment], int]:
        """Return one page of a salad's comments and the number of pages."""
        self._log.info("getting all comments by salad id %s", salad_id)
        with _repository_errors(self._log, "getting all comments by salad id"):
            comments, num_pages = self._repo.get_all_by_salad_id(salad_id, page)
        return comments, num_pages

    def delete_by_id(self, comment_id: uuid.UUID) -> None:
        self._log.info("deleting comment by id %s", comment_id)
        with _repository_errors(self._log, "deleting comment by id"):
            self._repo.delete_by_id(comment_id)