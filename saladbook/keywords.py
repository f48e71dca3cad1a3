"""Validator that rejects banned keywords, with storage of the keyword list."""

from __future__ import annotations

import logging
import uuid

from .models import KeyWord, ValidationError, _repository_errors, _validation_errors


class KeywordValidatorService:
    """Keeps the banned-word list and checks single words against it."""

    def __init__(self, repo, logger: logging.Logger) -> None:
        self._repo = repo
        self._log = logger
        with _repository_errors(logger, "creating keywords validator"):
            self._keywords: dict[str, uuid.UUID] = dict(repo.get_all())

    @staticmethod
    def _verify_word(word: KeyWord) -> None:
        if not word.word:
            raise ValidationError("empty word")
        if len(word.word.split()) > 1:
            raise ValidationError("accepts only 1 word")

    def create(self, word: KeyWord) -> None:
        self._log.info("creating keyword: %s", word.word)
        with _validation_errors(self._log, "creating keyword"):
            self._verify_word(word)
        with _repository_errors(self._log, "creating keyword"):
            self._repo.create(word)
        self._keywords[word.word] = word.id

    def update(self, word: KeyWord) -> None:
        self._log.info("updating keyword: %s", word.word)
        with _validation_errors(self._log, "updating keyword"):
            self._verify_word(word)
        with _repository_errors(self._log, "updating keyword"):
            self._repo.update(word)
        self._keywords[word.word] = word.id

    def get_by_id(self, word_id: uuid.UUID) -> KeyWord:
        self._log.info("getting keyword by id: %s", word_id)
        with _repository_errors(self._log, "getting keyword by id"):
            return self._repo.get_by_id(word_id)

    def get_all(self) -> dict[str, uuid.UUID]:
        """Return the stored keywords mapped to their ids."""
        self._log.info("getting all keywords")
        with _repository_errors(self._log, "getting all keywords"):
            return self._repo.get_all()

    def delete_by_id(self, word_id: uuid.UUID) -> None:
        self._log.info("deleting keyword by id: %s", word_id)
        with _repository_errors(self._log, "deleting keyword by id"):
            self._repo.delete_by_id(word_id)

    def verify(self, word: str) -> None:
        """Raise ValidationError if *word* is several words or a banned keyword."""
        if len(word.split()) > 1:
            self._log.warning("verifying keywords: accepts only 1 word")
            raise ValidationError("verifying keywords: accepts only 1 word")
        if word.lower() in self._keywords:
            self._log.warning("verifying keywords: found %s", word)
            raise ValidationError(f"verifying keywords: found {word}")