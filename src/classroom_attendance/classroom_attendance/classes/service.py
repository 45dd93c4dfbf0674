from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..common.datetime_utils import now_local
from ..common.ids import new_id
from ..common.validators import clean_text
from ..core.constants import DEFAULT_CLASS_NAME
from ..core.exceptions import NotFoundError
from ..database.store import SessionState
from .model import ClassItem
from .repository import ClassRepository

logger = logging.getLogger(__name__)


class ClassService:
    """Use case: create and switch between classes (sections)."""

    def __init__(self, classes: ClassRepository, session: SessionState):
        self._classes = classes
        self._session = session

    def create_class(self, name: Optional[str]) -> Optional[ClassItem]:
        """Create a class and make it active.

        Blank names are ignored silently: nothing is created and None is returned.
        """
        name = clean_text(name)
        if not name:
            logger.debug("Ignoring class creation with blank name")
            return None

        return self._add(name)

    def ensure_default_class(self, name: Optional[str] = DEFAULT_CLASS_NAME) -> ClassItem:
        """The page always starts with one section to record attendance for."""
        existing = self._classes.list_all()
        if existing:
            return existing[0]
        return self._add(clean_text(name) or DEFAULT_CLASS_NAME)

    def _add(self, name: str) -> ClassItem:
        item = ClassItem(class_id=new_id(), name=name, created_at=now_local())
        self._classes.add(item)
        self._session.active_class_id = item.class_id
        logger.info("Created class %s (%s)", item.name, item.class_id)
        return item

    def select_class(self, class_id: str) -> ClassItem:
        item = self._classes.get_by_id(class_id)
        if not item:
            raise NotFoundError("Lớp học không tồn tại")
        self._session.active_class_id = item.class_id
        return item

    def list_classes(self) -> Sequence[ClassItem]:
        return self._classes.list_all()

    def get_active_class(self) -> Optional[ClassItem]:
        if not self._session.active_class_id:
            return None
        return self._classes.get_by_id(self._session.active_class_id)
