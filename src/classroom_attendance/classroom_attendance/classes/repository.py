from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import ClassItem


class ClassRepository(Protocol):
    """Giao diện repository cho ClassItem.

    Lưu ý (DIP): tầng service phụ thuộc vào interface này, không phụ thuộc trực tiếp kho dữ liệu cụ thể.
    """

    def list_all(self) -> Sequence[ClassItem]:
        raise NotImplementedError

    def get_by_id(self, class_id: str) -> Optional[ClassItem]:
        raise NotImplementedError

    def add(self, item: ClassItem) -> None:
        raise NotImplementedError
