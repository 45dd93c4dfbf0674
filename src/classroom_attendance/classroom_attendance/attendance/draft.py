from __future__ import annotations

from typing import Iterable, Mapping

from ..core.enums import AttendanceStatus
from ..students.model import Student


def seed_draft(
    roster: Iterable[Student],
    draft: Mapping[str, AttendanceStatus],
) -> dict[str, AttendanceStatus]:
    """Build the attendance sheet for the current roster.

    Students keep the status already marked in ``draft``; everyone else starts
    as absent. Students no longer in the roster drop out.
    """
    return {s.student_id: draft.get(s.student_id, AttendanceStatus.ABSENT) for s in roster}
