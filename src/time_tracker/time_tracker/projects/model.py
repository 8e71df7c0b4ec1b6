from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Project:
    project_id: str
    name: str
    description: str
    start_date: str
    end_date: str
    member_ids: tuple[str, ...] = ()
