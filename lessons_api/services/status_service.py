"""Connectivity/mode summary for the status endpoint."""

from __future__ import annotations

from dataclasses import dataclass

from lessons_api.repositories.base import Document, Repository


@dataclass
class StatusService:
    repository: Repository
    database: str

    def status(self) -> Document:
        repo = self.repository
        summary: Document = {
            "connected": repo.connected,
            "database": self.database,
            "mode": repo.mode,
            "lessonsCount": repo.count_lessons(),
            "ordersCount": repo.count_orders(),
        }
        if repo.connected:
            summary["collections"] = repo.describe().get("collections", [])
        return {"mongodb": summary}
