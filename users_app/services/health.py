from __future__ import annotations

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine


class HealthService:
    def __init__(self, engine: AsyncEngine):
        self._engine = engine

    async def ok(self) -> dict:
        async with self._engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        return {"ok": True}
