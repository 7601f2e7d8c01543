from __future__ import annotations

from collections.abc import Callable

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from src.application.interfaces.unit_of_work import UnitOfWork


def _enable_sqlite_foreign_keys(dbapi_connection, _record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_engine(database_url: str) -> AsyncEngine:
    engine = create_async_engine(database_url, echo=False, future=True)
    if engine.dialect.name == "sqlite":
        # SQLite leaves FK enforcement off per connection
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False)


class SQLAlchemyUnitOfWork(UnitOfWork):
    def __init__(self, session_factory: Callable[[], AsyncSession]) -> None:
        self._session_factory = session_factory
        self.session: AsyncSession | None = None
        self._reset_repositories()

    def _reset_repositories(self) -> None:
        self.goats = None
        self.breeding_records = None
        self.health_records = None
        self.weight_records = None
        self.expenses = None
        self.sales_records = None
        self.inventory = None
        self.users = None
        self.reference_counters = None

    async def __aenter__(self) -> UnitOfWork:
        self.session = self._session_factory()
        from src.infrastructure.repos.breeding_records_sqlalchemy import (
            BreedingRecordsSQLAlchemyRepository,
        )
        from src.infrastructure.repos.expenses_sqlalchemy import ExpensesSQLAlchemyRepository
        from src.infrastructure.repos.goats_sqlalchemy import GoatsSQLAlchemyRepository
        from src.infrastructure.repos.health_records_sqlalchemy import (
            HealthRecordsSQLAlchemyRepository,
        )
        from src.infrastructure.repos.inventory_sqlalchemy import InventorySQLAlchemyRepository
        from src.infrastructure.repos.reference_counters_sqlalchemy import (
            ReferenceCountersSQLAlchemyRepository,
        )
        from src.infrastructure.repos.sales_records_sqlalchemy import (
            SalesRecordsSQLAlchemyRepository,
        )
        from src.infrastructure.repos.users_sqlalchemy import UsersSQLAlchemyRepository
        from src.infrastructure.repos.weight_records_sqlalchemy import (
            WeightRecordsSQLAlchemyRepository,
        )

        self.goats = GoatsSQLAlchemyRepository(self.session)
        self.breeding_records = BreedingRecordsSQLAlchemyRepository(self.session)
        self.health_records = HealthRecordsSQLAlchemyRepository(self.session)
        self.weight_records = WeightRecordsSQLAlchemyRepository(self.session)
        self.expenses = ExpensesSQLAlchemyRepository(self.session)
        self.sales_records = SalesRecordsSQLAlchemyRepository(self.session)
        self.inventory = InventorySQLAlchemyRepository(self.session)
        self.users = UsersSQLAlchemyRepository(self.session)
        self.reference_counters = ReferenceCountersSQLAlchemyRepository(self.session)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if not self.session:
            return
        try:
            if exc:
                await self.session.rollback()
        finally:
            await self.session.close()
            self.session = None
            self._reset_repositories()

    async def commit(self) -> None:
        if not self.session:
            return
        await self.session.commit()

    async def rollback(self) -> None:
        if not self.session:
            return
        await self.session.rollback()
