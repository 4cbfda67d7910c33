"""
Local item catalog for weapon and armor names.

The catalog is a read-mostly SQLAlchemy store keyed by item id. Every report
opens one connection, shares it across its concurrent lookups and releases it
when the report is done.
"""

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator, Iterable, List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from destiny_bot.config import Config
from destiny_bot.data_models.items import Armor, Weapon
from destiny_bot.database.models import ArmorRecord, Base, WeaponRecord
from destiny_bot.utils.exceptions import CatalogError
from destiny_bot.utils.logger import setup_logger


class CatalogConnection:
    """One open catalog session.

    Lookups may be awaited from several tasks at once; they are serialized on
    the underlying session, which does not allow concurrent operations.
    """

    def __init__(self, session: AsyncSession):
        self._session = session
        self._lock = asyncio.Lock()
        self.closed = False

    async def close(self):
        if self.closed:
            return
        self.closed = True
        await self._session.close()

    def _check_open(self, operation: str):
        if self.closed:
            raise CatalogError(operation, "connection is closed")

    async def get_weapon(self, item_id: int) -> Optional[Weapon]:
        """Return the weapon with the given id, or None."""
        self._check_open('get_weapon')
        try:
            async with self._lock:
                record = await self._session.get(WeaponRecord, item_id)
        except SQLAlchemyError as e:
            raise CatalogError('get_weapon', str(e)) from e
        return record.to_weapon() if record else None

    async def get_armor_piece(self, item_id: int) -> Optional[Armor]:
        """Return the armor piece with the given id, or None."""
        self._check_open('get_armor_piece')
        try:
            async with self._lock:
                record = await self._session.get(ArmorRecord, item_id)
        except SQLAlchemyError as e:
            raise CatalogError('get_armor_piece', str(e)) from e
        return record.to_armor() if record else None

    async def get_weapons(self, item_ids: Iterable[int]) -> AsyncIterator[Weapon]:
        """Yield the weapons matching ``item_ids``, skipping unknown ids.

        Results come back in the order of ``item_ids`` with duplicates removed.
        """
        records = await self._fetch_all('get_weapons', WeaponRecord, item_ids)
        for record in records:
            yield record.to_weapon()

    async def get_armor_pieces(self, item_ids: Iterable[int]) -> AsyncIterator[Armor]:
        """Yield the armor pieces matching ``item_ids``, skipping unknown ids."""
        records = await self._fetch_all('get_armor_pieces', ArmorRecord, item_ids)
        for record in records:
            yield record.to_armor()

    async def find_weapons_by_prefix(self, prefix: str) -> List[Weapon]:
        """Return weapons whose name starts with ``prefix``, sorted by name."""
        self._check_open('find_weapons_by_prefix')
        query = select(WeaponRecord).where(
            WeaponRecord.name.startswith(prefix, autoescape=True)
        ).order_by(WeaponRecord.name)
        try:
            async with self._lock:
                result = await self._session.execute(query)
                records = result.scalars().all()
        except SQLAlchemyError as e:
            raise CatalogError('find_weapons_by_prefix', str(e)) from e
        return [record.to_weapon() for record in records]

    async def _fetch_all(self, operation: str, model, item_ids: Iterable[int]) -> list:
        self._check_open(operation)
        ids = list(dict.fromkeys(item_ids))
        if not ids:
            return []
        try:
            async with self._lock:
                result = await self._session.execute(select(model).where(model.id.in_(ids)))
                by_id = {record.id: record for record in result.scalars().all()}
        except SQLAlchemyError as e:
            raise CatalogError(operation, str(e)) from e
        return [by_id[item_id] for item_id in ids if item_id in by_id]


class ItemCatalog:
    """Engine and session factory for the item catalog database."""

    def __init__(self, database_url: Optional[str] = None):
        self.logger = setup_logger(__name__)
        self.database_url = database_url or Config.get_catalog_url()
        self.engine = None
        self.session_factory = None

    async def initialize(self):
        """Create the engine and make sure the catalog tables exist"""
        self.logger.info("Initializing item catalog...")

        self.engine = create_async_engine(
            self.database_url,
            echo=Config.DEBUG,
            future=True
        )

        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False
        )

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

        self.logger.info("Item catalog initialized successfully")

    async def connect(self) -> CatalogConnection:
        """Open a catalog connection. Callers must close it."""
        if self.session_factory is None:
            raise CatalogError('connect', "catalog is not initialized")
        return CatalogConnection(self.session_factory())

    @asynccontextmanager
    async def session(self) -> AsyncIterator[CatalogConnection]:
        """Connection scope that is released on every exit path"""
        connection = await self.connect()
        try:
            yield connection
        finally:
            await connection.close()

    async def add_items(self, weapons: Iterable[Weapon] = (), armors: Iterable[Armor] = ()) -> int:
        """Insert or replace catalog entries. Returns the number of items written."""
        if self.session_factory is None:
            raise CatalogError('add_items', "catalog is not initialized")
        count = 0
        async with self.session_factory() as session:
            try:
                for weapon in weapons:
                    await session.merge(WeaponRecord.from_weapon(weapon))
                    count += 1
                for armor in armors:
                    await session.merge(ArmorRecord.from_armor(armor))
                    count += 1
                await session.commit()
            except SQLAlchemyError as e:
                await session.rollback()
                raise CatalogError('add_items', str(e)) from e
        self.logger.info(f"Stored {count} catalog items")
        return count

    async def dispose(self):
        """Dispose of the engine"""
        if self.engine:
            await self.engine.dispose()
            self.logger.info("Item catalog connection closed")
