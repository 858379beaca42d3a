"""SQLAlchemy powered repository for device-port bindings."""

from __future__ import annotations

import dataclasses
import logging
from datetime import datetime, timezone

from sqlalchemy import delete, func, select, update

from dongle_registry.domain.bindings.codec import decode_properties, encode_properties
from dongle_registry.domain.bindings.exceptions import BindingConflictError, BindingNotFoundError
from dongle_registry.domain.bindings.models import Binding

from ..models import BindingRecord
from ..session import Database

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _as_utc(value: datetime) -> datetime:
    # SQLite drops the offset; stored values are always UTC.
    return value.replace(tzinfo=timezone.utc) if value.tzinfo is None else value


class SqlBindingRepository:
    """Each public call runs in its own transaction."""

    def __init__(self, database: Database) -> None:
        self._database = database

    def insert(self, binding: Binding) -> Binding:
        blob = encode_properties(binding.properties)
        now = _utcnow()
        record = BindingRecord(
            physical_id=binding.physical_id,
            subscriber_id=binding.subscriber_id,
            port_path=binding.port_path,
            is_symlinked=binding.is_symlinked,
            port_index=binding.port_index,
            identity=binding.identity,
            properties=blob,
            created_on=now,
            updated_on=now,
        )
        try:
            with self._database.session_scope() as session:
                session.add(record)
                session.flush()
        except BindingConflictError:
            logger.warning("Port %s is already bound, rejected %s", binding.port_path, binding.physical_id)
            raise
        logger.info("Recorded %s at %s", binding.physical_id, binding.port_path)
        return dataclasses.replace(
            binding,
            properties=dict(binding.properties) if binding.properties is not None else None,
            created_at=now,
            updated_at=now,
        )

    def update(self, binding: Binding) -> Binding:
        blob = encode_properties(binding.properties)
        match = (
            BindingRecord.physical_id == binding.physical_id,
            BindingRecord.port_path == binding.port_path,
        )
        stmt = (
            update(BindingRecord)
            .where(*match)
            .values(
                subscriber_id=binding.subscriber_id,
                is_symlinked=binding.is_symlinked,
                port_index=binding.port_index,
                identity=binding.identity,
                properties=blob,
                updated_on=_utcnow(),
            )
            .execution_options(synchronize_session=False)
        )
        with self._database.session_scope() as session:
            result = session.execute(stmt)
            if result.rowcount == 0:
                raise BindingNotFoundError(
                    f"no binding for {binding.physical_id} at {binding.port_path}"
                )
            record = session.execute(select(BindingRecord).where(*match)).scalar_one()
            return self._to_domain(record)

    def delete(self, physical_id: str) -> int:
        stmt = delete(BindingRecord).where(BindingRecord.physical_id == physical_id)
        with self._database.session_scope() as session:
            removed = session.execute(stmt).rowcount
        if removed:
            logger.info("Removed %d binding(s) of %s", removed, physical_id)
        else:
            logger.debug("No bindings of %s to remove", physical_id)
        return removed

    def get_by_path(self, port_path: str) -> Binding:
        stmt = select(BindingRecord).where(BindingRecord.port_path == port_path)
        with self._database.session_scope(read_only=True) as session:
            record = session.execute(stmt).scalar_one_or_none()
            if record is None:
                raise BindingNotFoundError(f"no binding at {port_path}")
            return self._to_domain(record)

    def get_by_physical_id(self, physical_id: str) -> Binding:
        stmt = select(BindingRecord).where(BindingRecord.physical_id == physical_id).limit(1)
        with self._database.session_scope(read_only=True) as session:
            record = session.execute(stmt).scalars().first()
            if record is None:
                raise BindingNotFoundError(f"no bindings for device {physical_id}")
            return self._to_domain(record)

    def get_all(self) -> list[Binding]:
        with self._database.session_scope(read_only=True) as session:
            records = session.execute(select(BindingRecord)).scalars().all()
            return [self._to_domain(record) for record in records]

    def exists(self, binding: Binding) -> bool:
        stmt = select(func.count(BindingRecord.id)).where(
            BindingRecord.physical_id == binding.physical_id,
            BindingRecord.subscriber_id == binding.subscriber_id,
            BindingRecord.port_path == binding.port_path,
        )
        with self._database.session_scope(read_only=True) as session:
            count = session.execute(stmt).scalar() or 0
        return count > 0

    def min_port_index(self, physical_id: str) -> int | None:
        stmt = select(func.min(BindingRecord.port_index)).where(
            BindingRecord.physical_id == physical_id
        )
        with self._database.session_scope(read_only=True) as session:
            return session.execute(stmt).scalar()

    @staticmethod
    def _to_domain(record: BindingRecord) -> Binding:
        return Binding(
            physical_id=record.physical_id,
            subscriber_id=record.subscriber_id,
            port_path=record.port_path,
            port_index=record.port_index,
            is_symlinked=bool(record.is_symlinked),
            identity=record.identity,
            properties=decode_properties(record.properties),
            created_at=_as_utc(record.created_on),
            updated_at=_as_utc(record.updated_on),
        )
