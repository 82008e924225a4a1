from datetime import datetime
from typing import Optional, Protocol

from django.db import DatabaseError, IntegrityError, transaction

from .exceptions import CodeConflict, StorageError
from .models import StreamCode


class CodeStore(Protocol):
    def find_live(self, now: datetime) -> list[StreamCode]: ...

    def find_one(self, code: str) -> Optional[StreamCode]: ...

    def code_exists(self, code: str) -> bool: ...

    def insert(self, code: str, descriptor: dict) -> StreamCode: ...


class DjangoCodeStore:
    """CodeStore backed by the default database through the ORM."""

    def find_live(self, now: datetime) -> list[StreamCode]:
        try:
            return list(StreamCode.objects.live(now).only("code", "stream_data"))
        except DatabaseError as exc:
            raise StorageError(f"Failed to list live stream codes: {exc}") from exc

    def find_one(self, code: str) -> Optional[StreamCode]:
        try:
            return StreamCode.objects.filter(code=code).first()
        except DatabaseError as exc:
            raise StorageError(f"Failed to look up stream code {code}: {exc}") from exc

    def code_exists(self, code: str) -> bool:
        try:
            return StreamCode.objects.filter(code=code).exists()
        except DatabaseError as exc:
            raise StorageError(f"Failed to check stream code {code}: {exc}") from exc

    def insert(self, code: str, descriptor: dict) -> StreamCode:
        try:
            # Own savepoint so a unique violation leaves the caller's transaction usable.
            with transaction.atomic():
                return StreamCode.objects.create(code=code, stream_data=descriptor, is_active=True)
        except IntegrityError as exc:
            raise CodeConflict(code) from exc
        except DatabaseError as exc:
            raise StorageError(f"Failed to store stream code {code}: {exc}") from exc
