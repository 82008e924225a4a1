import logging
import secrets
import string
from typing import Callable, Optional

from django.conf import settings
from django.utils import timezone

from .descriptors import InvalidDescriptor, fingerprint
from .exceptions import CodeConflict, CodeSpaceExhausted
from .store import CodeStore, DjangoCodeStore

logger = logging.getLogger(__name__)

CODE_ALPHABET = string.ascii_uppercase + string.digits


def generate_code(length: int, alphabet: str = CODE_ALPHABET) -> str:
    return "".join(secrets.choice(alphabet) for _ in range(length))


def normalize_code(code: str) -> str:
    return (code or "").strip().upper()


class StreamCodeRegistry:
    """
    Issues short codes for stream descriptors and resolves them back.

    Issuing the same logical stream twice while its code is live returns the
    existing code. Resolution is local: a code resolves to exactly the payload
    it was issued for until it expires or is deactivated.
    """

    def __init__(
        self,
        store: Optional[CodeStore] = None,
        clock: Optional[Callable] = None,
        max_attempts: Optional[int] = None,
        code_length: Optional[int] = None,
        alphabet: str = CODE_ALPHABET,
    ):
        self.store = store or DjangoCodeStore()
        self.clock = clock or timezone.now
        self.max_attempts = max_attempts or settings.STREAM_CODE_MAX_ATTEMPTS
        self.code_length = code_length or settings.STREAM_CODE_LENGTH
        self.alphabet = alphabet

    def issue(self, descriptor: dict) -> str:
        identity = fingerprint(descriptor)

        existing = self.find_live_code(identity)
        if existing:
            logger.debug("Reusing stream code %s for %s", existing, identity)
            return existing

        for attempt in range(1, self.max_attempts + 1):
            code = generate_code(self.code_length, self.alphabet)
            if self.store.code_exists(code):
                continue
            try:
                self.store.insert(code, descriptor)
            except CodeConflict:
                logger.warning("Stream code %s taken concurrently (attempt %s)", code, attempt)
                continue
            logger.info("Issued stream code %s for %s", code, identity)
            return code

        logger.warning("Stream code space exhausted after %s attempts", self.max_attempts)
        raise CodeSpaceExhausted(self.max_attempts)

    def find_live_code(self, identity: str) -> Optional[str]:
        for record in self.store.find_live(self.clock()):
            try:
                record_identity = fingerprint(record.stream_data)
            except InvalidDescriptor:
                logger.debug("Skipping stream code %s with unreadable payload", record.code)
                continue
            if record_identity == identity:
                return record.code
        return None

    def resolve(self, code: str) -> Optional[dict]:
        code = normalize_code(code)
        if not code:
            return None

        record = self.store.find_one(code)
        if record is None or not record.is_live(self.clock()):
            return None
        return record.stream_data


def get_registry() -> StreamCodeRegistry:
    return StreamCodeRegistry()
