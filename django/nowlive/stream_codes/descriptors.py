"""
Stream descriptors are the payloads a stream code resolves to.

A descriptor is a JSON object tagged by ``kind``:

- ``single``: one stream, ``{"kind": "single", "platform": "idn", "playback_ref": "...", ...}``
- ``multi``: a synchronized set, ``{"kind": "multi", "members": [{...}, {...}], ...}``

The registry stores descriptors verbatim. The helpers below only read the
identity fields, so two payloads that point at the same content share a
fingerprint even when their display fields differ.
"""
import json
from dataclasses import dataclass
from typing import Any, Mapping

KIND_SINGLE = "single"
KIND_MULTI = "multi"

PLATFORM_YOUTUBE = "youtube"
PLATFORM_IDN = "idn"
PLATFORM_SHOWROOM = "showroom"
PLATFORMS = (PLATFORM_YOUTUBE, PLATFORM_IDN, PLATFORM_SHOWROOM)

# Checked in order; the first non-empty one is the stream's identity.
IDENTITY_FIELDS = ("playback_ref", "room_id", "url")

MIN_MULTI_MEMBERS = 2


class InvalidDescriptor(ValueError):
    pass


@dataclass(frozen=True)
class StreamMember:
    platform: str
    identity: str


@dataclass(frozen=True)
class SingleStream:
    member: StreamMember

    def fingerprint(self) -> str:
        return f"{KIND_SINGLE}:{self.member.identity}"


@dataclass(frozen=True)
class MultiStream:
    members: tuple

    def fingerprint(self) -> str:
        identities = sorted(member.identity for member in self.members)
        return f"{KIND_MULTI}:{json.dumps(identities, separators=(',', ':'))}"


def stream_identity(payload: Mapping[str, Any]) -> str:
    for field in IDENTITY_FIELDS:
        value = payload.get(field)
        if value is None or value == "":
            continue
        return str(value)
    raise InvalidDescriptor(f"Stream has none of the identity fields {', '.join(IDENTITY_FIELDS)}")


def _parse_member(payload: Any) -> StreamMember:
    if not isinstance(payload, Mapping):
        raise InvalidDescriptor("Stream entry must be an object")
    platform = payload.get("platform")
    if platform not in PLATFORMS:
        raise InvalidDescriptor(f"Unknown platform: {platform!r}")
    return StreamMember(platform=platform, identity=stream_identity(payload))


def parse_descriptor(payload: Any):
    if not isinstance(payload, Mapping):
        raise InvalidDescriptor("Descriptor must be an object")

    kind = payload.get("kind")
    if kind == KIND_SINGLE:
        return SingleStream(member=_parse_member(payload))

    if kind == KIND_MULTI:
        members = payload.get("members")
        if not isinstance(members, list):
            raise InvalidDescriptor("Multi descriptor needs a members list")
        if len(members) < MIN_MULTI_MEMBERS:
            raise InvalidDescriptor(f"Multi descriptor needs at least {MIN_MULTI_MEMBERS} members")
        return MultiStream(members=tuple(_parse_member(member) for member in members))

    raise InvalidDescriptor(f"Unknown descriptor kind: {kind!r}")


def fingerprint(payload: Any) -> str:
    return parse_descriptor(payload).fingerprint()


def is_multi(payload: Mapping[str, Any]) -> bool:
    return payload.get("kind") == KIND_MULTI
