"""Line codec for stored student profiles.

Record format (one profile per line, 10 columns joined by "|"):

    name|status|employed|jobDetails|languages|databases|role|comments|whitelist|blacklist

- Text columns are Base64 of the UTF-8 bytes.
- List columns hold Base64 elements joined by ";" (empty list = empty column).
- Boolean columns are the literals "true" / "false".
"""

from __future__ import annotations

import base64
import binascii

from curriculum.core.models import StudentProfile

FIELD_DELIMITER = "|"
LIST_DELIMITER = ";"
COLUMN_COUNT = 10


class RecordDecodeError(ValueError):
    """A stored line could not be turned back into a profile."""

    pass


def encode_text(value: str | None) -> str:
    return base64.b64encode((value or "").encode("utf-8")).decode("ascii")


def decode_text(encoded: str) -> str:
    try:
        return base64.b64decode(encoded, validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError) as e:
        raise RecordDecodeError(f"invalid base64 value: {e}") from e


def encode_list(values: list[str] | None) -> str:
    if not values:
        return ""
    return LIST_DELIMITER.join(encode_text(v) for v in values)


def decode_list(encoded: str) -> list[str]:
    if not encoded or not encoded.strip():
        return []
    return [decode_text(element) for element in encoded.split(LIST_DELIMITER) if element]


def encode_bool(value: bool) -> str:
    return "true" if value else "false"


def decode_bool(value: str) -> bool:
    return value.strip().lower() == "true"


def encode_profile(profile: StudentProfile) -> str:
    """Encode a profile as a single record line (no trailing newline)."""
    return FIELD_DELIMITER.join(
        [
            encode_text(profile.full_name),
            encode_text(profile.academic_status),
            encode_bool(profile.employed),
            encode_text(profile.job_details),
            encode_list(profile.programming_languages),
            encode_list(profile.databases),
            encode_text(profile.preferred_role),
            encode_list(profile.comments),
            encode_bool(profile.whitelist),
            encode_bool(profile.blacklist),
        ]
    )


def decode_profile(line: str) -> StudentProfile:
    """Decode a record line.

    Raises:
        RecordDecodeError: If the column count is wrong or a value is not
            valid Base64/UTF-8.
    """
    segments = line.split(FIELD_DELIMITER)
    if len(segments) != COLUMN_COUNT:
        raise RecordDecodeError(
            f"expected {COLUMN_COUNT} columns, found {len(segments)}"
        )

    return StudentProfile(
        full_name=decode_text(segments[0]),
        academic_status=decode_text(segments[1]),
        employed=decode_bool(segments[2]),
        job_details=decode_text(segments[3]),
        programming_languages=decode_list(segments[4]),
        databases=decode_list(segments[5]),
        preferred_role=decode_text(segments[6]),
        comments=decode_list(segments[7]),
        whitelist=decode_bool(segments[8]),
        blacklist=decode_bool(segments[9]),
    )
