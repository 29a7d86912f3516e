"""Identifier generation for new rows."""

import time
import uuid


def generate_id(prefix: str) -> str:
    """Return ``<prefix>_<epoch millis>_<9 random hex chars>``.

    Collision resistant for this workload but not meant to be unguessable.
    """

    millis = int(time.time() * 1000)
    return f"{prefix}_{millis}_{uuid.uuid4().hex[:9]}"
