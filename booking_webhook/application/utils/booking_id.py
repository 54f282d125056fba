from __future__ import annotations

import random
import string


BOOKING_ID_PREFIX = "BK-"
BOOKING_ID_ALPHABET = string.ascii_uppercase + string.digits
BOOKING_ID_LENGTH = 7


def generate_booking_id(rng: random.Random | None = None) -> str:
    """
    Random booking reference, e.g. "BK-7Q2ZK0A".
    Uniqueness is probabilistic only (36^7 combinations); nothing checks for collisions.
    """
    chooser = rng or random
    suffix = "".join(chooser.choices(BOOKING_ID_ALPHABET, k=BOOKING_ID_LENGTH))
    return f"{BOOKING_ID_PREFIX}{suffix}"
