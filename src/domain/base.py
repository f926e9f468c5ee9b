import random
import string
import uuid
from typing import Optional

CODE_ALPHABET = string.ascii_letters + string.digits

_system_random = random.SystemRandom()


def generate_session_id() -> str:
    return str(uuid.uuid4())


def generate_code(length: int = 5, rng: Optional[random.Random] = None) -> str:
    """Random alphanumeric identifier used for shortlink codes and linkbust tokens."""
    rng = rng or _system_random
    return "".join(rng.choice(CODE_ALPHABET) for _ in range(length))
