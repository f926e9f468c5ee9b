import random
import string

from src.domain.base import generate_code, generate_session_id


def test_generate_code_default_length_and_alphabet():
    for _ in range(100):
        code = generate_code()
        assert len(code) == 5
        assert set(code) <= set(string.ascii_letters + string.digits)


def test_generate_code_uses_given_rng():
    assert generate_code(8, random.Random(42)) == generate_code(8, random.Random(42))


def test_session_ids_are_unique():
    ids = {generate_session_id() for _ in range(1000)}
    assert len(ids) == 1000
    assert all(len(session_id) == 36 for session_id in ids)
