"""
Linkbust Transformer

Obfuscates a shortlink destination at resolution time. Each technique is a
pure ``(url, rng) -> url`` function; techniques always run in the order they
are declared in ``LinkbustTechnique`` no matter how they were requested, so
CAPITALS, which rewrites the case of the whole URL, always runs last.
"""

import random
from typing import Callable, Dict, Iterable, List, Optional
from urllib.parse import urlsplit, urlunsplit

from src.domain.base import generate_code
from src.domain.entities import LinkbustTechnique

RANDOM_PLACEHOLDER = "{RANDOM}"
TOKEN_LENGTH = 5

_system_random = random.SystemRandom()


def replace_placeholders(url: str, rng: random.Random) -> str:
    parts = url.split(RANDOM_PLACEHOLDER)
    if len(parts) == 1:
        return url
    out = parts[0]
    for part in parts[1:]:
        out += generate_code(TOKEN_LENGTH, rng) + part
    return out


def append_cachebust(url: str, rng: random.Random) -> str:
    scheme, netloc, path, query, fragment = urlsplit(url)
    param = f"{generate_code(TOKEN_LENGTH, rng)}={generate_code(TOKEN_LENGTH, rng)}"
    query = f"{query}&{param}" if query else param
    return urlunsplit((scheme, netloc, path, query, fragment))


def randomize_case(url: str, rng: random.Random) -> str:
    return "".join(c.upper() if rng.random() < 0.5 else c.lower() for c in url)


TECHNIQUES: Dict[LinkbustTechnique, Callable[[str, random.Random], str]] = {
    LinkbustTechnique.RANDOM: replace_placeholders,
    LinkbustTechnique.CACHEBUST: append_cachebust,
    LinkbustTechnique.CAPITALS: randomize_case,
}


def normalize_techniques(names: Optional[Iterable]) -> List[LinkbustTechnique]:
    """
    Collapse duplicates, drop unknown names and sort into application order.

    Names are matched case-insensitively; anything that is not a string is
    treated as unknown.
    """
    requested = set()
    for name in names or []:
        if not isinstance(name, str):
            continue
        try:
            requested.add(LinkbustTechnique(name.strip().upper()))
        except ValueError:
            continue
    return [technique for technique in LinkbustTechnique if technique in requested]


def apply_linkbust(
    url: str, names: Optional[Iterable], rng: Optional[random.Random] = None
) -> str:
    rng = rng or _system_random
    for technique in normalize_techniques(names):
        url = TECHNIQUES[technique](url, rng)
    return url
