# helprob/web/decoy.py
from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List, Optional, Sequence

from helprob.web.names import NAMES, SERVERS

DEFAULT_NAME = "Ziggy"
LINK_COUNT = 7
NAMES_PER_LINK = 3


@dataclass(frozen=True)
class DecoyLink:
    href: str
    title: str


def current_name(host: Optional[str]) -> str:
    """
    Naam uit het subdomein: "happy-space-worm.example.org" -> "Happy Space Worm".
    Zonder punt in de host valt het terug op Ziggy.
    """
    if not host or "." not in host:
        return DEFAULT_NAME
    label = host.split(".")[0].replace("-", " ")
    return label.title()


def build_links(
    domain: str,
    *,
    count: int = LINK_COUNT,
    names: Sequence[str] = NAMES,
    rng: Optional[random.Random] = None,
) -> List[DecoyLink]:
    rng = rng or random
    links = []
    for _ in range(count):
        picked = [rng.choice(names) for _ in range(NAMES_PER_LINK)]
        subdomain = "-".join(picked).lower()
        links.append(
            DecoyLink(
                href=f"http://{subdomain}.{domain}/",
                title=" ".join(picked),
            )
        )
    return links


def pick_server(rng: Optional[random.Random] = None) -> str:
    return (rng or random).choice(SERVERS)
