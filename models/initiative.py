# -*- coding: utf-8 -*-
"""
Conservation initiatives shown on the home page carousel.
"""

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class Initiative:
    """A conservation initiative card."""
    id: str
    title: str
    subtitle: str
    subtitle_after: str
    highlight: str  # "subtitle" or "after": which half of the title is underlined
    kind: str
    image: str
    accent_color: str = "#0EA5E9"

    @property
    def cta_label(self) -> str:
        """Call-to-action text on the card button."""
        return "Join Us" if self.kind == "cleanup" else "Learn More"


INITIATIVES: Tuple[Initiative, ...] = (
    Initiative(
        id="cleanup",
        title="Beach Cleanups",
        subtitle="Beach",
        subtitle_after=" Cleanups",
        highlight="subtitle",
        kind="cleanup",
        image="assets/cleanup_cover.png",
        accent_color="#F97316",
    ),
    Initiative(
        id="turtle",
        title="Turtle Walks",
        subtitle="Turtle ",
        subtitle_after="Walks",
        highlight="after",
        kind="walk",
        image="assets/turtle_hero_bg.jpeg",
        accent_color="#0EA5E9",
    ),
    Initiative(
        id="sand",
        title="Sand Sculpture Contest",
        subtitle="Sand ",
        subtitle_after="Sculpture Contest",
        highlight="after",
        kind="sand",
        image="assets/sand_cover.png",
        accent_color="#A855F7",
    ),
)

DEFAULT_INITIATIVE_ID = "cleanup"


def find_initiative(initiative_id: str) -> Optional[Initiative]:
    """Look up an initiative by id. Returns None for unknown ids."""
    for initiative in INITIATIVES:
        if initiative.id == initiative_id:
            return initiative
    return None
