from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Union

from playground.core.capabilities import CapabilityError

from .dispatch import public_send
from .models import SpellKind

log = logging.getLogger("playground.spells")

SPELL_LINES: Dict[SpellKind, str] = {
    SpellKind.FIRE: "🔥 Fire spell cast!",
    SpellKind.ICE: "❄️ Ice spell cast!",
}


class Spell:
    """One method per SpellKind; each returns the line it casts."""

    def fire(self) -> str:
        return self._cast(SpellKind.FIRE)

    def ice(self) -> str:
        return self._cast(SpellKind.ICE)

    def _cast(self, kind: SpellKind) -> str:
        out = SPELL_LINES[kind]
        log.info("%s", out)
        return out


def _as_kind(spell: Spell, kind: Union[SpellKind, str]) -> SpellKind:
    if isinstance(kind, SpellKind):
        return kind
    try:
        return SpellKind(str(kind).strip().lower())
    except ValueError:
        raise CapabilityError(spell, str(kind), f"unknown spell '{kind}'") from None


def cast(spell: Spell, kinds: Iterable[Union[SpellKind, str]]) -> List[str]:
    # Outputs keep the requested order.
    return [public_send(spell, _as_kind(spell, k).value) for k in kinds]
