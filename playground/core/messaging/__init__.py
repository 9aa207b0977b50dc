from .models import ActorScript, Reply, SpellKind
from .dispatch import send, public_send
from .spells import Spell, cast
from .actors import Actor, converse
from .registry import ActorRegistry

__all__ = [
    "ActorScript",
    "Reply",
    "SpellKind",
    "send",
    "public_send",
    "Spell",
    "cast",
    "Actor",
    "converse",
    "ActorRegistry",
]
