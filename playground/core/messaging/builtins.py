from __future__ import annotations

from .models import ActorScript
from .spells import SPELL_LINES


def builtin_actors() -> list[ActorScript]:
    # The same message means different things depending on who receives it.
    return [
        ActorScript(
            name="duck",
            description="Walks like a duck and quacks like a duck",
            script={
                "quack": "Quack!",
                "walk": "The duck waddles.",
                "swim": "The duck paddles across the pond.",
            },
        ),
        ActorScript(
            name="robot",
            description="Not a duck, but answers the same messages",
            script={
                "quack": "QUACK.WAV played at 80dB",
                "walk": "The robot rolls forward on its treads.",
                "beep": "Beep boop.",
            },
        ),
        ActorScript(
            name="spell",
            description="Spell book; one message per spell kind",
            script={k.value: line for k, line in SPELL_LINES.items()},
        ),
    ]
