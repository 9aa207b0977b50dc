from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Optional

import yaml

from .actors import Actor
from .builtins import builtin_actors
from .models import ActorScript

_log = logging.getLogger("playground.actors")


class ActorRegistry:
    """Loads actor scripts.

    Resolution order:
      1) Built-in actors (always present)
      2) Optional <actors_dir>/*.yaml|*.yml, one actor per file; a file
         naming an existing actor replaces it
    """

    def __init__(self, actors_dir: Optional[Path] = None):
        self.actors_dir = Path(actors_dir) if actors_dir is not None else None
        self._scripts: Dict[str, ActorScript] = {}
        self._load_all()

    def _load_all(self) -> None:
        self._scripts = {s.name: s for s in builtin_actors()}

        if self.actors_dir is None or not self.actors_dir.exists():
            return

        files = sorted(list(self.actors_dir.glob("*.yaml")) + list(self.actors_dir.glob("*.yml")))
        for p in files:
            try:
                data = yaml.safe_load(p.read_text(encoding="utf-8"))
                if not isinstance(data, dict):
                    _log.warning("Skipping actor file %s: expected a mapping, got %s", p, type(data).__name__)
                    continue
                data.setdefault("name", p.stem)
                script = ActorScript(**data)
            except (OSError, ValueError, yaml.YAMLError) as exc:
                # ValueError covers UnicodeDecodeError and pydantic ValidationError
                _log.warning("Skipping invalid actor file %s: %s", p, exc)
                continue

            if script.name in self._scripts:
                _log.info("Actor %r overridden by %s", script.name, p)
            self._scripts[script.name] = script

    def list_names(self) -> list[str]:
        return sorted(self._scripts.keys())

    def get(self, name: str) -> Optional[Actor]:
        script = self._scripts.get(name)
        return Actor(script) if script is not None else None
