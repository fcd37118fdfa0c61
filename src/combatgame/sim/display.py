"""Battle display collaborators.

The turn engine reports what happens through a :class:`BattleView`.  Every
call is a fire-and-forget notification carrying display-ready text; the
engine never waits on a view.

- :class:`NullView` ignores everything (headless simulation).
- :class:`TextView` renders Jinja2 templates to a text stream.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TYPE_CHECKING, TextIO

from jinja2 import Environment, FileSystemLoader

if TYPE_CHECKING:
    from combatgame.sim.core.entities import Attack, Character, Defence, Enemy, Player
    from combatgame.sim.rewards import BattleOutcome

_TEMPLATE_DIR = Path(__file__).parent / "templates"


class BattleView:
    """Receives battle notifications.  The base implementation does nothing."""

    def on_battle_start(self, player: Player, enemy: Enemy) -> None:
        pass

    def on_attack_resolved(self, attack: Attack) -> None:
        pass

    def on_defence_resolved(self, defence: Defence) -> None:
        pass

    def on_death(self, character: Character) -> None:
        pass

    def on_battle_end(self, outcome: BattleOutcome) -> None:
        pass


class NullView(BattleView):
    """View for headless runs."""


class TextView(BattleView):
    """Writes a plain-text battle log to *stream* (stdout by default)."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream if stream is not None else sys.stdout
        self._jinja = Environment(
            loader=FileSystemLoader(str(_TEMPLATE_DIR)),
            keep_trailing_newline=True,
        )

    def _emit(self, template_name: str, **ctx) -> None:
        template = self._jinja.get_template(template_name)
        self.stream.write(template.render(**ctx))

    def on_battle_start(self, player: Player, enemy: Enemy) -> None:
        self._emit("battle_start.txt.j2", player=player, enemy=enemy)

    def on_attack_resolved(self, attack: Attack) -> None:
        self._emit("attack.txt.j2", attack=attack)

    def on_defence_resolved(self, defence: Defence) -> None:
        self._emit("defence.txt.j2", defence=defence)

    def on_death(self, character: Character) -> None:
        self._emit("death.txt.j2", character=character)

    def on_battle_end(self, outcome: BattleOutcome) -> None:
        self._emit("battle_end.txt.j2", outcome=outcome)
