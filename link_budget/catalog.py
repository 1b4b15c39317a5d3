from dataclasses import dataclass

from .components import Amplifier, Switch


@dataclass(frozen=True)
class Catalog:
    amplifiers: tuple[Amplifier, ...]
    switches: tuple[Switch, ...]

    def amplifier(self, name: str) -> Amplifier:
        """Looks up an amplifier by name."""
        for amp in self.amplifiers:
            if amp.name == name:
                return amp
        raise KeyError(f"Amplifier {name!r} not in catalog.")
