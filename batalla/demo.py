"""Short showcase: use two weapons and present two characters."""

from __future__ import annotations

from batalla.armas import Amuleto, Arma, Espada
from batalla.personajes import Caballero, Nigromante, Personaje


def main(argv: list[str] | None = None) -> int:
    """Use a magic amulet and a sword, then present a necromancer and a knight."""
    armas: list[Arma] = [Amuleto(), Espada()]
    for arma in armas:
        arma.usar_arma()

    personajes: list[Personaje] = [Nigromante(), Caballero()]
    for personaje in personajes:
        personaje.esta_presente()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())