"""Build characters and weapons by name, optionally arming characters at random."""

from __future__ import annotations

import random
from collections.abc import Callable

from batalla.armas import (
    Amuleto,
    Arma,
    Baston,
    Espada,
    Garrote,
    HachaDoble,
    HachaSimple,
    Lanza,
    LibroDeHechizos,
    Pocion,
)
from batalla.personajes import (
    Barbaro,
    Brujo,
    Caballero,
    Conjurador,
    Gladiador,
    Hechicero,
    Mercenario,
    Nigromante,
    Paladin,
    Personaje,
)

TIPOS_MAGOS = ("hechicero", "conjurador", "brujo", "nigromante")
TIPOS_GUERREROS = ("barbaro", "paladin", "caballero", "mercenario", "gladiador")

VARIEDAD_ARMAS = (
    "baston",
    "libro de hechizos",
    "pocion",
    "amuleto",
    "hacha simple",
    "hacha doble",
    "espada",
    "lanza",
    "garrote",
)

_PERSONAJES: dict[str, Callable[[], Personaje]] = {
    "hechicero": Hechicero,
    "Hechicero": Hechicero,
    "conjurador": Conjurador,
    "Conjurador": Conjurador,
    "brujo": Brujo,
    "Brujo": Brujo,
    "nigromante": Nigromante,
    "Nigromante": Nigromante,
    "barbaro": Barbaro,
    "Barbaro": Barbaro,
    "paladin": Paladin,
    "Paladin": Paladin,
    "caballero": Caballero,
    "Caballero": Caballero,
    "mercenario": Mercenario,
    "Mercenario": Mercenario,
    "gladiador": Gladiador,
    "Gladiador": Gladiador,
}

_ARMAS: dict[str, Callable[[], Arma]] = {
    "baston": Baston,
    "Baston": Baston,
    "libro de hechizos": LibroDeHechizos,
    "Libro de Hechizos": LibroDeHechizos,
    "pocion": Pocion,
    "Pocion": Pocion,
    "amuleto": Amuleto,
    "Amuleto": Amuleto,
    "hacha simple": HachaSimple,
    "Hacha Simple": HachaSimple,
    "hacha doble": HachaDoble,
    "Hacha Doble": HachaDoble,
    "espada": Espada,
    "Espada": Espada,
    "lanza": Lanza,
    "Lanza": Lanza,
    "garrote": Garrote,
    "Garrote": Garrote,
}


def crear_personaje(tipo_personaje: str) -> Personaje:
    """Create a character of the named type; raise ValueError if it is unknown."""
    try:
        return _PERSONAJES[tipo_personaje]()
    except KeyError:
        raise ValueError(f"El tipo de personaje{tipo_personaje} es desconocido") from None


def crear_arma(tipo_arma: str) -> Arma:
    """Create a weapon of the named type; raise ValueError if it is unknown."""
    try:
        return _ARMAS[tipo_arma]()
    except KeyError:
        raise ValueError(f"El tipo de arma {tipo_arma} es desconocida") from None


def crear_personaje_armado(
    tipo_personaje: str,
    cantidad_armas: int,
    rng: random.Random | None = None,
) -> Personaje:
    """Create a character and give it ``cantidad_armas`` randomly chosen weapons."""
    rng = rng if rng is not None else random
    personaje = crear_personaje(tipo_personaje)
    for _ in range(cantidad_armas):
        personaje.agregar_arma(crear_arma(rng.choice(VARIEDAD_ARMAS)))
    return personaje


def main(argv: list[str] | None = None) -> int:
    """Create between 3 and 7 wizards and warriors, each with up to two weapons."""
    rng = random.Random()
    cantidad_magos = rng.randint(3, 7)
    print(f"La cantidad de magos será: {cantidad_magos}")
    cantidad_guerreros = rng.randint(3, 7)
    print(f"La cantidad de guerreros será: {cantidad_guerreros}")

    grupos = ((TIPOS_MAGOS, cantidad_magos), (TIPOS_GUERREROS, cantidad_guerreros))
    for tipos, cantidad in grupos:
        for _ in range(cantidad):
            tipo = rng.choice(tipos)
            personaje = crear_personaje_armado(tipo, rng.randrange(3), rng)
            personaje.esta_presente()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())