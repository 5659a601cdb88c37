"""A turn-based duel: player 1 picks attacks, player 2 attacks at random."""

from __future__ import annotations

import random
from collections.abc import Callable
from dataclasses import dataclass

from batalla.factory import crear_personaje_armado
from batalla.personajes import Personaje

GOLPE_FUERTE = "Golpe Fuerte"
GOLPE_RAPIDO = "Golpe Rapido"
DEFENSA_Y_GOLPE = "Defensa y Golpe"
ATAQUES = (GOLPE_FUERTE, GOLPE_RAPIDO, DEFENSA_Y_GOLPE)

# Each attack beats the one it maps to.
_VENCE = {
    GOLPE_FUERTE: GOLPE_RAPIDO,
    GOLPE_RAPIDO: DEFENSA_Y_GOLPE,
    DEFENSA_Y_GOLPE: GOLPE_FUERTE,
}

TIPOS_PERSONAJES = (
    "hechicero",
    "conjurador",
    "brujo",
    "nigromante",
    "barbaro",
    "paladin",
    "caballero",
    "mercenario",
    "gladiador",
)


@dataclass
class Jugador:
    """A player: the character, the type name it was created from and its weapon count."""

    personaje: Personaje
    tipo: str
    cantidad_armas: int


def crear_personajes(rng: random.Random | None = None) -> tuple[Jugador, Jugador]:
    """Create two players with random character types and 0 to 2 weapons each."""
    rng = rng if rng is not None else random
    tipo1 = rng.choice(TIPOS_PERSONAJES)
    tipo2 = rng.choice(TIPOS_PERSONAJES)
    armas1 = rng.randrange(3)
    armas2 = rng.randrange(3)
    jugador1 = Jugador(crear_personaje_armado(tipo1, armas1, rng), tipo1, armas1)
    jugador2 = Jugador(crear_personaje_armado(tipo2, armas2, rng), tipo2, armas2)
    return jugador1, jugador2


def describir_estado_personajes(jugador1: Jugador, jugador2: Jugador) -> None:
    """Print each player's type, remaining life and weapon count."""
    for numero, jugador in enumerate((jugador1, jugador2), start=1):
        print(
            f"El jugador {numero} es un {jugador.tipo} con {jugador.personaje.vida}HP"
            f" y con {jugador.cantidad_armas} armas "
        )


def elegir_ataque(leer: Callable[[], str] | None = None) -> str:
    """Ask player 1 for an attack until a valid one is given."""
    leer = leer if leer is not None else input
    print("Jugador 1, elija su ataque entre: Golpe Fuerte, Golpe Rapido, Defensa y Golpe: ")
    ataque = leer()
    while ataque not in ATAQUES:
        print("Ataque inválido, elija entre: Golpe Fuerte, Golpe Rapido, Defensa y Golpe")
        ataque = leer()
    return ataque


def ataque_aleatorio(rng: random.Random | None = None) -> str:
    """Pick player 2's attack at random."""
    rng = rng if rng is not None else random
    return rng.choice(ATAQUES)


def combate_comparacion_ataques(
    jugador1: Personaje,
    ataque1: str,
    jugador2: Personaje,
    ataque2: str,
    rng: random.Random | None = None,
) -> Personaje | None:
    """Resolve one round; the winning attacker hits the other. Return the attacker, or None on a tie."""
    if _VENCE.get(ataque1) == ataque2:
        jugador1.atacar_personaje(jugador2, rng)
        return jugador1
    if _VENCE.get(ataque2) == ataque1:
        jugador2.atacar_personaje(jugador1, rng)
        return jugador2
    print("¡Los ataques fueron iguales! Nadie recibe daño.")
    return None


def resultados(jugador1: Personaje) -> int:
    """Announce the winner, judged by player 1's remaining life, and return its number."""
    ganador = 1 if jugador1.vida > 0 else 2
    mensaje = f"Ganó el jugador {ganador}"
    print(mensaje)
    return ganador


def main(argv: list[str] | None = None) -> int:
    """Play a duel on the console until one character has no life left."""
    jugador1, jugador2 = crear_personajes()
    while jugador1.personaje.vida > 0 and jugador2.personaje.vida > 0:
        describir_estado_personajes(jugador1, jugador2)
        ataque1 = elegir_ataque()
        ataque2 = ataque_aleatorio()
        combate_comparacion_ataques(jugador1.personaje, ataque1, jugador2.personaje, ataque2)
    resultados(jugador1.personaje)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())