# batalla

A small role-playing battle game for the console. Wizards (hechicero,
conjurador, brujo, nigromante) and warriors (barbaro, paladin, caballero,
mercenario, gladiador) are armed with magic items (bastón, libro de hechizos,
poción, amuleto) and combat weapons (hacha simple, hacha doble, espada, lanza,
garrote), then fight each other. All game text is in Spanish.

## Installation

```
pip install .
```

## Commands

```
batalla-demo
```
Uses an amulet and a sword, then presents a necromancer and a knight,
printing a line for each of them.

```
batalla-factory
```
Creates between 3 and 7 random wizards and between 3 and 7 random warriors,
each carrying 0 to 2 random weapons, and prints a line presenting each one.

```
batalla
```
Plays a duel. Two players are created with random character types and 0 to 2
random weapons each; every character starts with 100 life. Before each turn
the state of both players is printed. Player 1 then types one of
`Golpe Fuerte`, `Golpe Rapido` or `Defensa y Golpe` (any other input is
rejected and asked for again), and player 2 picks one at random:

- Golpe Fuerte beats Golpe Rapido
- Golpe Rapido beats Defensa y Golpe
- Defensa y Golpe beats Golpe Fuerte
- the same attack on both sides does no damage

The winner of a turn hits the loser for 10 points plus the destruction value
of one of its weapons chosen at random, if it carries any. Life never drops
below 0. The game ends when a player's life reaches 0, and the winner is
announced.

## Use as a library

The package is made of these modules:

- `batalla.armas`: the abstract `Arma` and its families `ItemMagico`
  (`Baston`, `LibroDeHechizos`, `Pocion`, `Amuleto`) and `ArmaDeCombate`
  (`HachaSimple`, `HachaDoble`, `Espada`, `Lanza`, `Garrote`). Every weapon
  has `nombre` and `destruccion`; `descripcion()` returns its line and
  `usar_arma()` prints and returns it.
- `batalla.personajes`: the abstract `Personaje` and its families `Mago`
  (`Hechicero`, `Conjurador`, `Brujo`, `Nigromante`) and `Guerrero`
  (`Barbaro`, `Paladin`, `Caballero`, `Mercenario`, `Gladiador`). A character
  has `tipo`, `vida` and a list `armas`; it offers `descripcion()`,
  `esta_presente()`, `agregar_arma(arma)`, `perder_vida(cantidad)` and
  `atacar_personaje(atacado, rng=None)`, which returns the damage dealt.
- `batalla.factory`: `crear_personaje(tipo_personaje)`,
  `crear_arma(tipo_arma)` and
  `crear_personaje_armado(tipo_personaje, cantidad_armas, rng=None)`.
  Type names are accepted in lower case or capitalised (for example
  `"espada"` or `"Espada"`, `"hacha doble"` or `"Hacha Doble"`).
- `batalla.juego`: the duel — the `Jugador` dataclass, `crear_personajes`,
  `describir_estado_personajes`, `elegir_ataque`, `ataque_aleatorio`,
  `combate_comparacion_ataques` and `resultados`.
- `batalla.demo`: the showcase behind `batalla-demo`.

Functions that make random choices take an optional `random.Random`, so
results can be reproduced:

```python
import random

from batalla.factory import crear_arma, crear_personaje, crear_personaje_armado

rng = random.Random(1)
caballero = crear_personaje("caballero")
caballero.agregar_arma(crear_arma("espada"))
mago = crear_personaje_armado("nigromante", 2, rng)

dano = caballero.atacar_personaje(mago, rng)   # 10 + 10 for the sword
print(mago.vida)                                # 80
print(mago.descripcion())
```

An unknown character or weapon type raises `ValueError`.

## What it does not do

The game keeps nothing between runs: there is no saving or loading of
characters or games, no score history, and player 2 is always controlled by
the computer.

## Tests

```
pip install .[test]
pytest
```