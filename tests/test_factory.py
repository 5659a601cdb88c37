import random

import pytest

from batalla.armas import Arma, HachaDoble, LibroDeHechizos, Pocion
from batalla.factory import (
    TIPOS_GUERREROS,
    TIPOS_MAGOS,
    VARIEDAD_ARMAS,
    crear_arma,
    crear_personaje,
    crear_personaje_armado,
    main,
)
from batalla.personajes import Guerrero, Hechicero, Mago, Paladin

NOMBRES_ARMAS = {
    "baston": "Bastón",
    "libro de hechizos": "Libro de Hechizos",
    "pocion": "Poción",
    "amuleto": "Amuleto",
    "hacha simple": "Hacha Simple",
    "hacha doble": "Hacha Doble",
    "espada": "Espada",
    "lanza": "Lanza",
    "garrote": "Garrote",
}


@pytest.mark.parametrize("nombre", ["hechicero", "Hechicero"])
def test_crear_personaje_accepts_both_spellings(nombre):
    personaje = crear_personaje(nombre)
    assert isinstance(personaje, Hechicero)
    assert personaje.tipo == "Hechicero"


def test_crear_paladin_has_accented_type():
    personaje = crear_personaje("Paladin")
    assert isinstance(personaje, Paladin)
    assert personaje.tipo == "Paladín"


@pytest.mark.parametrize("tipo", TIPOS_MAGOS)
def test_mage_types_create_mages(tipo):
    personaje = crear_personaje(tipo)
    assert isinstance(personaje, Mago)
    assert personaje.descripcion().startswith("Tipo de mago: ")
    assert personaje.vida == 100


@pytest.mark.parametrize("tipo", TIPOS_GUERREROS)
def test_warrior_types_create_warriors(tipo):
    personaje = crear_personaje(tipo)
    assert isinstance(personaje, Guerrero)
    assert personaje.descripcion().startswith("Tipo Guerrero: ")
    assert personaje.vida == 100


def test_unknown_character_raises():
    with pytest.raises(ValueError, match="desconocido"):
        crear_personaje("dragon")


@pytest.mark.parametrize(
    "nombre, clase, esperado",
    [
        ("libro de hechizos", LibroDeHechizos, "Libro de Hechizos"),
        ("Libro de Hechizos", LibroDeHechizos, "Libro de Hechizos"),
        ("hacha doble", HachaDoble, "Hacha Doble"),
        ("Hacha Doble", HachaDoble, "Hacha Doble"),
        ("Pocion", Pocion, "Poción"),
    ],
)
def test_crear_arma(nombre, clase, esperado):
    arma = crear_arma(nombre)
    assert isinstance(arma, clase)
    assert arma.nombre == esperado


@pytest.mark.parametrize("nombre, esperado", sorted(NOMBRES_ARMAS.items()))
def test_every_weapon_name_is_known(nombre, esperado):
    arma = crear_arma(nombre)
    assert isinstance(arma, Arma)
    assert arma.nombre == esperado


def test_weapon_variety_covers_all_weapons():
    assert sorted(VARIEDAD_ARMAS) == sorted(NOMBRES_ARMAS)
    creadas = [crear_arma(nombre).nombre for nombre in VARIEDAD_ARMAS]
    assert sorted(creadas) == sorted(NOMBRES_ARMAS.values())


def test_unknown_weapon_raises():
    with pytest.raises(ValueError, match="desconocida"):
        crear_arma("arco")


@pytest.mark.parametrize("cantidad", [0, 1, 2, 5])
def test_crear_personaje_armado_weapon_count(cantidad):
    personaje = crear_personaje_armado("brujo", cantidad, random.Random(1))
    assert len(personaje.armas) == cantidad
    assert all(isinstance(arma, Arma) for arma in personaje.armas)


def test_crear_personaje_armado_is_reproducible():
    a = crear_personaje_armado("gladiador", 4, random.Random(7))
    b = crear_personaje_armado("gladiador", 4, random.Random(7))
    assert [type(x) for x in a.armas] == [type(x) for x in b.armas]


def test_crear_personaje_armado_unknown_type_raises():
    with pytest.raises(ValueError):
        crear_personaje_armado("nadie", 1, random.Random(1))


def test_main_prints_counts_and_characters(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    prefijo_magos = "La cantidad de magos será: "
    prefijo_guerreros = "La cantidad de guerreros será: "
    assert lines[0].startswith(prefijo_magos)
    assert lines[1].startswith(prefijo_guerreros)
    magos = int(lines[0][len(prefijo_magos):])
    guerreros = int(lines[1][len(prefijo_guerreros):])
    assert 3 <= magos <= 7
    assert 3 <= guerreros <= 7
    assert len(lines) == 2 + magos + guerreros