"""Playable characters: wizards and warriors that carry weapons and fight."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod

from batalla.armas import Arma

DANO_BASE = 10


class Personaje(ABC):
    """Abstract character with a type, a life count and a list of weapons."""

    def __init__(self, tipo: str, vida: int) -> None:
        self.tipo = tipo
        self.vida = vida
        self.armas: list[Arma] = []

    @abstractmethod
    def descripcion(self) -> str:
        """Return the line shown when the character appears."""

    def esta_presente(self) -> str:
        """Announce the character: print its description and return it."""
        linea = self.descripcion()
        print(linea)
        return linea

    def agregar_arma(self, arma: Arma) -> None:
        """Give the character another weapon."""
        self.armas.append(arma)

    def perder_vida(self, cantidad: int) -> int:
        """Take ``cantidad`` points of life, never going below zero; return what is left."""
        self.vida = max(self.vida - cantidad, 0)
        return self.vida

    def atacar_personaje(self, atacado: Personaje, rng: random.Random | None = None) -> int:
        """Hit ``atacado`` with a random weapon, if any, and return the damage dealt."""
        rng = rng if rng is not None else random
        dano = DANO_BASE
        if self.armas:
            arma = rng.choice(self.armas)
            dano += arma.destruccion
            print(f"El {self.tipo} ataca con {arma.nombre} y hace 10 puntos de daño")
        else:
            print(f"El {self.tipo} ataca y hace 10 puntos de daño")
        atacado.perder_vida(dano)
        return dano

    def __repr__(self) -> str:
        return f"{type(self).__name__}(tipo={self.tipo!r}, vida={self.vida!r})"


class Mago(Personaje):
    """A wizard: has experience, a speciality and energy."""

    def __init__(
        self,
        tipo: str,
        nivel_experiencia: int,
        especialidad: str,
        energia: int,
        vida: int,
    ) -> None:
        super().__init__(tipo, vida)
        self.nivel_experiencia = nivel_experiencia
        self.especialidad = especialidad
        self.energia = energia

    def descripcion(self) -> str:
        return f"Esta presente un Mago: {self.tipo}"

    def _cabecera(self) -> str:
        return (
            f"Tipo de mago: {self.tipo} - Nivel de experiencia: {self.nivel_experiencia}"
            f" - Especialización: {self.especialidad}"
        )


class Hechicero(Mago):
    """A sorcerer."""

    def __init__(self) -> None:
        super().__init__("Hechicero", 4, "Magia elemental", 6, 100)
        self.vestimenta = "Manto"
        self.gorro = "Sombrero"

    def descripcion(self) -> str:
        return (
            f"{self._cabecera()}Vestimenta: {self.vestimenta} - Accesorio: {self.gorro}"
            f" Energía: {self.energia} - Vida: {self.vida}"
        )


class Conjurador(Mago):
    """A conjurer."""

    def __init__(self) -> None:
        super().__init__("Conjurador", 2, "Comunicación con criaturas", 5, 100)
        self.sinonimo = "Exorcista"
        self.riesgo = "Aislamiento"

    def descripcion(self) -> str:
        return (
            f"Tipo de mago: {self.tipo} - Sinónimo: {self.sinonimo}"
            f" - Nivel de experiencia: {self.nivel_experiencia}"
            f" - Especialización: {self.especialidad} Energía: {self.energia}"
            f" - Vida: {self.vida} - Riesgo/Debilidad: {self.riesgo}"
        )


class Brujo(Mago):
    """A warlock."""

    def __init__(self) -> None:
        super().__init__("Brujo", 8, "Magia oscura", 7, 100)
        self.cualidad = "Buscador de conocimiento"
        self.epoca = "Siglo XIV"

    def descripcion(self) -> str:
        return (
            f"{self._cabecera()} - Cualidad Brujo: {self.cualidad}"
            f" - Época de orígen: {self.epoca} - Energía: {self.energia}"
            f" - Vida: {self.vida}"
        )


class Nigromante(Mago):
    """A necromancer."""

    def __init__(self) -> None:
        super().__init__("nigromante", 10, "Muerte", 6, 100)
        self.cualidad = "Paranoico"
        self.pais = "Persia"

    def descripcion(self) -> str:
        return (
            f"{self._cabecera()} - País de origen: {self.pais}"
            f" - Cualidad: {self.cualidad} - Energía: {self.energia}"
            f" - Vida: {self.vida}"
        )


class Guerrero(Personaje):
    """A warrior: has experience, a main quality and energy."""

    def __init__(
        self,
        tipo: str,
        nivel_experiencia: int,
        cualidad: str,
        energia: int,
        vida: int,
    ) -> None:
        super().__init__(tipo, vida)
        self.nivel_experiencia = nivel_experiencia
        self.cualidad = cualidad
        self.energia = energia

    def descripcion(self) -> str:
        return f"Esta presente un Guerrero: {self.tipo}"

    def _cabecera(self) -> str:
        return (
            f"Tipo Guerrero: {self.tipo} - Nivel de Experiencia: {self.nivel_experiencia}"
            f" - Principal Cualidad: {self.cualidad}"
        )

    def _pie(self) -> str:
        return f" - Nivel Energía: {self.energia} Vida: {self.vida}"


class Barbaro(Guerrero):
    """A barbarian."""

    def __init__(self) -> None:
        super().__init__("Barbaro", 8, "Fuerza y resistencia", 9, 100)
        self.nombre_rey = "Alarico"
        self.ira = 100

    def descripcion(self) -> str:
        return (
            f"Tipo Guerrero: {self.tipo} - Nombre: {self.nombre_rey}"
            f" - Nivel de Experiencia: {self.nivel_experiencia}"
            f" - Principal Cualidad: {self.cualidad}{self._pie()}"
            f" - Nivel ira: {self.ira}"
        )


class Paladin(Guerrero):
    """A paladin."""

    def __init__(self) -> None:
        super().__init__("Paladín", 10, "Magia", 8, 100)
        self.prioridad = "Justicia"
        self.acceso = "Grandes Hechizos"

    def descripcion(self) -> str:
        return (
            f"{self._cabecera()} - Prioridad: {self.prioridad}"
            f" - Arma Secreta: {self.acceso}{self._pie()}"
        )


class Caballero(Guerrero):
    """A knight."""

    def __init__(self) -> None:
        super().__init__("Caballero", 5, "Noble y disciplinado", 5, 100)
        self.nombre_caballo = "Chocolate"
        self.material_armadura = "Hierro"

    def descripcion(self) -> str:
        return (
            f"{self._cabecera()} - Nombre Caballo: {self.nombre_caballo}"
            f" - Material Armadura: {self.material_armadura}{self._pie()}"
        )


class Mercenario(Guerrero):
    """A mercenary."""

    def __init__(self) -> None:
        super().__init__("Mercenario", 1, "Práctivo", 7, 100)
        self.motivacion = "Beneficio Económico"
        self.contratante = "Países con ejercitos insuficientes"

    def descripcion(self) -> str:
        return (
            f"{self._cabecera()} - Motivación: {self.motivacion}"
            f" - Contratante: {self.contratante}{self._pie()}"
        )


class Gladiador(Guerrero):
    """A gladiator."""

    def __init__(self) -> None:
        super().__init__("Gladiador", 4, "Combate con bestias", 6, 100)
        self.monstruos_vencidos = 60
        self.ciudad = "Roma"

    def descripcion(self) -> str:
        return (
            f"Tipo Guerrero: {self.tipo} - Nivel de Experiencia: {self.nivel_experiencia}"
            f" - Monstruos Vencidos: {self.monstruos_vencidos}"
            f" - Principal Cualidad: {self.cualidad} - Ciudad: {self.ciudad}{self._pie()}"
        )