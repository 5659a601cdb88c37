"""Weapons available to characters: magic items and combat weapons."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Arma(ABC):
    """Abstract weapon with a name and a destruction value."""

    def __init__(self, nombre: str, destruccion: int) -> None:
        self.nombre = nombre
        self.destruccion = destruccion

    @abstractmethod
    def descripcion(self) -> str:
        """Return the line shown when the weapon is used."""

    def usar_arma(self) -> str:
        """Use the weapon: print its description and return it."""
        linea = self.descripcion()
        print(linea)
        return linea

    def __repr__(self) -> str:
        return f"{type(self).__name__}(nombre={self.nombre!r}, destruccion={self.destruccion!r})"


class ItemMagico(Arma):
    """A magic item: has an element, a rarity and a colour."""

    def __init__(
        self,
        nombre: str,
        elemento: str,
        rareza: str,
        color: str,
        destruccion: int,
    ) -> None:
        super().__init__(nombre, destruccion)
        self.elemento = elemento
        self.rareza = rareza
        self.color = color

    def descripcion(self) -> str:
        return f"Usando el Item Mágico: {self.nombre}"

    def _cabecera(self) -> str:
        return (
            f"Tipo Item Mágico: {self.nombre} - Elemento: {self.elemento}"
            f" - Rareza: {self.rareza} - Color: {self.color}"
        )


class Baston(ItemMagico):
    """A staff."""

    def __init__(self) -> None:
        super().__init__("Bastón", "Tierra", "Común", "Verde", 5)
        self.largo = 80
        self.peso = 4

    def descripcion(self) -> str:
        return (
            f"{self._cabecera()}Peso: {self.peso} kg  - Largo: {self.largo}"
            f" - Destrucción: {self.destruccion}"
        )


class LibroDeHechizos(ItemMagico):
    """A spell book."""

    def __init__(self) -> None:
        super().__init__("Libro de Hechizos", "Aire", "Muy Raro", "Azul", 2)
        self.cantidad_hojas = 800
        self.idioma = "Latín"

    def descripcion(self) -> str:
        return (
            f"{self._cabecera()}Cantidad de Hojas: {self.cantidad_hojas}"
            f"Idioma: {self.idioma} - Destrucción: {self.destruccion}"
        )


class Pocion(ItemMagico):
    """A potion."""

    def __init__(self) -> None:
        super().__init__("Poción", "Agua", "Común", "Violeta", 4)
        self.efecto = "Venenoso"
        self.ingrediente_secreto = "Huevo de Dragón"

    def descripcion(self) -> str:
        return (
            f"{self._cabecera()} - Efecto: {self.efecto}"
            f" - Ingrediente Secreto: {self.ingrediente_secreto}"
            f" - Destrucción: {self.destruccion}"
        )


class Amuleto(ItemMagico):
    """An amulet."""

    def __init__(self) -> None:
        super().__init__("Amuleto", "Tierra", "Raro", "Esmeralda", 3)
        self.tipo_piedra = "Ojo de Tigre"
        self.poder = "Aumenta daño de un golpe"

    def descripcion(self) -> str:
        return (
            f"{self._cabecera()} - Tipo Piedra: {self.tipo_piedra}"
            f" - Poder: {self.poder} - Destrucción: {self.destruccion}"
        )


class ArmaDeCombate(Arma):
    """A combat weapon: has a material, a rarity and a precision."""

    def __init__(
        self,
        nombre: str,
        material: str,
        rareza: str,
        destruccion: int,
        precision: int,
    ) -> None:
        super().__init__(nombre, destruccion)
        self.material = material
        self.rareza = rareza
        self.precision = precision

    def descripcion(self) -> str:
        return f"Usando el Arma de Combate: {self.nombre}"

    def _pie(self) -> str:
        return f" - Destrucción: {self.destruccion} - Precisión: {self.precision}"


class HachaSimple(ArmaDeCombate):
    """A single-bladed axe."""

    def __init__(self) -> None:
        super().__init__("Hacha Simple", "Madera", "Común", 3, 4)
        self.nivel_filo = 2
        self.peso = 3

    def descripcion(self) -> str:
        return (
            f"Tipo Arma de combate: {self.nombre} - Rareza: {self.rareza}"
            f" - Material: {self.material} - Peso: {self.peso} kg"
            f" - Nivel Filo: {self.nivel_filo}{self._pie()}"
        )


class HachaDoble(ArmaDeCombate):
    """A double-bladed axe."""

    def __init__(self) -> None:
        super().__init__("Hacha Doble", "Metal", "Raro", 8, 4)
        self.nivel_filo = 4
        self.peso = 6

    def descripcion(self) -> str:
        return (
            f"Tipo Arma de combate: {self.nombre} - Rareza: {self.rareza}"
            f" - Material: {self.material} - Peso: {self.peso} kg "
            f" - Nivel Filo: {self.nivel_filo}{self._pie()}"
        )


class Espada(ArmaDeCombate):
    """A sword."""

    def __init__(self) -> None:
        super().__init__("Espada", "Metal", "Muy Raro", 10, 8)
        self.forma = "Trébol"
        self.longitud = 1

    def descripcion(self) -> str:
        return (
            f"Tipo Arma de combate: {self.nombre} - Rareza: {self.rareza}"
            f" - Material: {self.material} - Forma: {self.forma}"
            f" -  Longitud: {self.longitud} mts {self._pie()}"
        )


class Lanza(ArmaDeCombate):
    """A spear."""

    def __init__(self) -> None:
        super().__init__("Lanza", "Madera", "Raro", 7, 2)
        self.forma_punta = "Diamante"
        self.lugar_origen = "África"

    def descripcion(self) -> str:
        return (
            f"Tipo Arma de combate: {self.nombre} - Rareza: {self.rareza}"
            f" -  Lugar de Orígen: {self.lugar_origen} - Material: {self.material}"
            f" - Forma de Punta: {self.forma_punta} mts {self._pie()}"
        )


class Garrote(ArmaDeCombate):
    """A club."""

    def __init__(self) -> None:
        super().__init__("Garrote", "Madera", "Común", 6, 7)
        self.uso = "Tortura"
        self.epoca_utilizacion = "La Inquisición"

    def descripcion(self) -> str:
        return (
            f"Tipo Arma de combate: {self.nombre} - Rareza: {self.rareza}"
            f" -  Uso Principal: {self.uso} - Epoca de uso: {self.epoca_utilizacion}"
            f" - Material: {self.material}{self._pie()}"
        )