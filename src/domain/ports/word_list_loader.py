"""
Puerto de entrada: Cargador de listas de palabras.

El contador de palabras usa dos listas: el diccionario (palabras
conocidas) y las stop words (palabras ignoradas). Ambas son "una
palabra por línea" y se cargan igual.
"""

from abc import ABC, abstractmethod
from pathlib import Path


class WordListLoader(ABC):
    """Interfaz para cargar un conjunto de palabras."""

    @abstractmethod
    def load(self, path: Path) -> frozenset[str]:
        """Carga las palabras de una lista, una por línea.

        Las líneas vacías se ignoran. No se normalizan mayúsculas.

        Raises:
            SourceReadError: Si la lista no se puede leer.
        """
        ...

    @abstractmethod
    def load_default_stop_words(self) -> frozenset[str]:
        """Carga la lista de stop words que viene con el proyecto."""
        ...
