"""
Puerto de salida: Bitácora de procesamiento (Process Logger).

Define el contrato para registrar eventos mientras se visualiza un CSV
o se cuentan palabras.

¿Por qué no usar simplemente el módulo `logging` de Python?
Porque `logging` es una herramienta de infraestructura (HOW), mientras que
este puerto define los EVENTOS del dominio (WHAT):
- "Se abrió el CSV con 120 líneas" (no "INFO: file opened")
- "Se ignoró el comando 'zz'" (no "DEBUG: no match")

La salida estándar es la interfaz del usuario (la tabla, el menú, el
índice de palabras), así que la bitácora nunca debe mezclarse con ella.
En tests se implementa acumulando los eventos en memoria.
"""

from abc import ABC, abstractmethod


class ProcessLogger(ABC):
    """Interfaz para la bitácora de procesamiento."""

    # --- Visor CSV ---

    @abstractmethod
    def log_source_opened(self, name: str, line_count: int, column_count: int) -> None:
        """Registra que se abrió un CSV.

        Args:
            name: Nombre del archivo.
            line_count: Líneas totales, incluyendo el encabezado.
            column_count: Columnas del encabezado (con la de número de
                          registro, si está activa).
        """
        ...

    @abstractmethod
    def log_page_loaded(self, page_number: int, line_count: int) -> None:
        """Registra que se leyó una página del CSV."""
        ...

    @abstractmethod
    def log_row_normalized(self, line_number: int, found: int, expected: int) -> None:
        """Registra una fila con una cantidad de celdas distinta al encabezado.

        La fila se rellena con celdas vacías o se recorta.

        Args:
            line_number: Número de línea de datos (1-indexed).
            found: Celdas encontradas.
            expected: Celdas del encabezado.
        """
        ...

    @abstractmethod
    def log_command_ignored(self, user_input: str) -> None:
        """Registra una entrada que no coincide con ninguna operación disponible."""
        ...

    @abstractmethod
    def log_jump_ignored(self, target: int, page_count: int) -> None:
        """Registra un salto a una página que no existe."""
        ...

    # --- Contador de palabras ---

    @abstractmethod
    def log_word_list_loaded(self, source: str, word_count: int) -> None:
        """Registra que se cargó un diccionario o una lista de stop words."""
        ...

    @abstractmethod
    def log_text_analyzed(self, words_count: int, unique_words_count: int) -> None:
        """Registra el fin del análisis de un texto."""
        ...

    # --- Resumen ---

    @abstractmethod
    def get_summary(self) -> dict:
        """Devuelve un resumen de la sesión.

        Returns:
            Diccionario con métricas:
            {
                'paginas_mostradas': int,
                'filas_normalizadas': int,
                'comandos_ignorados': int,
                'textos_analizados': int,
            }
        """
        ...
