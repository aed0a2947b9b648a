"""
Adaptador de salida: Logger a consola.

Implementación simple de ProcessLogger que imprime eventos a stderr.
stdout queda reservado para la tabla, el menú y los reportes del
contador de palabras.

Los eventos solo se imprimen en modo verbose (-v). Los contadores se
llevan siempre, para el resumen final.
"""

import sys
from typing import TextIO

from src.domain.ports.process_logger import ProcessLogger


class ConsoleLogger(ProcessLogger):
    """Logger que imprime eventos de procesamiento a consola."""

    def __init__(self, verbose: bool = False, stream: TextIO | None = None) -> None:
        self._verbose = verbose
        self._stream = stream
        self._paginas_mostradas: int = 0
        self._filas_normalizadas: int = 0
        self._comandos_ignorados: int = 0
        self._textos_analizados: int = 0

    def _print(self, message: str) -> None:
        if self._verbose:
            # stderr se resuelve en cada llamada, no al construir
            print(message, file=self._stream or sys.stderr)

    # --- Visor CSV ---

    def log_source_opened(self, name: str, line_count: int, column_count: int) -> None:
        self._print(f"  📄 Abierto: {name} — {line_count} líneas, {column_count} columnas")

    def log_page_loaded(self, page_number: int, line_count: int) -> None:
        self._paginas_mostradas += 1
        self._print(f"  🔍 Página {page_number}: {line_count} filas leídas")

    def log_row_normalized(self, line_number: int, found: int, expected: int) -> None:
        self._filas_normalizadas += 1
        self._print(
            f"  ⚠️  Fila {line_number}: {found} celdas, se esperaban {expected} — ajustada"
        )

    def log_command_ignored(self, user_input: str) -> None:
        self._comandos_ignorados += 1
        self._print(f"  ⏭️  Comando ignorado: {user_input!r}")

    def log_jump_ignored(self, target: int, page_count: int) -> None:
        self._print(f"  ⏭️  Salto ignorado: página {target} de {page_count}")

    # --- Contador de palabras ---

    def log_word_list_loaded(self, source: str, word_count: int) -> None:
        self._print(f"  📚 Lista cargada: {source} — {word_count} palabras")

    def log_text_analyzed(self, words_count: int, unique_words_count: int) -> None:
        self._textos_analizados += 1
        self._print(f"  ✅ Texto analizado: {words_count} palabras, {unique_words_count} únicas")

    # --- Resumen ---

    def get_summary(self) -> dict:
        return {
            "paginas_mostradas": self._paginas_mostradas,
            "filas_normalizadas": self._filas_normalizadas,
            "comandos_ignorados": self._comandos_ignorados,
            "textos_analizados": self._textos_analizados,
        }

    def print_summary(self) -> None:
        """Imprime el resumen final de la sesión (solo en modo verbose)."""
        summary = self.get_summary()
        self._print("=" * 60)
        self._print("RESUMEN DE LA SESIÓN")
        self._print("=" * 60)
        self._print(f"  Páginas mostradas:   {summary['paginas_mostradas']}")
        self._print(f"  Filas ajustadas:     {summary['filas_normalizadas']}")
        self._print(f"  Comandos ignorados:  {summary['comandos_ignorados']}")
        self._print(f"  Textos analizados:   {summary['textos_analizados']}")
        self._print("=" * 60)
