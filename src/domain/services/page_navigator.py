"""
Servicio de dominio: Ciclo interactivo de navegación del visor CSV.

Ciclo:
1. Leer la página actual de la CsvSource y dibujarla con el menú.
2. Leer una línea de la entrada.
3. Si coincide con una operación DISPONIBLE, aplicar la transición.
   Si no, volver a leer (sin redibujar).
4. Repetir hasta que la página actual sea EXIT_PAGE.

Una operación que existe pero no se ofrece en esta página (por ejemplo
"n" en la última página) no coincide: se trata igual que basura.
"""

import re
import sys
from typing import TextIO

from src.domain.exceptions import InputExhaustedError
from src.domain.models.menu_operation import MenuOperation
from src.domain.ports.process_logger import ProcessLogger
from src.domain.services.csv_source import CsvSource
from src.domain.services.table_renderer import AsciiTableRenderer

EXIT_PAGE = 0
"""Página centinela que termina el ciclo. Nunca se dibuja."""


def available_operations(page_number: int, page_count: int) -> list[MenuOperation]:
    """Operaciones que se ofrecen en una página, en orden de menú.

    | condición        | operaciones               |
    |------------------|---------------------------|
    | siempre          | JUMP_TO_PAGE, EXIT        |
    | página < total   | NEXT_PAGE, LAST_PAGE      |
    | página > 1       | PREVIOUS_PAGE, FIRST_PAGE |
    """
    operations = {MenuOperation.JUMP_TO_PAGE, MenuOperation.EXIT}
    if page_number < page_count:
        operations |= {MenuOperation.NEXT_PAGE, MenuOperation.LAST_PAGE}
    if page_number > 1:
        operations |= {MenuOperation.PREVIOUS_PAGE, MenuOperation.FIRST_PAGE}
    return sorted(operations, key=lambda operation: operation.position)


class PageNavigator:
    """Dibuja páginas y atiende los comandos del usuario.

    La entrada y la salida se reciben por constructor para poder
    probar el ciclo completo con io.StringIO.
    """

    def __init__(
        self,
        csv_source: CsvSource,
        renderer: AsciiTableRenderer,
        logger: ProcessLogger,
        lines_per_page: int | None = None,
        input_stream: TextIO | None = None,
        output_stream: TextIO | None = None,
    ) -> None:
        self._source = csv_source
        self._renderer = renderer
        self._logger = logger
        if lines_per_page is None:
            lines_per_page = csv_source.default_lines_per_page
        self._lines_per_page = lines_per_page
        self._input = input_stream if input_stream is not None else sys.stdin
        self._output = output_stream if output_stream is not None else sys.stdout

    @property
    def page_count(self) -> int:
        return self._source.page_count(self._lines_per_page)

    def run(self, initial_page: int = 1) -> None:
        """Ejecuta el ciclo hasta que el usuario elija salir (x).

        Raises:
            ValueError: Si initial_page no es una página existente.
            InputExhaustedError: Si la entrada se cierra antes de salir.
        """
        page_count = self.page_count
        if not 1 <= initial_page <= page_count:
            raise ValueError(f"Página inicial fuera de rango: {initial_page} (1-{page_count})")

        current_page = initial_page
        while current_page != EXIT_PAGE:
            page = self._source.page(current_page, self._lines_per_page)
            operations = available_operations(current_page, page_count)
            self._output.write(
                self._renderer.render_screen(page, page_count, self._source.name, operations)
            )
            self._output.flush()

            current_page = self._read_next_page(current_page, page_count, operations)
            print(file=self._output)

    def _read_next_page(
        self,
        current_page: int,
        page_count: int,
        operations: list[MenuOperation],
    ) -> int:
        """Lee líneas hasta que una coincida y devuelve la nueva página."""
        while True:
            raw_input = self._input.readline()
            if raw_input == "":
                raise InputExhaustedError(current_page)
            user_input = raw_input.rstrip("\r\n")

            for operation in operations:
                match = operation.match(user_input)
                if match is not None:
                    return self._transition(operation, match, current_page, page_count)

            self._logger.log_command_ignored(user_input)

    def _transition(
        self,
        operation: MenuOperation,
        match: re.Match,
        current_page: int,
        page_count: int,
    ) -> int:
        if operation is MenuOperation.FIRST_PAGE:
            return 1
        if operation is MenuOperation.LAST_PAGE:
            return page_count
        if operation is MenuOperation.NEXT_PAGE:
            return current_page + 1
        if operation is MenuOperation.PREVIOUS_PAGE:
            return current_page - 1
        if operation is MenuOperation.EXIT:
            return EXIT_PAGE

        # JUMP_TO_PAGE: un destino inexistente deja la página como está
        # (no se ajusta a la última). "j0" tampoco es un destino válido:
        # la página 0 es el centinela de salida.
        target = MenuOperation.jump_target(match)
        if not 1 <= target <= page_count:
            self._logger.log_jump_ignored(target, page_count)
            return current_page
        return target
