"""
Servicio de dominio: Fuente CSV paginada.

Responsabilidades:
1. Leer y separar la línea de encabezado (línea 0).
2. Contar las líneas del archivo una sola vez, al abrirlo.
3. Calcular cuántas páginas hay para un tamaño de página dado.
4. Construir una Page leyendo SOLO las líneas de esa página.

No hay soporte de comillas ni escapes: un delimitador dentro de un
campo siempre separa columnas.

¿Por qué no se guarda el archivo en memoria?
Porque el visor solo muestra una página a la vez. Cada página vuelve a
recorrer el archivo desde el inicio hasta su offset: eso limita la
memoria (solo las filas de la página), no el tiempo. Para archivos de
tamaño "kata" es suficiente.
"""

import math

from src.domain.exceptions import InvalidSourceError
from src.domain.models.page import RECORD_NUMBER_LABEL, CsvLine, Page
from src.domain.ports.line_source import LineSource
from src.domain.ports.process_logger import ProcessLogger

DEFAULT_LINES_PER_PAGE = 10


class CsvSource:
    """CSV abierto para lectura paginada.

    Recibe la fuente de líneas por constructor (Dependency Injection).
    No sabe si las líneas vienen de un archivo en disco o de otro lado.
    """

    def __init__(
        self,
        line_source: LineSource,
        logger: ProcessLogger,
        delimiter: str = ",",
        add_record_number: bool = False,
        default_lines_per_page: int = DEFAULT_LINES_PER_PAGE,
    ) -> None:
        """
        Args:
            line_source: Fuente de las líneas del CSV.
            logger: Logger para la bitácora de procesamiento.
            delimiter: Carácter que separa las columnas.
            add_record_number: Si True, se antepone una columna "No." con
                               el número de línea de datos ("1.", "2.", ...).
            default_lines_per_page: Tamaño de página cuando no se indica otro.

        Raises:
            SourceReadError: Si el archivo no se puede leer.
            InvalidSourceError: Si el archivo no tiene línea de encabezado.
            ValueError: Si el delimitador no es un solo carácter o el tamaño
                        de página por defecto no es positivo.
        """
        if len(delimiter) != 1:
            raise ValueError(f"El delimitador debe ser un solo carácter: {delimiter!r}")
        _check_lines_per_page(default_lines_per_page)

        self._source = line_source
        self._logger = logger
        self.delimiter = delimiter
        self.add_record_number = add_record_number
        self.default_lines_per_page = default_lines_per_page
        self.name = line_source.name

        # Recorrido completo, una sola vez. No se actualiza si el archivo
        # cambia mientras el visor está abierto.
        self.line_count = line_source.count_lines()

        header_lines = tuple(line_source.read_lines(0, 1))
        if not header_lines:
            raise InvalidSourceError(self.name, "El archivo está vacío, falta la línea de encabezado")
        header_line = header_lines[0]

        prefix: CsvLine = (RECORD_NUMBER_LABEL,) if add_record_number else ()
        self.header: CsvLine = prefix + tuple(header_line.split(delimiter))

        self._logger.log_source_opened(self.name, self.line_count, self.column_count)

    @property
    def column_count(self) -> int:
        return len(self.header)

    @property
    def body_line_count(self) -> int:
        """Líneas de datos (todas menos el encabezado)."""
        return max(self.line_count - 1, 0)

    def page_count(self, lines_per_page: int | None = None) -> int:
        """Cantidad de páginas. Siempre al menos 1, aunque no haya datos."""
        lines_per_page = self._resolve_lines_per_page(lines_per_page)
        return max(1, math.ceil(self.body_line_count / lines_per_page))

    def page(self, page_number: int, lines_per_page: int | None = None) -> Page:
        """Lee y separa las filas de una página.

        Args:
            page_number: Número de página (1-indexed).
            lines_per_page: Filas por página. None = default_lines_per_page.

        Returns:
            Page con hasta `lines_per_page` filas (menos en la última página,
            ninguna si page_number está más allá del final).
        """
        lines_per_page = self._resolve_lines_per_page(lines_per_page)
        if page_number < 1:
            raise ValueError(f"Número de página fuera de rango: {page_number}")

        # offset en líneas del archivo: la línea 0 es el encabezado
        offset = (page_number - 1) * lines_per_page + 1
        lines = tuple(
            self._split_line(raw_line, offset + index)
            for index, raw_line in enumerate(self._source.read_lines(offset, lines_per_page))
        )

        self._logger.log_page_loaded(page_number, len(lines))
        return Page(page_number=page_number, header=self.header, lines=lines)

    def _split_line(self, raw_line: str, line_number: int) -> CsvLine:
        """Separa una línea de datos y le ajusta la cantidad de celdas.

        Las filas con menos celdas que el encabezado se rellenan con ""
        y las que tienen más se recortan, para que toda fila de una Page
        tenga exactamente column_count celdas.
        """
        cells = raw_line.split(self.delimiter)
        expected = self.column_count - (1 if self.add_record_number else 0)

        if len(cells) != expected:
            self._logger.log_row_normalized(line_number, len(cells), expected)
            cells = (cells + [""] * expected)[:expected]

        if self.add_record_number:
            return (f"{line_number}.", *cells)
        return tuple(cells)

    def _resolve_lines_per_page(self, lines_per_page: int | None) -> int:
        if lines_per_page is None:
            return self.default_lines_per_page
        _check_lines_per_page(lines_per_page)
        return lines_per_page


def _check_lines_per_page(lines_per_page: int) -> None:
    if lines_per_page < 1:
        raise ValueError(f"Las líneas por página deben ser >= 1: {lines_per_page}")
