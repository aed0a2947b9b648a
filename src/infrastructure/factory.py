"""
Fábrica de componentes del visor CSV.

Centraliza cómo se arma una CsvSource a partir de una ruta en disco:
el dominio solo conoce el puerto LineSource, y el CLI no debería
repetir el cableado adaptador → servicio.
"""

from pathlib import Path

from src.adapters.input.line_sources.file_line_source import FileLineSource
from src.domain.ports.process_logger import ProcessLogger
from src.domain.services.csv_source import DEFAULT_LINES_PER_PAGE, CsvSource


def open_csv_source(
    path: Path,
    logger: ProcessLogger,
    delimiter: str = ",",
    add_record_number: bool = False,
    default_lines_per_page: int = DEFAULT_LINES_PER_PAGE,
) -> CsvSource:
    """Abre un CSV en disco para lectura paginada.

    Lee el encabezado y cuenta las líneas en este momento; las filas de
    datos se leen después, página por página.

    Raises:
        SourceReadError: Si el archivo no se puede leer.
        InvalidSourceError: Si el archivo está vacío.
    """
    return CsvSource(
        FileLineSource(Path(path)),
        logger,
        delimiter=delimiter,
        add_record_number=add_record_number,
        default_lines_per_page=default_lines_per_page,
    )
