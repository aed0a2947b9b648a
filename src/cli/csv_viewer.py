"""
Punto de entrada CLI: csv-viewer.

Uso:
    # 10 filas por página (por defecto), delimitador ';'
    csv-viewer /ruta/personas.csv

    # 25 filas por página, con columna de número de registro
    csv-viewer /ruta/personas.csv 25 -n

    # CSV separado por comas, empezando en la página 3
    csv-viewer /ruta/ventas.csv -d , -p 3

Comandos dentro del visor (línea completa):
    n = siguiente, p = anterior, f = primera, l = última,
    j<número> = saltar a página, x = salir

Este módulo solo arma las piezas (fontanería) y traduce los errores del
dominio a un mensaje y un código de salida.
"""

import argparse
import sys
from pathlib import Path

from src.adapters.output.loggers.console_logger import ConsoleLogger
from src.domain.exceptions import KataBaseError
from src.domain.services.csv_source import DEFAULT_LINES_PER_PAGE
from src.domain.services.page_navigator import PageNavigator
from src.domain.services.table_renderer import AsciiTableRenderer
from src.infrastructure.factory import open_csv_source

DEFAULT_DELIMITER = ";"


def main(argv: list[str] | None = None) -> None:
    """Punto de entrada principal del CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    logger = ConsoleLogger(verbose=args.verbose)

    try:
        csv_source = open_csv_source(
            Path(args.source),
            logger,
            delimiter=args.delimiter,
            add_record_number=args.add_record_number,
            default_lines_per_page=args.lines_per_page,
        )

        page_count = csv_source.page_count()
        if args.page > page_count:
            parser.error(f"la página inicial {args.page} no existe (total: {page_count})")

        navigator = PageNavigator(
            csv_source,
            AsciiTableRenderer(styled=not args.plain),
            logger,
        )
        navigator.run(initial_page=args.page)

    except KataBaseError as e:
        print(f"❌ {e}", file=sys.stderr)
        sys.exit(1)

    logger.print_summary()


def _positive_int(value: str) -> int:
    """Tipo de argparse: entero >= 1."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"no es un entero: {value!r}")
    if number < 1:
        raise argparse.ArgumentTypeError(f"debe ser >= 1: {number}")
    return number


def _single_char(value: str) -> str:
    """Tipo de argparse: exactamente un carácter."""
    if len(value) != 1:
        raise argparse.ArgumentTypeError(f"debe ser un solo carácter: {value!r}")
    return value


def _build_parser() -> argparse.ArgumentParser:
    """Construye el parser de argumentos de línea de comandos."""
    parser = argparse.ArgumentParser(
        prog="csv-viewer",
        description="Visor paginado de archivos CSV como tabla ASCII",
        epilog="Ejemplo: csv-viewer personas.csv 20 -n",
    )

    parser.add_argument(
        "source",
        metavar="SOURCE",
        help="Archivo CSV a mostrar",
    )

    parser.add_argument(
        "lines_per_page",
        nargs="?",
        type=_positive_int,
        default=DEFAULT_LINES_PER_PAGE,
        help=f"Filas de datos por página (por defecto: {DEFAULT_LINES_PER_PAGE})",
    )

    parser.add_argument(
        "-n",
        "--addRecordNumber",
        dest="add_record_number",
        action="store_true",
        help="Agrega una columna con el número de registro de cada fila",
    )

    parser.add_argument(
        "-d",
        "--delimiter",
        type=_single_char,
        default=DEFAULT_DELIMITER,
        help=f"Carácter separador de columnas (por defecto: '{DEFAULT_DELIMITER}')",
    )

    parser.add_argument(
        "-p",
        "--page",
        type=_positive_int,
        default=1,
        help="Página con la que inicia el visor (por defecto: 1)",
    )

    parser.add_argument(
        "--plain",
        action="store_true",
        help="No usar negrita (útil al redirigir la salida)",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Muestra la bitácora de procesamiento en stderr",
    )

    return parser


if __name__ == "__main__":
    main()
