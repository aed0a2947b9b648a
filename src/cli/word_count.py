"""
Punto de entrada CLI: word-count.

Uso:
    # Contar las palabras de un archivo
    word-count /ruta/texto.txt

    # Texto directo, marcando palabras que no están en el diccionario
    word-count "Mary had a little lamb" -d /ruta/diccionario.txt

    # Modo interactivo: pide textos hasta recibir una línea vacía
    word-count

Salida:
    Number of words: 4, unique: 4, average word length: 4.25 characters
    Index (unknown: 1):
    	Mary
    	had
    	lamb*
    	little
"""

import argparse
import math
import sys
from pathlib import Path

from src.adapters.input.text_sources.file_text_reader import read_text_file
from src.adapters.input.word_lists.file_word_list_loader import FileWordListLoader
from src.adapters.output.loggers.console_logger import ConsoleLogger
from src.domain.exceptions import KataBaseError
from src.domain.models.word_count import WordCount
from src.domain.ports.process_logger import ProcessLogger

PROMPT = "Enter text: "


def main(argv: list[str] | None = None) -> None:
    """Punto de entrada principal del CLI."""
    args = _parse_args(argv)

    logger = ConsoleLogger(verbose=args.verbose)
    loader = FileWordListLoader(logger)

    try:
        if args.stop_words is not None:
            stop_words = loader.load(Path(args.stop_words))
        else:
            stop_words = loader.load_default_stop_words()

        dictionary = loader.load(Path(args.dictionary)) if args.dictionary is not None else None

        if args.source is None:
            # --- Modo interactivo ---
            while True:
                try:
                    text = input(PROMPT)
                except EOFError:
                    break
                if not text:
                    break
                _report(text, stop_words, dictionary, args.index, logger)
                print()
        else:
            _report(_resolve_source(args.source), stop_words, dictionary, args.index, logger)

    except KataBaseError as e:
        print(f"❌ {e}", file=sys.stderr)
        sys.exit(1)

    logger.print_summary()


def format_report(word_count: WordCount, show_index: bool = True) -> str:
    """Arma el reporte de un texto: resumen y, opcionalmente, el índice.

    El promedio de 0 palabras es NaN; se muestra como 0.00.
    """
    average = word_count.average_word_length
    if math.isnan(average):
        average = 0.0

    lines = [
        f"Number of words: {word_count.words_count}, "
        f"unique: {word_count.unique_words_count}, "
        f"average word length: {average:.2f} characters"
    ]

    if show_index:
        unknown_count = word_count.unique_words_unknown_count
        dictionary_information = f" (unknown: {unknown_count})" if unknown_count is not None else ""
        lines.append(f"Index{dictionary_information}:")
        lines.extend(f"\t{word}" for word in word_count.unique_words_unknown_marked)

    return "\n".join(lines)


def _report(
    text: str,
    stop_words: frozenset[str],
    dictionary: frozenset[str] | None,
    show_index: bool,
    logger: ProcessLogger,
) -> None:
    word_count = WordCount(text, stop_words=stop_words, dictionary=dictionary)
    print(format_report(word_count, show_index))
    logger.log_text_analyzed(word_count.words_count, word_count.unique_words_count)


def _resolve_source(source: str) -> str:
    """Un SOURCE que es un archivo existente se lee; si no, es el texto mismo."""
    path = Path(source)
    try:
        is_file = path.is_file()
    except OSError:
        # Textos largos superan el límite de longitud de nombre de archivo
        return source
    if is_file:
        return read_text_file(path)
    return source


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    """Parsea los argumentos de línea de comandos."""
    parser = argparse.ArgumentParser(
        prog="word-count",
        description="Cuenta palabras y muestra un índice de palabras únicas",
        epilog='Ejemplo: word-count "Mary had a little lamb" -d diccionario.txt',
    )

    parser.add_argument(
        "source",
        metavar="SOURCE",
        nargs="?",
        default=None,
        help="Archivo de texto o texto a analizar. Sin SOURCE entra en modo interactivo.",
    )

    parser.add_argument(
        "-i",
        "--index",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Muestra el índice de palabras únicas (por defecto: sí)",
    )

    parser.add_argument(
        "-d",
        "--dictionary",
        help="Archivo con las palabras conocidas, una por línea",
    )

    parser.add_argument(
        "-s",
        "--stopWords",
        dest="stop_words",
        help="Archivo con las palabras a ignorar, una por línea "
        "(por defecto: lista incluida)",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Muestra la bitácora de procesamiento en stderr",
    )

    return parser.parse_args(argv)


if __name__ == "__main__":
    main()
