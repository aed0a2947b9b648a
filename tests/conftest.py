"""
Fixtures compartidas por los tests unitarios.

RecordingLogger implementa ProcessLogger acumulando los eventos en
memoria, para poder hacer asserts sobre la bitácora sin imprimir nada.
"""

from pathlib import Path

import pytest

from src.adapters.input.line_sources.file_line_source import FileLineSource
from src.domain.ports.process_logger import ProcessLogger
from src.domain.services.csv_source import CsvSource


class RecordingLogger(ProcessLogger):
    """Logger de prueba: guarda cada evento como una tupla (nombre, *args)."""

    def __init__(self) -> None:
        self.events: list[tuple] = []

    def names(self) -> list[str]:
        return [event[0] for event in self.events]

    def log_source_opened(self, name: str, line_count: int, column_count: int) -> None:
        self.events.append(("source_opened", name, line_count, column_count))

    def log_page_loaded(self, page_number: int, line_count: int) -> None:
        self.events.append(("page_loaded", page_number, line_count))

    def log_row_normalized(self, line_number: int, found: int, expected: int) -> None:
        self.events.append(("row_normalized", line_number, found, expected))

    def log_command_ignored(self, user_input: str) -> None:
        self.events.append(("command_ignored", user_input))

    def log_jump_ignored(self, target: int, page_count: int) -> None:
        self.events.append(("jump_ignored", target, page_count))

    def log_word_list_loaded(self, source: str, word_count: int) -> None:
        self.events.append(("word_list_loaded", source, word_count))

    def log_text_analyzed(self, words_count: int, unique_words_count: int) -> None:
        self.events.append(("text_analyzed", words_count, unique_words_count))

    def get_summary(self) -> dict:
        return {"eventos": len(self.events)}


@pytest.fixture
def logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def write_csv(tmp_path: Path):
    """Crea un CSV en tmp_path a partir de una lista de líneas."""

    def _write(lines: list[str], name: str = "datos.csv") -> Path:
        path = tmp_path / name
        path.write_text("".join(line + "\n" for line in lines), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def people_csv(write_csv) -> Path:
    """CSV de 7 personas separado por ';' (3 páginas de 3 filas)."""
    return write_csv(
        [
            "Name;Age;City",
            "Peter;42;New York",
            "Paul;57;London",
            "Mary;35;Munich",
            "Jaques;66;Paris",
            "Yuri;23;Moscow",
            "Stephanie;47;Stockholm",
            "Nadia;29;Madrid",
        ],
        name="people.csv",
    )


@pytest.fixture
def people_source(people_csv: Path, logger: RecordingLogger) -> CsvSource:
    return CsvSource(FileLineSource(people_csv), logger, delimiter=";", default_lines_per_page=3)
