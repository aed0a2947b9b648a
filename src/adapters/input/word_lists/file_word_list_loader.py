"""
Adaptador de entrada: Listas de palabras desde archivos de texto.

Formato: una palabra por línea. Las líneas vacías se ignoran y no se
recortan espacios dentro de la línea (la comparación es exacta).

La lista de stop words por defecto (stopwords.txt) vive junto a este
módulo y se instala como package data.
"""

from pathlib import Path

from src.domain.exceptions import SourceReadError
from src.domain.ports.process_logger import ProcessLogger
from src.domain.ports.word_list_loader import WordListLoader

DEFAULT_STOP_WORDS_PATH = Path(__file__).with_name("stopwords.txt")


class FileWordListLoader(WordListLoader):
    """Carga diccionarios y listas de stop words desde disco."""

    def __init__(self, logger: ProcessLogger, encoding: str = "utf-8") -> None:
        self._logger = logger
        self._encoding = encoding

    def load(self, path: Path) -> frozenset[str]:
        path = Path(path)
        try:
            lines = path.read_text(encoding=self._encoding).splitlines()
        except (OSError, UnicodeDecodeError) as e:
            raise SourceReadError(str(path), str(e)) from e

        words = frozenset(line for line in lines if line)
        self._logger.log_word_list_loaded(path.name, len(words))
        return words

    def load_default_stop_words(self) -> frozenset[str]:
        return self.load(DEFAULT_STOP_WORDS_PATH)
