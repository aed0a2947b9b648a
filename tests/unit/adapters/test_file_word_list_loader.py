"""
Tests para el adaptador FileWordListLoader.
"""

import pytest

from src.adapters.input.text_sources.file_text_reader import read_text_file
from src.adapters.input.word_lists.file_word_list_loader import (
    DEFAULT_STOP_WORDS_PATH,
    FileWordListLoader,
)
from src.domain.exceptions import SourceReadError


class TestFileWordListLoader:
    @pytest.fixture
    def loader(self, logger) -> FileWordListLoader:
        return FileWordListLoader(logger)

    def test_una_palabra_por_linea(self, loader, tmp_path):
        path = tmp_path / "dict.txt"
        path.write_text("Mary\nlamb\n\nlittle\nlamb\n", encoding="utf-8")
        assert loader.load(path) == frozenset({"Mary", "lamb", "little"})

    def test_registra_la_carga(self, loader, logger, tmp_path):
        path = tmp_path / "dict.txt"
        path.write_text("a\nb\n", encoding="utf-8")
        loader.load(path)
        assert logger.events == [("word_list_loaded", "dict.txt", 2)]

    def test_stop_words_por_defecto(self, loader):
        assert DEFAULT_STOP_WORDS_PATH.is_file()
        assert loader.load_default_stop_words() == frozenset({"the", "a", "on", "off"})

    def test_archivo_inexistente(self, loader, tmp_path):
        with pytest.raises(SourceReadError, match="no_existe.txt"):
            loader.load(tmp_path / "no_existe.txt")


class TestReadTextFile:
    def test_lee_el_texto_completo(self, tmp_path):
        path = tmp_path / "texto.txt"
        path.write_text("Mary had\na little lamb", encoding="utf-8")
        assert read_text_file(path) == "Mary had\na little lamb"

    def test_archivo_inexistente(self, tmp_path):
        with pytest.raises(SourceReadError):
            read_text_file(tmp_path / "no_existe.txt")
