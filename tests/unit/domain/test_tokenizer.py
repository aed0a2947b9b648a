"""
Tests para src.domain.shared.tokenizer
"""

import pytest

from src.domain.shared.tokenizer import filter_stop_words, tokenize


class TestTokenize:
    """Una palabra = secuencia maximal de letras y guiones."""

    @pytest.mark.parametrize(
        "text, number_of_words",
        [
            ("", 0),
            (" ", 0),
            ("HelloWorld", 1),
            ("Hello World", 2),
            ("Hello-World", 1),
            ("Mary had a little lamb", 5),
        ],
    )
    def test_cantidad_de_palabras(self, text, number_of_words):
        assert len(list(tokenize(text))) == number_of_words

    def test_digitos_y_puntuacion_separan(self):
        assert list(tokenize("abc1def,ghi.jkl")) == ["abc", "def", "ghi", "jkl"]

    def test_conserva_mayusculas_y_orden(self):
        assert list(tokenize("Mary mary MARY")) == ["Mary", "mary", "MARY"]

    def test_letras_no_ascii_separan(self):
        assert list(tokenize("año")) == ["a", "o"]

    def test_none_es_texto_vacio(self):
        assert list(tokenize(None)) == []

    def test_se_puede_recorrer_otra_vez(self):
        assert list(tokenize("a b")) == list(tokenize("a b"))

    def test_patron_personalizado(self):
        assert list(tokenize("a1 b2", pattern=r"[a-z0-9]+")) == ["a1", "b2"]


class TestFilterStopWords:
    @pytest.mark.parametrize(
        "text, stop_words, number_of_words",
        [
            ("", set(), 0),
            ("", {"had", "a"}, 0),
            ("Mary had a little lamb", {"had", "a"}, 3),
            ("Mary had a little lamb", set(), 5),
        ],
    )
    def test_cantidad_de_palabras(self, text, stop_words, number_of_words):
        assert len(list(filter_stop_words(tokenize(text), stop_words))) == number_of_words

    def test_conserva_el_orden(self):
        words = filter_stop_words(["the", "cat", "on", "the", "mat"], {"the", "on"})
        assert list(words) == ["cat", "mat"]

    def test_comparacion_sensible_a_mayusculas(self):
        assert list(filter_stop_words(["The", "the"], {"the"})) == ["The"]
