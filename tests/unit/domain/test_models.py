"""
Tests para los modelos de dominio.

Verifican que las validaciones, propiedades derivadas e inmutabilidad
funcionan correctamente. Estos tests son la "especificación ejecutable"
del modelo de datos.
"""

import pytest

from src.domain.models import RECORD_NUMBER_LABEL, Align, MenuOperation, Page


class TestPage:
    """Pruebas para el modelo Page."""

    def _make_page(self, lines=None, header=("Name", "Age")) -> Page:
        if lines is None:
            lines = (("Peter", "42"), ("Stephanie", "7"))
        return Page(page_number=1, header=header, lines=lines)

    def test_crear_basico(self):
        page = self._make_page()
        assert page.column_count == 2
        assert page.line_count == 2
        assert page[1] == ("Stephanie", "7")

    def test_ancho_es_el_maximo_entre_encabezado_y_datos(self):
        page = self._make_page()
        assert page.column_width(0) == len("Stephanie")
        assert page.column_width(1) == len("Age")

    def test_ancho_sin_encabezado(self):
        page = self._make_page()
        assert page.column_width(1, include_header=False) == 2

    def test_pagina_vacia_usa_el_ancho_del_encabezado(self):
        page = self._make_page(lines=())
        assert page.line_count == 0
        assert page.column_width(0) == len("Name")
        assert page.column_width(0, include_header=False) == 0

    def test_fila_con_celdas_de_menos_lanza_error(self):
        with pytest.raises(ValueError, match="celdas"):
            self._make_page(lines=(("Peter",),))

    def test_numero_de_pagina_cero_lanza_error(self):
        with pytest.raises(ValueError, match="fuera de rango"):
            Page(page_number=0, header=("A",))

    def test_es_inmutable(self):
        page = self._make_page()
        with pytest.raises(AttributeError):
            page.page_number = 2  # type: ignore

    def test_etiqueta_de_numero_de_registro(self):
        assert RECORD_NUMBER_LABEL == "No."


class TestMenuOperation:
    """Pruebas para la enumeración MenuOperation."""

    def test_orden_fijo(self):
        assert list(MenuOperation) == [
            MenuOperation.NEXT_PAGE,
            MenuOperation.PREVIOUS_PAGE,
            MenuOperation.FIRST_PAGE,
            MenuOperation.LAST_PAGE,
            MenuOperation.JUMP_TO_PAGE,
            MenuOperation.EXIT,
        ]
        assert [op.position for op in MenuOperation] == [0, 1, 2, 3, 4, 5]

    @pytest.mark.parametrize(
        "operation, label",
        [
            (MenuOperation.NEXT_PAGE, "(n)ext page"),
            (MenuOperation.PREVIOUS_PAGE, "(p)revious page"),
            (MenuOperation.FIRST_PAGE, "(f)irst page"),
            (MenuOperation.LAST_PAGE, "(l)ast page"),
            (MenuOperation.JUMP_TO_PAGE, "(j$)ump to page"),
            (MenuOperation.EXIT, "e(x)it"),
        ],
    )
    def test_etiquetas_sin_estilo(self, operation, label):
        assert operation.label(styled=False) == label

    def test_etiqueta_con_negrita_en_la_tecla(self):
        assert MenuOperation.EXIT.label() == "e(\u001b[1mx\u001b[0m)it"

    @pytest.mark.parametrize(
        "operation, user_input",
        [
            (MenuOperation.NEXT_PAGE, "n"),
            (MenuOperation.PREVIOUS_PAGE, "p"),
            (MenuOperation.FIRST_PAGE, "f"),
            (MenuOperation.LAST_PAGE, "l"),
            (MenuOperation.JUMP_TO_PAGE, "j12"),
            (MenuOperation.EXIT, "x"),
        ],
    )
    def test_coincide_con_la_linea_completa(self, operation, user_input):
        assert operation.match(user_input) is not None

    @pytest.mark.parametrize("user_input", ["N", "next", " n", "n ", "nn", ""])
    def test_no_coincide_con_variantes(self, user_input):
        assert MenuOperation.NEXT_PAGE.match(user_input) is None

    @pytest.mark.parametrize("user_input", ["j", "jx", "j 3", "j-1", "3"])
    def test_salto_requiere_digitos(self, user_input):
        assert MenuOperation.JUMP_TO_PAGE.match(user_input) is None

    @pytest.mark.parametrize("user_input", ["j\u0663", "j\uff13", "j1\u0663"])
    def test_salto_solo_acepta_digitos_ascii(self, user_input):
        assert MenuOperation.JUMP_TO_PAGE.match(user_input) is None

    def test_salto_captura_el_numero(self):
        match = MenuOperation.JUMP_TO_PAGE.match("j042")
        assert MenuOperation.jump_target(match) == 42


class TestAlign:
    def test_tres_alineaciones(self):
        assert {align.name for align in Align} == {"LEFT", "RIGHT", "CENTER"}
