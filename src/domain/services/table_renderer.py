"""
Servicio de dominio: Dibujo de una Page como tabla ASCII.

Layout de una pantalla:

    Page 2 of 5 in clientes.csv

      Nombre  |  Ciudad
    ----------+---------
     Ana      | Lima
     Beto     | Quito

    (n)ext page, (p)revious page, ...

- Cada celda lleva un borde de espacios a ambos lados.
- El encabezado va centrado y en negrita; los datos, a la izquierda.
- Los anchos vienen de la Page (calculados solo con sus filas).
"""

from collections.abc import Iterable

from src.domain.models.align import Align
from src.domain.models.menu_operation import MenuOperation
from src.domain.models.page import Page
from src.domain.shared.text_style import bold

COLUMN_SEPARATOR = "|"
SEPARATOR_LINE_CROSS = "+"
SEPARATOR_LINE_FILL = "-"
MENU_SEPARATOR = ", "


class AsciiTableRenderer:
    """Convierte páginas del CSV en texto listo para imprimir."""

    def __init__(self, border_width: int = 1, styled: bool = True) -> None:
        """
        Args:
            border_width: Espacios a cada lado del texto de una celda.
            styled: Si False, no se emiten secuencias de negrita. Útil al
                    redirigir la salida a un archivo.
        """
        if border_width < 0:
            raise ValueError(f"El borde no puede ser negativo: {border_width}")
        self._border = " " * border_width
        self._double_border_width = border_width * 2
        self._styled = styled

    def cell(self, text: str, column_width: int, align: Align = Align.LEFT) -> str:
        """Formatea una celda con borde y relleno hasta el ancho de la columna.

        Ejemplos (borde 1, ancho 5):
            LEFT:   " ab    "
            RIGHT:  "    ab "
            CENTER: "  ab   "  (el espacio impar va a la derecha)
        """
        with_border = self._border + text + self._border
        total_width = column_width + self._double_border_width

        if align is Align.RIGHT:
            return with_border.rjust(total_width)
        if align is Align.LEFT:
            return with_border.ljust(total_width)

        padding = max(total_width - len(with_border), 0)
        left_padding = " " * (padding // 2)
        right_padding = " " * (padding - padding // 2)
        return left_padding + with_border + right_padding

    def title_line(self, page: Page, page_count: int, source_name: str) -> str:
        return f"Page {bold(str(page.page_number), self._styled)} of {page_count} in {source_name}"

    def header_line(self, page: Page) -> str:
        return COLUMN_SEPARATOR.join(
            bold(self.cell(name, page.column_width(column), Align.CENTER), self._styled)
            for column, name in enumerate(page.header)
        )

    def separator_line(self, page: Page) -> str:
        return SEPARATOR_LINE_CROSS.join(
            SEPARATOR_LINE_FILL * (page.column_width(column) + self._double_border_width)
            for column in range(page.column_count)
        )

    def body(self, page: Page) -> str:
        """Filas de datos, una por línea. Cadena vacía si la página no tiene filas."""
        return "\n".join(
            COLUMN_SEPARATOR.join(
                self.cell(value, page.column_width(column))
                for column, value in enumerate(line)
            )
            for line in page.lines
        )

    def menu_line(self, operations: Iterable[MenuOperation]) -> str:
        """Operaciones ordenadas según su posición fija en el menú."""
        ordered = sorted(operations, key=lambda operation: operation.position)
        return MENU_SEPARATOR.join(operation.label(self._styled) for operation in ordered)

    def render_screen(
        self,
        page: Page,
        page_count: int,
        source_name: str,
        operations: Iterable[MenuOperation],
    ) -> str:
        """Pantalla completa: título, tabla y menú, terminada en salto de línea."""
        return "\n".join(
            [
                self.title_line(page, page_count, source_name),
                "",
                self.header_line(page),
                self.separator_line(page),
                self.body(page),
                "",
                self.menu_line(operations),
            ]
        ) + "\n"
