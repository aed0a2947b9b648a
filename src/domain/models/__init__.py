"""
Modelos de dominio del proyecto katas.

Los modelos son dataclasses inmutables (frozen=True) o enumeraciones
cerradas, sin dependencias externas.

Uso:
    from src.domain.models import Page, MenuOperation, WordCount
"""

from src.domain.models.align import Align
from src.domain.models.menu_operation import MenuOperation
from src.domain.models.page import RECORD_NUMBER_LABEL, CsvLine, Page
from src.domain.models.word_count import UNKNOWN_MARK, WordCount

__all__ = [
    "Align",
    "CsvLine",
    "MenuOperation",
    "Page",
    "RECORD_NUMBER_LABEL",
    "UNKNOWN_MARK",
    "WordCount",
]
