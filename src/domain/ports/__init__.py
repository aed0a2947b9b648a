"""
Puertos (interfaces) del dominio.

Los puertos definen QUÉ necesita el dominio, sin decir CÓMO se implementa.
Cada puerto tiene uno o más adaptadores que lo implementan.

Uso:
    from src.domain.ports import LineSource, ProcessLogger, WordListLoader
"""

from src.domain.ports.line_source import LineSource
from src.domain.ports.process_logger import ProcessLogger
from src.domain.ports.word_list_loader import WordListLoader

__all__ = [
    "LineSource",
    "ProcessLogger",
    "WordListLoader",
]
