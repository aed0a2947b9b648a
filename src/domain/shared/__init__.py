"""
Utilidades compartidas del dominio.

Estas funciones no dependen de ninguna librería externa ni de los
adaptadores. Solo operan sobre tipos nativos de Python.

Uso:
    from src.domain.shared.tokenizer import tokenize, filter_stop_words
    from src.domain.shared.text_style import bold, strip_style
"""
