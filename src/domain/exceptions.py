"""
Excepciones de dominio del proyecto katas (csv-viewer y word-count).

¿Por qué excepciones propias en lugar de usar ValueError/RuntimeError?
Porque permiten que el CLI distinga entre "el archivo no se puede leer"
y "se acabó la entrada del usuario" y muestre un diagnóstico claro en
cada caso, sin capturar errores de programación por accidente.

Jerarquía:
    KataBaseError
    ├── SourceReadError         → No se pudo leer un archivo (también es OSError)
    ├── InvalidSourceError      → El archivo no tiene el formato esperado
    └── InputExhaustedError     → Se terminó la entrada durante la navegación
"""


class KataBaseError(Exception):
    """Excepción base del proyecto. Todas las demás heredan de esta.

    Los puntos de entrada del CLI capturan solo esta clase: cualquier
    otra excepción es un bug y debe mostrar su traceback completo.
    """


class SourceReadError(KataBaseError, OSError):
    """Se lanza cuando un archivo de entrada no se puede leer.

    Aplica al CSV, al texto a contar, al diccionario y a la lista de
    stop words. Hereda también de OSError para que el código que espera
    un error de E/S estándar lo siga capturando.

    Esto puede pasar porque:
    - La ruta no existe.
    - No hay permisos de lectura.
    - La ruta es un directorio.
    - El contenido no es texto UTF-8 válido.
    """

    def __init__(self, archivo: str, causa: str):
        self.archivo = archivo
        self.causa = causa
        super().__init__(f"No se pudo leer '{archivo}': {causa}")


class InvalidSourceError(KataBaseError):
    """Se lanza cuando un archivo se leyó pero no tiene el formato esperado.

    Ejemplo: un CSV completamente vacío, sin siquiera línea de encabezado.
    """

    def __init__(self, archivo: str, detalle: str):
        self.archivo = archivo
        self.detalle = detalle
        super().__init__(f"Formato inválido en '{archivo}' — {detalle}")


class InputExhaustedError(KataBaseError):
    """Se lanza cuando la entrada estándar se cierra dentro del ciclo de
    navegación del visor.

    La única salida ordenada del visor es el comando de salir (x); un
    fin de entrada inesperado es fatal.
    """

    def __init__(self, page_number: int):
        self.page_number = page_number
        super().__init__(
            f"La entrada terminó sin elegir salir (página actual: {page_number})"
        )
