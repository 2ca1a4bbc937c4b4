"""
src/fpe_core/ds/list.py
Estructura de Datos Persistente: Lista Enlazada (Cons List).
Inmutable, Stack-Safe y con compartición estructural de colas.
"""
from typing import Any, Callable, Generic, Iterable, Iterator, List as PyList, TypeVar, Union

from .. import config
from ..errors import EmptyListError
from ..logger import get_logger

T = TypeVar('T')
U = TypeVar('U')
V = TypeVar('V')

log = get_logger(__name__)


class _Nil:
    """
    Variante explícita de lista vacía.
    Una celda con head None NO es Nil: ConsList.of(None) tiene longitud 1.
    """
    __slots__ = ()
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __reduce__(self):
        return (_Nil, ())

    def __repr__(self):
        return config.REPR_EMPTY


NIL = _Nil()


class Cell:
    """Celda Cons (head, tail). Nunca se reasigna tras su construcción."""
    __slots__ = ('head', 'tail')

    def __init__(self, head: Any, tail: Union['Cell', _Nil]):
        self.head = head
        self.tail = tail


class ConsList(Generic[T]):
    """
    Lista Inmutable Persistente.
    Handle ligero sobre una cadena de Cells que termina siempre en NIL.
    Las operaciones funcionales delegan en ds.combinators y devuelven
    listas nuevas, lo que permite encadenarlas:
        lst.zip_with(add, lst).map(square).filter(even).reduce(add)
    """
    __slots__ = ('contents',)

    def __init__(self, contents: Union[Cell, _Nil] = NIL):
        self.contents = contents

    # --- CONSTRUCTORES ---

    @staticmethod
    def nil() -> 'ConsList[Any]':
        return ConsList(NIL)

    @staticmethod
    def cons(head: T, tail: 'ConsList[T]') -> 'ConsList[T]':
        """O(1) Prepend. La cola se comparte, no se copia."""
        if not isinstance(tail, ConsList):
            raise TypeError(f"Tail must be ConsList, got {type(tail)}")
        return ConsList(Cell(head, tail.contents))

    @staticmethod
    def from_python(items: Iterable[T]) -> 'ConsList[T]':
        """O(N). Construye desde cualquier iterable preservando el orden."""
        if not isinstance(items, (list, tuple)):
            items = list(items)
        acc: Union[Cell, _Nil] = NIL
        # Iteración inversa para construir O(N) sin recursión
        for item in reversed(items):
            acc = Cell(item, acc)
        return ConsList(acc)

    @staticmethod
    def of(*items: T) -> 'ConsList[T]':
        """ConsList.of(1, 2, 3) -> [1, 2, 3]"""
        return ConsList.from_python(items)

    # --- INSPECCIÓN ---

    @property
    def is_empty(self) -> bool:
        return self.contents is NIL

    @property
    def head(self) -> T:
        if self.is_empty:
            log.debug("head() requested on empty list")
            raise EmptyListError("head")
        return self.contents.head

    @property
    def tail(self) -> 'ConsList[T]':
        """Resto de la lista. Nil si está vacía o tiene un solo elemento."""
        if self.is_empty:
            return self
        return ConsList(self.contents.tail)

    def prepend(self, item: T) -> 'ConsList[T]':
        return ConsList.cons(item, self)

    def to_python(self) -> PyList[T]:
        return list(self)

    def to_display_string(self, style: str = config.DEFAULT_DISPLAY_STYLE) -> str:
        return to_display_string(self, style)

    # --- FUNCTIONAL API (High Order Functions) ---
    # Importación local: combinators importa ConsList a nivel de módulo.

    def for_each(self, fn: Callable[[T], Any]) -> None:
        from .combinators import for_each
        for_each(fn, self)

    def map(self, fn: Callable[[T], U]) -> 'ConsList[U]':
        from .combinators import map_list
        return map_list(fn, self)

    def filter(self, predicate: Callable[[T], bool]) -> 'ConsList[T]':
        from .combinators import filter_list
        return filter_list(predicate, self)

    def reduce(self, fn: Callable[[T, T], T]) -> T:
        """Right fold sin elemento identidad. EmptyListError sobre Nil."""
        from .combinators import reduce_list
        return reduce_list(fn, self)

    def fold(self, fn: Callable[[U, T], U], initial: U) -> U:
        """Left fold con valor inicial explícito."""
        from .combinators import fold
        return fold(fn, initial, self)

    def any(self, predicate: Callable[[T], bool]) -> bool:
        from .combinators import any_of
        return any_of(predicate, self)

    def all(self, predicate: Callable[[T], bool]) -> bool:
        from .combinators import all_of
        return all_of(predicate, self)

    def zip_with(self, fn: Callable[[T, U], V], other: 'ConsList[U]') -> 'ConsList[V]':
        from .combinators import zip_with
        return zip_with(fn, self, other)

    def scan(self, fn: Callable[[T, T], T]) -> 'ConsList[T]':
        from .combinators import scan
        return scan(fn, self)

    def take(self, n: int) -> 'ConsList[T]':
        from .combinators import take
        return take(n, self)

    def drop(self, n: int) -> 'ConsList[T]':
        from .combinators import drop
        return drop(n, self)

    def take_while(self, predicate: Callable[[T], bool]) -> 'ConsList[T]':
        from .combinators import take_while
        return take_while(predicate, self)

    def drop_while(self, predicate: Callable[[T], bool]) -> 'ConsList[T]':
        from .combinators import drop_while
        return drop_while(predicate, self)

    # --- PYTHON MAGIC METHODS ---

    def __iter__(self) -> Iterator[T]:
        """Iterador seguro O(N)."""
        curr = self.contents
        while curr is not NIL:
            yield curr.head
            curr = curr.tail

    def __len__(self) -> int:
        """O(N) Iterativo. Safe for 1M+ items."""
        count = 0
        curr = self.contents
        while curr is not NIL:
            count += 1
            curr = curr.tail
        return count

    def __bool__(self) -> bool:
        return not self.is_empty

    def __repr__(self):
        """Impresión segura. Trunca si es muy larga."""
        if self.is_empty: return config.REPR_EMPTY

        items = []
        count = 0
        curr = self.contents
        while curr is not NIL and count < config.REPR_LIMIT:
            items.append(repr(curr.head))
            curr = curr.tail
            count += 1

        if curr is not NIL:
            items.append("...")

        return f"List[{', '.join(items)}]"

    def __str__(self):
        return to_display_string(self, config.STYLE_BRACKET)

    def __eq__(self, other):
        """Igualdad estructural O(N). Colas compartidas cortan la comparación."""
        if not isinstance(other, ConsList): return False
        a, b = self.contents, other.contents
        while a is not NIL and b is not NIL:
            if a is b:
                return True
            if a.head != b.head:
                return False
            a, b = a.tail, b.tail
        return a is b

    def __hash__(self):
        return hash(tuple(self))


def to_display_string(lst: ConsList[Any], style: str = config.DEFAULT_DISPLAY_STYLE) -> str:
    """
    Representación textual completa (sin truncar).
    - arrow:   "1 -> 2 -> 3"
    - bracket: "[1, 2, 3]"
    Nil se muestra como "[]" en ambos estilos.
    """
    if style not in config.DISPLAY_STYLES:
        raise ValueError(f"Unknown display style {style!r}, expected one of {config.DISPLAY_STYLES}")
    if lst.is_empty:
        return config.EMPTY_DISPLAY

    parts = [str(item) for item in lst]
    if style == config.STYLE_ARROW:
        return config.ARROW_SEPARATOR.join(parts)
    return "[" + config.BRACKET_SEPARATOR.join(parts) + "]"
