"""
src/fpe_core/ds/combinators.py
Combinadores Funcionales sobre ConsList.

Todas las funciones son puras e ITERATIVAS: recolectan en una lista Python
temporal y reconstruyen con ConsList.from_python, sin riesgo de Stack Overflow.
Sobre Nil devuelven Nil (o el valor base de any/all) sin invocar la función.
"""
from typing import Any, Callable, TypeVar

from ..errors import EmptyListError
from ..logger import get_logger
from .functions import CombiningFunction, Mapper, Predicate
from .list import ConsList

T = TypeVar('T')
U = TypeVar('U')
V = TypeVar('V')

log = get_logger(__name__)


def prepend(item: T, lst: ConsList[T]) -> ConsList[T]:
    """O(1). La lista original no se altera."""
    return ConsList.cons(item, lst)


def for_each(fn: Callable[[T], Any], lst: ConsList[T]) -> None:
    for item in lst:
        fn(item)


def map_list(fn: Mapper[T, U], lst: ConsList[T]) -> ConsList[U]:
    """[fn(x) for x in lst], conservando longitud y orden."""
    if lst.is_empty: return ConsList.nil()

    temp_items = []
    for item in lst:
        temp_items.append(fn(item))
    return ConsList.from_python(temp_items)


def filter_list(predicate: Predicate[T], lst: ConsList[T]) -> ConsList[T]:
    """Subsecuencia de elementos que cumplen predicate, en orden."""
    if lst.is_empty: return ConsList.nil()

    temp_items = []
    for item in lst:
        if predicate(item):
            temp_items.append(item)
    return ConsList.from_python(temp_items)


def reduce_list(fn: CombiningFunction[T, T, T], lst: ConsList[T]) -> T:
    """
    Right fold sin identidad:
        fn(x1, fn(x2, ... fn(xn-1, xn)))
    Un solo elemento se devuelve tal cual. Nil -> EmptyListError.
    """
    if lst.is_empty:
        log.debug("reduce() requested on empty list")
        raise EmptyListError("reduce")

    items = lst.to_python()
    acc = items[-1]
    for item in reversed(items[:-1]):
        acc = fn(item, acc)
    return acc


def fold(fn: CombiningFunction[U, T, U], initial: U, lst: ConsList[T]) -> U:
    """Reduce la lista a un valor acumulado (Left Fold)."""
    acc = initial
    for item in lst:
        acc = fn(acc, item)
    return acc


def any_of(predicate: Predicate[T], lst: ConsList[T]) -> bool:
    """False sobre Nil. Corta en el primer elemento que cumple."""
    for item in lst:
        if predicate(item):
            return True
    return False


def all_of(predicate: Predicate[T], lst: ConsList[T]) -> bool:
    """True sobre Nil. Corta en el primer elemento que falla."""
    for item in lst:
        if not predicate(item):
            return False
    return True


def zip_with(fn: CombiningFunction[T, U, V], first: ConsList[T], second: ConsList[U]) -> ConsList[V]:
    """fn(first[i], second[i]) hasta la longitud de la lista más corta."""
    if first.is_empty or second.is_empty: return ConsList.nil()

    temp_items = []
    for a, b in zip(first, second):
        temp_items.append(fn(a, b))
    return ConsList.from_python(temp_items)


def scan(fn: CombiningFunction[T, T, T], lst: ConsList[T]) -> ConsList[T]:
    """
    Acumulación progresiva de izquierda a derecha:
        out[0] = x0, out[i] = fn(out[i-1], xi)
    scan(+, [1, 2, 3, 4]) -> [1, 3, 6, 10]
    """
    if lst.is_empty: return ConsList.nil()

    items = iter(lst)
    acc = next(items)
    temp_items = [acc]
    for item in items:
        acc = fn(acc, item)
        temp_items.append(acc)
    return ConsList.from_python(temp_items)


def take(n: int, lst: ConsList[T]) -> ConsList[T]:
    """Primeros min(n, len) elementos. n negativo se trata como 0."""
    if n < 0:
        log.debug("take(%d) clamped to 0", n)
        n = 0

    temp_items = []
    curr = lst
    while not curr.is_empty and len(temp_items) < n:
        temp_items.append(curr.head)
        curr = curr.tail

    # Se tomó la lista entera: compartimos la original
    if curr.is_empty:
        return lst
    return ConsList.from_python(temp_items)


def drop(n: int, lst: ConsList[T]) -> ConsList[T]:
    """Sufijo tras saltar min(n, len) elementos. Comparte celdas con lst."""
    if n < 0:
        log.debug("drop(%d) clamped to 0", n)
        n = 0

    curr = lst
    while n > 0 and not curr.is_empty:
        curr = curr.tail
        n -= 1
    return curr


def take_while(predicate: Predicate[T], lst: ConsList[T]) -> ConsList[T]:
    """Prefijo más largo cuyos elementos cumplen predicate."""
    temp_items = []
    curr = lst
    while not curr.is_empty and predicate(curr.head):
        temp_items.append(curr.head)
        curr = curr.tail

    if curr.is_empty:
        return lst
    return ConsList.from_python(temp_items)


def drop_while(predicate: Predicate[T], lst: ConsList[T]) -> ConsList[T]:
    """Resto tras eliminar el prefijo de take_while. Comparte celdas con lst."""
    curr = lst
    while not curr.is_empty and predicate(curr.head):
        curr = curr.tail
    return curr
