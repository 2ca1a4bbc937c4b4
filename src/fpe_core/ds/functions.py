"""
src/fpe_core/ds/functions.py
Contratos de las funciones de orden superior que reciben los combinadores.
"""
from typing import Callable, Protocol, TypeVar

T = TypeVar('T')
U = TypeVar('U')

T_contra = TypeVar('T_contra', contravariant=True)
U_contra = TypeVar('U_contra', contravariant=True)
V_co = TypeVar('V_co', covariant=True)


class CombiningFunction(Protocol[T_contra, U_contra, V_co]):
    """f(a, b) -> c. Usada por reduce, scan, fold y zip_with."""
    def __call__(self, a: T_contra, b: U_contra) -> V_co: ...


# Aliases de uso común
Mapper = Callable[[T], U]
Predicate = Callable[[T], bool]
