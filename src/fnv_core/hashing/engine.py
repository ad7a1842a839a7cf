"""
src/fnv_core/hashing/engine.py
Motor FNV-1a Multi-Ancho v1.0.
Integra:
- Anchos nativos (32/64) con aritmética de wrap-around sobre un solo entero.
- Anchos simulados (128/256/512/1024) sobre arrays de limbs de 32 bits.
- Fachada de streaming con la forma de hashlib (update/digest/hexdigest/copy).
"""
from typing import Any, Dict, List, Union
from .invariants import (
    Width, NATIVE_PARAMS, PRIME_TABLE, OFFSET_BASIS_TABLE, limb_count,
)
from .limbs import xor_byte, multiply_by_prime, limbs_to_bytes
from .utils import display_hex

State = Union[int, List[int]]


def _as_octets(data: Any) -> memoryview:
    """Vista de bytes sobre cualquier objeto con buffer protocol."""
    if isinstance(data, str):
        raise TypeError("Las cadenas Unicode deben codificarse antes de hashear.")
    try:
        return memoryview(data).cast('B')
    except TypeError:
        raise TypeError(f"Se esperaba un objeto bytes-like, se recibió {type(data).__name__}") from None


# =============================================================================
# ANCHOS NATIVOS
# =============================================================================

class NativeHasher:
    """FNV-1a sobre un solo entero de 32 o 64 bits."""
    __slots__ = ('width', 'digest_size', '_basis', '_prime', '_mask')

    def __init__(self, width: int):
        if not isinstance(width, int) or width not in NATIVE_PARAMS:
            raise ValueError(f"Ancho nativo no soportado: {width}")
        self.width = Width(width)
        self.digest_size = width // 8
        self._basis, self._prime, self._mask = NATIVE_PARAMS[width]

    def initial_state(self) -> int:
        return self._basis

    def absorb(self, state: int, data: Any) -> int:
        prime, mask = self._prime, self._mask
        for octet in _as_octets(data):
            state = ((state ^ octet) * prime) & mask
        return state

    def finalize(self, state: int) -> bytes:
        return state.to_bytes(self.digest_size, 'little')

    def hash(self, data: Any) -> bytes:
        return self.finalize(self.absorb(self.initial_state(), data))

    def __repr__(self):
        return f"<NativeHasher FNV1a-{int(self.width)}>"


# =============================================================================
# ANCHOS SIMULADOS (WideHasher)
# =============================================================================

class WideHasher:
    """
    FNV-1a de N bits sobre un array de N/32 limbs.
    Por cada octeto: XOR en el limb 0 y multiplicación dispersa por el primo.
    """
    __slots__ = ('width', 'digest_size', 'limb_count', '_basis', '_prime')

    def __init__(self, width: int):
        if not isinstance(width, int) or width not in PRIME_TABLE:
            raise ValueError(f"Ancho simulado no soportado: {width}")
        self.width = Width(width)
        self.digest_size = width // 8
        self.limb_count = limb_count(width)
        self._basis = OFFSET_BASIS_TABLE[width]
        self._prime = PRIME_TABLE[width]

    def initial_state(self) -> List[int]:
        # Copia privada: la tabla global es de solo lectura
        return list(self._basis)

    def absorb(self, state: List[int], data: Any) -> List[int]:
        prime = self._prime
        for octet in _as_octets(data):
            xor_byte(state, octet)
            multiply_by_prime(state, prime)
        return state

    def finalize(self, state: List[int]) -> bytes:
        return limbs_to_bytes(state)

    def hash(self, data: Any) -> bytes:
        return self.finalize(self.absorb(self.initial_state(), data))

    def __repr__(self):
        return f"<WideHasher FNV1a-{int(self.width)} limbs={self.limb_count}>"


_HASHERS: Dict[int, Union[NativeHasher, WideHasher]] = {}


def get_hasher(width: int) -> Union[NativeHasher, WideHasher]:
    """Hasher (sin estado) del ancho pedido. Inicialización Lazy y cacheada."""
    if isinstance(width, bool) or not isinstance(width, int):
        raise TypeError(f"El ancho debe ser un entero, se recibió {type(width).__name__}")
    try:
        key = Width(width)
    except ValueError:
        supported = ", ".join(str(int(w)) for w in Width)
        raise ValueError(f"Ancho FNV-1a no soportado: {width} (soportados: {supported})") from None

    if key not in _HASHERS:
        _HASHERS[key] = NativeHasher(key) if key in NATIVE_PARAMS else WideHasher(key)
    return _HASHERS[key]


# =============================================================================
# SUPERFICIE PROGRAMÁTICA (Digest Little Endian)
# =============================================================================

def fnv1a_32(data: Any) -> bytes:
    return get_hasher(Width.W32).hash(data)

def fnv1a_64(data: Any) -> bytes:
    return get_hasher(Width.W64).hash(data)

def fnv1a_128(data: Any) -> bytes:
    return get_hasher(Width.W128).hash(data)

def fnv1a_256(data: Any) -> bytes:
    return get_hasher(Width.W256).hash(data)

def fnv1a_512(data: Any) -> bytes:
    return get_hasher(Width.W512).hash(data)

def fnv1a_1024(data: Any) -> bytes:
    return get_hasher(Width.W1024).hash(data)


# =============================================================================
# FACHADA STREAMING
# =============================================================================

class FNV1a:
    """
    Objeto incremental al estilo hashlib.
    digest() devuelve los bytes Little Endian (formato de intercambio);
    hexdigest() devuelve la representación Big Endian convencional.
    """
    __slots__ = ('_hasher', '_state')

    block_size = 1

    def __init__(self, width: int = Width.W128, data: Any = b""):
        self._hasher = get_hasher(width)
        self._state: State = self._hasher.initial_state()
        self.update(data)

    @property
    def name(self) -> str:
        return f"fnv1a_{int(self._hasher.width)}"

    @property
    def width(self) -> int:
        return int(self._hasher.width)

    @property
    def digest_size(self) -> int:
        return self._hasher.digest_size

    def update(self, data: Any) -> None:
        self._state = self._hasher.absorb(self._state, data)

    def digest(self) -> bytes:
        # finalize no muta el estado: se puede seguir alimentando después
        return self._hasher.finalize(self._state)

    def hexdigest(self) -> str:
        return display_hex(self.digest())

    def copy(self) -> 'FNV1a':
        clone = FNV1a.__new__(FNV1a)
        clone._hasher = self._hasher
        clone._state = list(self._state) if isinstance(self._state, list) else self._state
        return clone

    def __repr__(self):
        return f"<FNV1a {self.name} digest_size={self.digest_size}>"


def new(width: int = Width.W128, data: Any = b"") -> FNV1a:
    return FNV1a(width, data)
