"""
src/fnv_core/hashing/invariants.py
Tablas de Parámetros FNV-1a v1.0.
Define la geometría de limbs y las constantes por ancho (offset-basis y primos dispersos).
"""
from enum import IntEnum
from typing import Dict, NamedTuple, Tuple

# =============================================================================
# GEOMETRÍA DE LIMBS
# =============================================================================
# Un acumulador de N bits es un array de N/32 dígitos de 32 bits.
# Índice 0 = dígito menos significativo (Little Endian a nivel de limb).
# Los productos intermedios viven en slots de 64 bits (typecode 'Q').

LIMB_BITS = 32
LIMB_BYTES = LIMB_BITS // 8
LIMB_SLOT_TYPECODE = 'Q'

MASK_32 = 0xFFFFFFFF
MASK_64 = 0xFFFFFFFFFFFFFFFF


class Width(IntEnum):
    W32   = 32
    W64   = 64
    W128  = 128
    W256  = 256
    W512  = 512
    W1024 = 1024


NATIVE_WIDTHS = (Width.W32, Width.W64)
WIDE_WIDTHS   = (Width.W128, Width.W256, Width.W512, Width.W1024)

# =============================================================================
# ANCHOS NATIVOS (Un solo entero con wrap-around)
# =============================================================================

FNV_32_OFFSET_BASIS = 0x811C9DC5          # 2166136261
FNV_32_PRIME        = 0x01000193          # 2^24 + 0x193
FNV_64_OFFSET_BASIS = 0xCBF29CE484222325  # 14695981039346656037
FNV_64_PRIME        = 0x00000100000001B3  # 2^40 + 0x1B3

# Ancho -> (offset_basis, primo, máscara)
NATIVE_PARAMS: Dict[int, Tuple[int, int, int]] = {
    Width.W32: (FNV_32_OFFSET_BASIS, FNV_32_PRIME, MASK_32),
    Width.W64: (FNV_64_OFFSET_BASIS, FNV_64_PRIME, MASK_64),
}

# =============================================================================
# PRIMOS DISPERSOS (Anchos simulados)
# =============================================================================
# Todo primo FNV de N >= 128 bits tiene la forma 2^S + P_low, con S = 32*off + shift.
# Multiplicar por él = escalar cada limb por P_low + sumar una copia desplazada
# de los limbs bajos en la posición 'off'.


class PrimeDescriptor(NamedTuple):
    p_low: int
    shift: int
    limb_offset: int

    @property
    def exponent(self) -> int:
        return LIMB_BITS * self.limb_offset + self.shift

    @property
    def value(self) -> int:
        """Primo completo reconstruido: 2^(32*limb_offset + shift) + p_low."""
        return (1 << self.exponent) + self.p_low


PRIME_TABLE: Dict[int, PrimeDescriptor] = {
    Width.W128:  PrimeDescriptor(p_low=0x13B, shift=24, limb_offset=2),   # 2^88  + 0x13B
    Width.W256:  PrimeDescriptor(p_low=0x163, shift=8,  limb_offset=5),   # 2^168 + 0x163
    Width.W512:  PrimeDescriptor(p_low=0x157, shift=24, limb_offset=10),  # 2^344 + 0x157
    Width.W1024: PrimeDescriptor(p_low=0x18D, shift=8,  limb_offset=21),  # 2^680 + 0x18D
}

# =============================================================================
# OFFSET-BASIS (Limbs Little Endian, dato literal)
# =============================================================================

OFFSET_BASIS_TABLE: Dict[int, Tuple[int, ...]] = {
    Width.W128: (
        0x6295C58D, 0x62B82175, 0x07BB0142, 0x6C62272E,
    ),
    Width.W256: (
        0xCAEE0535, 0x1023B4C8, 0x47B6BBB3, 0xC8B15368,
        0xC4E576CC, 0x2D98C384, 0xAAC55036, 0xDD268DBC,
    ),
    Width.W512: (
        0x4AFE9FD9, 0xAC982AAC, 0x5F56E34B, 0x18203641,
        0x42DBE7CE, 0x2EA79BC9, 0x34C192F6, 0xE948F68A,
        0x00000D21, 0x00000000, 0xC9000000, 0xAC87D059,
        0x309990AC, 0xDCA1E50F, 0x171F4416, 0xB86DB0B1,
    ),
    # Limbs 9..20 a cero: es la definición del estándar, no un error.
    Width.W1024: (
        0x71EE90B3, 0xAFF4B16C, 0xC6A93B21, 0x6BDE8CC9,
        0xC005AE55, 0x555F256C, 0x2734510A, 0xEB6E7380,
        0x0004C6D7, 0x00000000, 0x00000000, 0x00000000,
        0x00000000, 0x00000000, 0x00000000, 0x00000000,
        0x00000000, 0x00000000, 0x00000000, 0x00000000,
        0x00000000, 0x9A21D900, 0xDA3674DA, 0x6C3BF34E,
        0x23FDADA1, 0x4B29FC42, 0x591028B7, 0x32E56D5A,
        0x758ECC4D, 0x005F7A76, 0x00000000, 0x00000000,
    ),
}

# =============================================================================
# SEGURIDAD NUMÉRICA
# =============================================================================

def limb_count(width: int) -> int:
    return width // LIMB_BITS


def max_limb_product(descriptor: PrimeDescriptor) -> int:
    """
    Peor caso de un slot de producto tras el paso de carry:
    (2^32-1)*P_low + ((2^32-1) << shift) + acarreo del limb anterior.
    """
    digit = MASK_32
    product = digit * descriptor.p_low + (digit << descriptor.shift)
    # El acarreo entrante nunca supera el propio producto desplazado 32 bits.
    return product + (product >> LIMB_BITS) + 1


MAX_LIMB_PRODUCT = max(max_limb_product(d) for d in PRIME_TABLE.values())
