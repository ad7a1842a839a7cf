"""
src/fnv_core/hashing/limbs.py
Aritmética de Limbs v1.0.
Multiplicación dispersa por el primo FNV y propagación de acarreos sobre arrays de 32 bits.
"""
from array import array
from typing import List, Sequence
from .invariants import LIMB_BITS, LIMB_BYTES, LIMB_SLOT_TYPECODE, MASK_32, PrimeDescriptor


def xor_byte(digits: List[int], octet: int) -> None:
    """Paso XOR de FNV-1a: solo toca el limb menos significativo."""
    digits[0] ^= octet


def multiply_by_prime(digits: List[int], descriptor: PrimeDescriptor) -> None:
    """
    digits <- digits * (2^S + P_low) mod 2^N, in-place.

    1. Escalado: product[i] = digits[i] * P_low
    2. Inyección cruzada (i >= off): product[i] += digits[i - off] << shift
    3. Acarreo izquierda -> derecha: product[i] += product[i-1] >> 32
    4. Truncado a 32 bits (los múltiplos de 2^N desaparecen).

    El buffer de productos es un array('Q'): un valor >= 2^64 lanza OverflowError
    en lugar de perder bits en silencio.
    """
    count = len(digits)
    p_low, shift, offset = descriptor
    if not 0 < offset < count:
        raise ValueError(f"Descriptor inválido: limb_offset={offset} fuera de (0, {count})")

    product = array(LIMB_SLOT_TYPECODE, [0]) * count
    for i in range(offset):
        product[i] = digits[i] * p_low
    for i in range(offset, count):
        product[i] = digits[i] * p_low + (digits[i - offset] << shift)

    # Propagación de acarreos
    for i in range(1, count):
        product[i] += product[i - 1] >> LIMB_BITS

    for i in range(count):
        digits[i] = product[i] & MASK_32


def limbs_to_bytes(digits: Sequence[int]) -> bytes:
    """Serialización Little Endian: limb bajo primero, byte bajo primero dentro de cada limb."""
    out = bytearray(len(digits) * LIMB_BYTES)
    for i, digit in enumerate(digits):
        base = i * LIMB_BYTES
        out[base]     = digit & 0xFF
        out[base + 1] = (digit >> 8) & 0xFF
        out[base + 2] = (digit >> 16) & 0xFF
        out[base + 3] = (digit >> 24) & 0xFF
    return bytes(out)


def limbs_to_int(digits: Sequence[int]) -> int:
    value = 0
    for digit in reversed(digits):
        value = (value << LIMB_BITS) | (digit & MASK_32)
    return value


def int_to_limbs(value: int, count: int) -> List[int]:
    """Descompone un entero (reducido mod 2^(32*count)) en limbs Little Endian."""
    return [(value >> (LIMB_BITS * i)) & MASK_32 for i in range(count)]
