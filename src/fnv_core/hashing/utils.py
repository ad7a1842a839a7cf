"""
src/fnv_core/hashing/utils.py
Utilidades de presentación y Fuente de Verdad matemática.
"""
from typing import Dict, Tuple

# =============================================================================
# VALORES PUBLICADOS (Enteros completos, independientes de las tablas de limbs)
# =============================================================================
# Ancho -> (offset_basis, fnv_prime)
PUBLISHED_PARAMS: Dict[int, Tuple[int, int]] = {
    32: (
        2166136261,
        16777619,
    ),
    64: (
        14695981039346656037,
        1099511628211,
    ),
    128: (
        144066263297769815596495629667062367629,
        309485009821345068724781371,
    ),
    256: (
        100029257958052580907070968620625704837092796014241193945225284501741471925557,
        374144419156711147060143317175368453031918731002211,
    ),
    512: (
        int("96593031294966694980094354007163104660904187456726378961083743294344626579945829"
            "32197716438449813051892206539805784495328239340083876191928701583869517785"),
        int("35835915874844867368919076489095108449946327955754392558399825615420669938882575"
            "126094039892345713852759"),
    ),
    1024: (
        int("14197795064947621068722070641403218320880622795441933960878474914617582723252296"
            "73230371772215086409652120235554936562817466910857181476047101507614802975596980"
            "40773201576924585630032153049571501574036444603635505054127112859663616102678680"
            "82893823963790439336411086884584107735010676915"),
        int("50164565101131186554345988110352789550307653454047907443030175238311120551081474"
            "51509157692220295382716162651878526895249385292291816524375083746691371804094271"
            "873160484737966720260389217684476157468082573"),
    ),
}


def display_hex(digest: bytes) -> str:
    """
    Digest Little Endian -> hex Big Endian (convención de impresión de hashes).
    Los bytes en memoria/red NO se invierten; solo la representación textual.
    """
    return digest[::-1].hex()


def reference_digest(data: bytes, width: int) -> bytes:
    """
    FNV-1a con enteros de precisión arbitraria, reducido mod 2^W.
    Algoritmo de libro: hash = (hash XOR octeto) * primo.
    Lento pero trivialmente correcto: es el oráculo de tests y auditorías.
    """
    if width not in PUBLISHED_PARAMS:
        raise ValueError(f"Ancho FNV-1a no soportado: {width}")
    h, prime = PUBLISHED_PARAMS[width]
    mask = (1 << width) - 1
    for octet in bytes(data):
        h = ((h ^ octet) * prime) & mask
    return h.to_bytes(width // 8, 'little')
