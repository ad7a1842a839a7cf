"""
src/fnv_core/audit.py
Auditoría Masiva del Motor de Limbs.
Compara cada ancho simulado contra el oráculo de precisión arbitraria,
repartiendo lotes de entradas pseudo-aleatorias entre todos los núcleos.
"""
import sys
import time
import random
from multiprocessing import Pool, cpu_count
from typing import List, Tuple
from sympy import isprime

from .hashing.invariants import Width, NATIVE_PARAMS, PRIME_TABLE
from .hashing.engine import get_hasher
from .hashing.utils import display_hex, reference_digest

# Configuración de la auditoría
TARGET_INPUTS = 20_000
MAX_INPUT_LEN = 96
SEED = 0xF17A
BATCHES_PER_CORE = 4

AUDITED_WIDTHS = tuple(Width)


def make_input(rng: random.Random) -> bytes:
    """
    Entrada de prueba. Una de cada cuatro es una racha de 0xFF:
    fuerza productos > 2^32 en todos los limbs (camino de acarreo completo).
    """
    length = rng.randrange(MAX_INPUT_LEN + 1)
    if rng.randrange(4) == 0:
        return b"\xff" * length
    return bytes(rng.getrandbits(8) for _ in range(length))


def verify_primes() -> List[Tuple[int, str]]:
    """Cada descriptor (y cada primo nativo) debe reconstruir un primo real."""
    fails = []
    for width, (_, prime, _) in NATIVE_PARAMS.items():
        if not isprime(prime):
            fails.append((int(width), "PRIMO NATIVO COMPUESTO"))
    for width, descriptor in PRIME_TABLE.items():
        if not isprime(descriptor.value):
            fails.append((int(width), "DESCRIPTOR COMPUESTO"))
    return fails


def audit_worker(args):
    batch_id, start, end = args
    rng = random.Random(SEED * 1_000_003 + batch_id)

    fails = []
    for n in range(start, end):
        data = make_input(rng)
        for width in AUDITED_WIDTHS:
            got = get_hasher(width).hash(data)
            expected = reference_digest(data, width)
            if got != expected:
                fails.append((n, int(width), data.hex()))
                print(f"🚨 FRACTURA: input#{n} FNV1a_{int(width)} | "
                      f"motor={display_hex(got)} oráculo={display_hex(expected)}", flush=True)
    return fails


def run_audit(target: int = TARGET_INPUTS) -> int:
    """Devuelve el número de discrepancias (0 = motor validado)."""
    cores = cpu_count()
    errs = 0
    for width, msg in verify_primes():
        print(f"🚨 FRACTURA: FNV1a_{width} | {msg}", flush=True)
        errs += 1

    # Lotes contiguos [start, end) con semilla propia por lote
    step = max(target // (cores * BATCHES_PER_CORE), 1)
    tasks = [(i, start, min(start + step, target)) for i, start in enumerate(range(0, target, step))]

    t0 = time.time()
    with Pool(cores) as pool:
        for res in pool.imap_unordered(audit_worker, tasks):
            errs += len(res)

    print(f"[audit] {target} entradas x {len(AUDITED_WIDTHS)} anchos en {time.time()-t0:.2f}s: "
          f"{errs} discrepancias", flush=True)
    return errs


def main() -> int:
    return 1 if run_audit() else 0


if __name__ == '__main__':
    sys.exit(main())
