"""
src/fnv_core/demo.py
Demostración: dos cadenas fijas a través de los seis anchos FNV-1a.
"""
from .hashing.engine import fnv1a_32, fnv1a_64, fnv1a_128, fnv1a_256, fnv1a_512, fnv1a_1024
from .hashing.utils import display_hex

SAMPLES = (
    b"hello world!goodbye!",
    b"I am a gopher!",
)

VARIANTS = (
    ("FNV1a_32", fnv1a_32),
    ("FNV1a_64", fnv1a_64),
    ("FNV1a_128", fnv1a_128),
    ("FNV1a_256", fnv1a_256),
    ("FNV1a_512", fnv1a_512),
    ("FNV1a_1024", fnv1a_1024),
)


def render(data: bytes) -> str:
    lines = [f'data[{len(data)} bytes] = "{data.decode("ascii")}"', ""]
    for label, fn in VARIANTS:
        lines.append(f"{label:<10} = {display_hex(fn(data))}")
    return "\n".join(lines)


def main() -> int:
    for data in SAMPLES:
        print()
        print(render(data), flush=True)
    return 0


if __name__ == '__main__':
    main()
