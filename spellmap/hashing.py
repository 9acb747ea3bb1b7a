import enum

POLY_BASE = 33

COMPRESS_SCALE = 7
COMPRESS_SHIFT = 103
COMPRESS_PRIME = 109345121

_WORD_MASK = 0xFFFFFFFF


class HashCode(enum.Enum):
    POLY = "poly"
    SIMPLE = "simple"
    CYCLIC = "cyclic"
    CUSTOM = "custom"


DEFAULT_HASH_CODE = HashCode.SIMPLE


def parse_hash_code(name: str) -> HashCode | None:
    try:
        return HashCode(name)
    except ValueError:
        return None


def to_int32(n: int) -> int:
    """Wrap an arbitrary integer into the signed 32-bit range."""
    n &= _WORD_MASK
    if n & 0x80000000:
        n -= 1 << 32
    return n


def letter(c: str) -> int:
    # 'a' -> 1, ..., 'z' -> 26
    return ord(c) - 96


def hash_code_poly(key: str) -> int:
    code = 0
    for c in key:
        code = code * POLY_BASE + letter(c)
    return to_int32(code)


def hash_code_simple(key: str) -> int:
    return to_int32(sum(letter(c) for c in key))


def hash_code_cyclic(key: str) -> int:
    code = 0
    for c in key:
        code = ((code << 5) | (code >> 27)) & _WORD_MASK
        code = (code + ord(c)) & _WORD_MASK
    return to_int32(code)


def hash_code_custom(key: str) -> int:
    code = 0
    exponent = len(key)
    for c in key:
        code += (ord(c) - 92) ** exponent
        exponent -= 1
    return to_int32(code)


def compress(code: int, n: int) -> int:
    return (abs(COMPRESS_SCALE * code + COMPRESS_SHIFT) % COMPRESS_PRIME) % n


def hash_code(method: HashCode, key: str) -> int:
    match method:
        case HashCode.POLY:
            return hash_code_poly(key)
        case HashCode.SIMPLE:
            return hash_code_simple(key)
        case HashCode.CYCLIC:
            return hash_code_cyclic(key)
        case HashCode.CUSTOM:
            return hash_code_custom(key)


def hash_key(method: HashCode, key: str, n: int) -> int:
    return compress(hash_code(method, key), n)
