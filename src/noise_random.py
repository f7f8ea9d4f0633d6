import time

_32_BIT = 2**32
_UINT32_MASK = 0xFFFFFFFF
_INT32_SIGN = 0x80000000

DEFAULT_SEED = 0

###############################################################################################
# algorithm from Squirrel Eiserloh's 2017 GDC talk: Math for Game Programmers: Noise-Based RNG
# squirrel3 noise constants, must stay bit-for-bit identical to the reference data
BIT_NOISE1 = 0x68E31DA4
BIT_NOISE2 = 0x85297A4D
BIT_NOISE3 = 0x1B56C4E9

# coordinate folding constants, one set per arity
PRIME_2D_Y = 27742151

PRIME_3D_Y = 27833021
PRIME_3D_Z = 317130731

PRIME_4D_Y = 29399999
PRIME_4D_Z = 325767523
PRIME_4D_W = 1495052261


def to_uint32(n):
    return n & _UINT32_MASK

def to_int32(n):
    n &= _UINT32_MASK
    if n & _INT32_SIGN:
        return n - _32_BIT
    return n

def timeseed():
    """Seed from the wall clock, for streams that are meant to differ between runs."""
    return to_uint32(int(time.time() * 1000))

# squirrel3 is a 32 bit algorithm, the result changes if any step is left unreduced
def squirrel3_seeded_hash(n, seed):
    n = to_uint32(n)
    n = (n * BIT_NOISE1) & _UINT32_MASK
    n = (n + to_uint32(seed)) & _UINT32_MASK
    n ^= n >> 8
    n = (n + BIT_NOISE2) & _UINT32_MASK
    n ^= (n << 8) & _UINT32_MASK
    n = (n * BIT_NOISE3) & _UINT32_MASK
    n ^= n >> 8
    return n
###############################################################################################

# word -> value adapters, all monotonic in the raw word
def word_to_zero_to_one(word):
    return word / _32_BIT

def word_to_signed_unit(word):
    return (word / _32_BIT) * 2 - 1


# multiply by large primes with interesting bit patterns, then add to x
# wraps like a signed 32-bit int
def fold_2d(x, y):
    return to_int32(x + y * PRIME_2D_Y)

def fold_3d(x, y, z):
    return to_int32(x + y * PRIME_3D_Y + z * PRIME_3D_Z)

def fold_4d(x, y, z, w):
    return to_int32(x + y * PRIME_4D_Y + z * PRIME_4D_Z + w * PRIME_4D_W)


# these noise functions take integer positions, the seed is always explicit
def mix_1d(position, seed):
    return squirrel3_seeded_hash(position, seed)

def mix_2d(x, y, seed):
    return squirrel3_seeded_hash(fold_2d(x, y), seed)

def mix_3d(x, y, z, seed):
    return squirrel3_seeded_hash(fold_3d(x, y, z), seed)

def mix_4d(x, y, z, w, seed):
    return squirrel3_seeded_hash(fold_4d(x, y, z, w), seed)

get_seeded_noise = mix_1d


def int_1d(position, seed):
    return to_int32(mix_1d(position, seed))

def int_2d(x, y, seed):
    return to_int32(mix_2d(x, y, seed))

def int_3d(x, y, z, seed):
    return to_int32(mix_3d(x, y, z, seed))

def int_4d(x, y, z, w, seed):
    return to_int32(mix_4d(x, y, z, w, seed))


def zero_to_one_1d(position, seed):
    return word_to_zero_to_one(mix_1d(position, seed))

def zero_to_one_2d(x, y, seed):
    return word_to_zero_to_one(mix_2d(x, y, seed))

def zero_to_one_3d(x, y, z, seed):
    return word_to_zero_to_one(mix_3d(x, y, z, seed))

def zero_to_one_4d(x, y, z, w, seed):
    return word_to_zero_to_one(mix_4d(x, y, z, w, seed))


def signed_unit_1d(position, seed):
    return word_to_signed_unit(mix_1d(position, seed))

def signed_unit_2d(x, y, seed):
    return word_to_signed_unit(mix_2d(x, y, seed))

def signed_unit_3d(x, y, z, seed):
    return word_to_signed_unit(mix_3d(x, y, z, seed))

def signed_unit_4d(x, y, z, w, seed):
    return word_to_signed_unit(mix_4d(x, y, z, w, seed))
