import hashlib
from typing import Tuple

from frostauth.exceptions import InvalidKeyLength

from .scalar import reduce_scalar


def clamp(x: int) -> int:
  """X25519/Ed25519 standard clamping of a secret scalar"""
  # 256 bits 01[x]000 so that the scalar is a multiple of the cofactor 8
  return x & (1 << 255) - 8 | 1 << 254

def toint(x, exc=InvalidKeyLength) -> int:
  """Read 32 little-endian bytes, raising exc on any other length or type"""
  if not isinstance(x, (bytes, bytearray, memoryview)): raise exc(f"Should be exactly 32 bytes, got {type(x).__name__}")
  if len(x) != 32: raise exc(f"Should be exactly 32 bytes, got {len(x)}")
  return int.from_bytes(x, "little")

def tointsign(x, exc=InvalidKeyLength) -> Tuple[int, bool]:
  """Separate the 255 bit integer and its high bit as a sign, return both."""
  val = toint(x, exc)
  sign = val & 1 << 255
  return val ^ sign, bool(sign)

def tobytes(x: int) -> bytes:
  return x.to_bytes(32, "little")


# hash1 of XEdDSA is prefixed by 2^255 in little endian (31 zero bytes, then 0x80)
HASH1_PREFIX = tobytes(1 << 255)

def hash1(data: bytes) -> int:
  """Domain separated SHA-512 for nonce derivation, mod q"""
  return hashq(HASH1_PREFIX + data)

def hashq(data: bytes) -> int:
  """Plain SHA-512 for challenge derivation, mod q"""
  return reduce_scalar(hashlib.sha512(data).digest())
