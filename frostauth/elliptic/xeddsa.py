from secrets import token_bytes
from typing import NamedTuple, Optional

from frostauth.exceptions import (
  InvalidPointEncoding, InvalidRandomLength, InvalidScalarRange, InvalidSignatureLength, SignatureMismatch
)

from .ed import EdPoint, G, mont_to_y
from .scalar import fe, p, q
from .util import clamp, hash1, hashq, tobytes, toint

# Implements Signal's XEdDSA signature scheme XEd25519
# https://signal.org/docs/specifications/xeddsa/

# A single X25519 keypair serves both key exchange and signing. The signing
# key is the Ed25519 point of the X25519 secret scalar, negated if needed so
# that the public point is always positive (x even). Verifiers can then
# recover the Ed25519 public key from the Montgomery u coordinate alone.


class KeyPair(NamedTuple):
  public_key: bytes  # Ed25519 encoding with sign bit 0
  private_scalar: int  # a in [0, q) such that a * G decodes from public_key


def derive_keypair(sk: bytes) -> KeyPair:
  """
  Calculate the sign-normalized Ed25519 keypair of an X25519 secret key.

  :raises InvalidKeyLength: if sk is not 32 bytes
  """
  k = clamp(toint(sk)) % q
  E = k * G
  a = -k % q if E.is_negative else k
  return KeyPair(bytes(a * G), a)


def convert_public_key(pk: bytes) -> bytes:
  """
  Convert an X25519 public key into the Ed25519 public key used by XEdDSA.

  :raises InvalidKeyLength: if pk is not 32 bytes
  :raises InvalidPointEncoding: if the u coordinate is not below p
  :raises DegenerateInput: if u = -1, which has no Edwards equivalent
  """
  u = toint(pk)
  if u >= p: raise InvalidPointEncoding("Non-canonical u coordinate")
  # The sign bit is zero, which is what derive_keypair guarantees for signers
  return tobytes(mont_to_y(fe(u)).val)


def xed_sign(sk: bytes, message: bytes, nonce: Optional[bytes] = None) -> bytes:
  """
  Sign message with an X25519 secret key.

  The nonce must be 64 bytes of fresh randomness that is never used again. If
  not given, it is taken from the system CSPRNG.

  :raises InvalidKeyLength: if sk is not 32 bytes
  :raises InvalidRandomLength: if nonce is given but not 64 bytes
  """
  A, a = derive_keypair(sk)
  if nonce is None:
    nonce = token_bytes(64)
  elif len(nonce) != 64:
    raise InvalidRandomLength("A 64-byte random nonce is required")
  r = hash1(tobytes(a) + message + nonce)
  R = bytes(r * G)
  h = hashq(R + A + message)
  s = (r + h * a) % q
  return R + tobytes(s)


def xed_verify_strict(pk: bytes, message: bytes, signature: bytes) -> None:
  """
  Verify a signature, raising a specific XEdDSAError on any failure.

  Prefer xed_verify which does not reveal why verification failed.
  """
  if len(signature) != 64:
    raise InvalidSignatureLength("Invalid signature length")
  A = convert_public_key(pk)
  Ap = EdPoint.from_bytes(A)
  Rs = signature[:32]
  R = EdPoint.from_bytes(Rs)
  s = int.from_bytes(signature[32:], "little")
  if s >= q:
    raise InvalidScalarRange("Invalid s value on signature")
  h = hashq(Rs + A + message)
  # (r + h * a) * G == R + h * A
  if R != s * G - h * Ap:
    raise SignatureMismatch("Signature mismatch")


def xed_verify(pk: bytes, message: bytes, signature: bytes) -> bool:
  """Verify a signature made by xed_sign. Never raises, any failure is False."""
  try:
    xed_verify_strict(pk, message, signature)
  except (ValueError, TypeError):
    return False
  return True
