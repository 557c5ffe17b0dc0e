"""
Challenge-response login to a FROST coordination server (frostd).

The server hands out a UUID challenge, the participant signs it with XEdDSA
using its X25519 secret key and sends back the challenge, its X25519 public
key and the signature, all hex encoded. The same keypair is used for end to end
encryption between participants, so no separate signing key is ever stored.
"""

import logging
import os
import uuid
from contextlib import suppress
from functools import cached_property
from typing import Optional

import nacl.bindings as sodium

from frostauth.elliptic import derive_keypair, xed_sign, xed_verify
from frostauth.exceptions import InvalidKeyLength, MalformedChallengeError, MalformedKeyError

logger = logging.getLogger(__name__)

# How a challenge string becomes the signed message:
#   utf8  the UTF-8 bytes of the challenge exactly as received
#   uuid  the 16 byte binary form of the UUID (what frostd's Uuid::as_bytes() gives)
CHALLENGE_ENCODINGS = ("utf8", "uuid")
DEFAULT_CHALLENGE_ENCODING = "utf8"


def decode_hex(keystr: str, size: int = 32, what: str = "key") -> bytes:
  try:
    data = bytes.fromhex(keystr.strip())
  except ValueError:
    raise MalformedKeyError(f"Unable to parse {what}: not a hex string") from None
  if len(data) != size:
    raise MalformedKeyError(f"Unable to parse {what}: got {len(data)} bytes, expected {size}")
  return data


class Identity:
  """A participant's X25519 keypair, also used for signing login challenges."""

  def __init__(self, sk: Optional[bytes] = None, keystr: str = ""):
    self.keystr = keystr
    if sk is None:
      pk, sk = sodium.crypto_box_keypair()
    else:
      sk = bytes(sk)
      if len(sk) != 32:
        raise InvalidKeyLength("X25519 secret key must be 32 bytes")
      pk = sodium.crypto_scalarmult_base(sk)
    self.sk = sk
    self.pk = pk

  @classmethod
  def from_hex(cls, keystr: str) -> "Identity":
    return cls(decode_hex(keystr, 32, "secret key"))

  @cached_property
  def edpk(self) -> bytes:
    """The Ed25519 public key that verifiers derive from pk"""
    return derive_keypair(self.sk).public_key

  @property
  def pkhex(self) -> str:
    return self.pk.hex()

  @property
  def skhex(self) -> str:
    return self.sk.hex()

  def __eq__(self, other):
    return isinstance(other, Identity) and self.pk == other.pk

  def __hash__(self):
    return hash(self.pk)

  def __repr__(self):
    return f"Identity[{self.pk.hex()[:8]}]"


def read_sk_any(keystr: str) -> Identity:
  """Secret key given as a hex string, or a file holding one."""
  with suppress(MalformedKeyError):
    return Identity.from_hex(keystr)
  return read_sk_file(keystr)


def read_sk_file(path: str) -> Identity:
  if not os.path.isfile(path):
    raise MalformedKeyError(f"Secret key file {path} not found")
  with open(path, "rb") as f:
    try:
      lines = f.read().decode().replace('\r\n', '\n').split('\n')
    except ValueError:
      raise MalformedKeyError(f"Keyfile {path} could not be decoded. Only UTF-8 text is supported.") from None
  # A single hex key, skipping comments and empty lines
  keys = [l.strip() for l in lines if l.strip() and not l.lstrip().startswith('#')]
  if len(keys) != 1:
    raise MalformedKeyError(f"Expected exactly one secret key in {path}, found {len(keys)}")
  ident = Identity.from_hex(keys[0])
  ident.keystr = path
  logger.debug("Loaded %r from %s", ident, path)
  return ident


def challenge_message(challenge: str, encoding: str = DEFAULT_CHALLENGE_ENCODING) -> bytes:
  """The bytes that get signed for a challenge string."""
  if encoding == "utf8":
    return challenge.encode()
  if encoding == "uuid":
    try:
      return uuid.UUID(challenge).bytes
    except ValueError:
      raise MalformedChallengeError(f"Challenge is not a UUID: {challenge!r}") from None
  raise ValueError(f"Unknown challenge encoding {encoding!r}, use one of {CHALLENGE_ENCODINGS}")


def sign_challenge(
  ident: Identity, challenge: str, encoding: str = DEFAULT_CHALLENGE_ENCODING, nonce: Optional[bytes] = None
) -> str:
  """Hex encoded XEdDSA signature of a login challenge."""
  signature = xed_sign(ident.sk, challenge_message(challenge, encoding), nonce)
  logger.debug("Signed %s challenge %s with %r", encoding, challenge, ident)
  return signature.hex()


def verify_challenge(pk: str, challenge: str, signature: str, encoding: str = DEFAULT_CHALLENGE_ENCODING) -> bool:
  """
  Check a hex signature of a challenge against a hex X25519 public key.

  Malformed keys, signatures or challenges all verify as False, same as a
  wrong signature. Only an unknown encoding raises ValueError, since that
  is a mistake of the caller rather than bad input from the client.
  """
  if encoding not in CHALLENGE_ENCODINGS:
    raise ValueError(f"Unknown challenge encoding {encoding!r}, use one of {CHALLENGE_ENCODINGS}")
  try:
    pkbytes = decode_hex(pk, 32, "public key")
    sigbytes = decode_hex(signature, 64, "signature")
    message = challenge_message(challenge, encoding)
  except (ValueError, TypeError, AttributeError):
    logger.debug("Malformed login attempt for challenge %r", challenge)
    return False
  valid = xed_verify(pkbytes, message, sigbytes)
  if not valid:
    logger.debug("Challenge signature rejected for public key %s", pkbytes.hex()[:8])
  return valid


def login_request(
  ident: Identity, challenge: str, encoding: str = DEFAULT_CHALLENGE_ENCODING, nonce: Optional[bytes] = None
) -> dict:
  """Fields of the frostd /login request body."""
  return dict(
    challenge=challenge,
    pubkey=ident.pkhex,
    signature=sign_challenge(ident, challenge, encoding, nonce),
  )
