from __future__ import annotations

from functools import cached_property
from typing import Optional

from frostauth.exceptions import DegenerateInput, InvalidPointEncoding, PointNotOnCurve

from .scalar import fe, minus1, one, p, q, zero
from .util import tobytes, tointsign

# Twisted Edwards curve: -x2 + y2 = 1 + d x2 y2
d = -fe(121665) / fe(121666)

# Scalars are taken mod 8 * q, which fits in this many bits
SCALAR_BITS = (8 * q).bit_length()

# Points are represented as tuples (X, Y, Z, T) of extended
# coordinates, with x = X/Z, y = Y/Z, x*y = T/Z

class EdPoint:
  def __init__(self, x: fe, y: fe, z: fe = one, t: Optional[fe] = None):
    self.X = x
    self.Y = y
    self.Z = z
    self.T = x * y if t is None else t

  @staticmethod
  def from_bytes(b) -> EdPoint:
    """Decode a standard Ed25519 point, accepting only the canonical encoding"""
    val, sign = tointsign(b, InvalidPointEncoding)
    if val >= p: raise InvalidPointEncoding("Non-canonical y coordinate")
    return EdPoint.from_y(fe(val), sign)

  @staticmethod
  def from_y(y: fe, negative=False) -> EdPoint:
    """Restore from a y coordinate and an is_negative flag"""
    x2 = (y.sq - one) / (d * y.sq + one)
    if not x2.is_square: raise PointNotOnCurve("Not a curve point on Ed25519")
    # Zero has no negative, so the sign bit must not be set
    if x2 == zero and negative: raise InvalidPointEncoding("Non-canonical sign of x = 0")
    P = EdPoint(x2.sqrt, y)
    return P if P.is_negative == negative else -P

  @staticmethod
  def from_mont(u: fe, negative=False) -> EdPoint:
    """Convert from a Curve25519 u coordinate and a sign for Ed25519"""
    return EdPoint.from_y(mont_to_y(u), negative)

  @cached_property
  def mont(self) -> fe:
    """Convert the y coordinate into a Curve25519 u coordinate. sign is not included."""
    # ZERO has no birational equivalent, minus1 stands for the point at infinity
    if self.y == one: return minus1
    return (one + self.y) / (one - self.y)

  @cached_property
  def montbytes(self) -> bytes:
    """Provides a 32-byte Curve25519 pk"""
    return tobytes(self.mont.val)

  def __repr__(self): return point_name(self)
  def __str__(self): return bytes(self).hex()
  def __bytes__(self): return tobytes(self.y.val + (self.is_negative << 255))
  def __hash__(self): return self.y.val
  def __abs__(self): return -self if self.is_negative else self

  @cached_property
  def norm(self) -> EdPoint:
    """Return a normalized point, with Z=1."""
    return EdPoint(self.x, self.y)

  @cached_property
  def is_negative(self) -> bool:
    """Return the parity of the x coordinate, aka the sign."""
    return self.x.bit(0)

  @cached_property
  def x(self) -> fe: return self.X / self.Z

  @cached_property
  def y(self) -> fe: return self.Y / self.Z

  def __add__(self, othr: EdPoint) -> EdPoint:
    if not isinstance(othr, EdPoint): return NotImplemented
    # Unified formula, also valid for doubling and for the neutral element
    A = (self.Y - self.X) * (othr.Y - othr.X)
    B = (self.Y + self.X) * (othr.Y + othr.X)
    C = fe(2) * self.T * othr.T * d
    D = fe(2) * self.Z * othr.Z
    E, F, G, H = B - A, D - C, D + C, B + A
    return EdPoint(E * F, G * H, F * G, E * H)

  def __sub__(self, othr: EdPoint) -> EdPoint:
    return self + -othr

  def __neg__(self) -> EdPoint:
    return EdPoint(-self.X, self.Y, self.Z, -self.T)

  def __mul__(self, s: int) -> EdPoint:
    """Multiply the point by scalar (secret key)."""
    if not isinstance(s, int): return NotImplemented
    # Reduce mod 8 * q rather than q, points outside of the prime group are allowed
    s %= 8 * q
    # Montgomery ladder keeping R[1] - R[0] == self. Every bit costs one addition
    # and one doubling, selected by index rather than by branching on the bit.
    R = [ZERO, self]
    for n in reversed(range(SCALAR_BITS)):
      bit = s >> n & 1
      R[1 - bit] = R[0] + R[1]
      R[bit] = R[bit] + R[bit]
    return R[0].norm

  def __rmul__(self, s: int) -> EdPoint:
    return self * s

  def __eq__(self, othr):
    if not isinstance(othr, EdPoint): raise TypeError(f"EdPoints cannot be compared with {type(othr)}")
    # x1 / z1 == x2 / z2  <==>  x1 * z2 == x2 * z1
    return (
      (self.X * othr.Z - othr.X * self.Z) == zero and
      (self.Y * othr.Z - othr.Y * self.Z) == zero
    )


def mont_to_y(u: fe) -> fe:
  """Edwards y coordinate of a Curve25519 u coordinate: y = (u - 1) / (u + 1)"""
  if u == minus1: raise DegenerateInput("Curve25519 u = -1 has no Ed25519 equivalent")
  return (u - one) / (u + one)


# Neutral element
ZERO = EdPoint(zero, one)

# Base point (prime group generator)
G = EdPoint.from_y(fe(4) / fe(5), False)


def point_name(P: EdPoint) -> str:
  """Return variable names rather than xy coordinates for any constants defined here"""
  for name, val in globals().items():
    if isinstance(val, EdPoint) and P == val:
      return name
  return f"EdPoint({P.x!r}, {P.y!r})"
