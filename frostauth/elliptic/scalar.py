from __future__ import annotations

from functools import cached_property

from frostauth.exceptions import DegenerateInput

# Field prime
p = 2**255 - 19

# Exponents needed by the Legendre symbol and square roots
p2 = (p - 1) // 2
p4 = (p - 1) // 4
p38 = (p + 3) // 8

# Group order (both Ed25519 and Curve25519)
q = 2**252 + 27742317777372353535851937790883648493


def modinv(a: int, m: int) -> int:
  """Multiplicative inverse of a modulo m by the extended Euclidean algorithm."""
  a %= m
  if a == 0:
    raise DegenerateInput(f"Zero has no inverse modulo {m}")
  # Invariant: s * a == r (mod m) for both rows
  r0, r1 = a, m
  s0, s1 = 1, 0
  while r1:
    quot = r0 // r1
    r0, r1 = r1, r0 - quot * r1
    s0, s1 = s1, s0 - quot * s1
  if r0 != 1:
    raise DegenerateInput(f"{a} is not invertible modulo {m}")
  return s0 % m

def reduce_scalar(x) -> int:
  """Little-endian bytes (any length) or int reduced into [0, q)"""
  if not isinstance(x, int): x = int.from_bytes(x, "little")
  return x % q


class fe:
  """A prime field element modulo p = 2^255 - 19"""
  def __init__(self, x: int): self.val = x % p
  def __hash__(self): return self.val
  def __repr__(self): return value_name(self)
  def __str__(self): return bytes(self).hex()
  def __bytes__(self): return self.val.to_bytes(32, 'little')
  def bit(self, n: int): return bool(self.val & 1 << n)

  def __eq__(self, other):
    # Note: if we return NotImplemented, Python does object comparison and returns False
    if not isinstance(other, fe): raise TypeError(f"Cannot compare fe with {other!r}")
    return self.val == other.val

  def __abs__(self): return -self if self.is_negative else self
  def __neg__(self): return fe(-self.val)
  def __add__(self, o: fe): return fe(self.val + o.val)
  def __sub__(self, o: fe): return fe(self.val - o.val)
  def __mul__(self, o: fe): return fe(self.val * o.val)

  def __truediv__(self, o: fe) -> fe:
    """Division mod p, raises DegenerateInput on division by zero"""
    return self if o == one else self * o.inv

  def __pow__(self, s: int) -> fe:
    if s < 0: return self.inv**-s
    return self.sq if s == 2 else fe(pow(self.val, s, p))

  @cached_property
  def inv(self) -> fe: return fe(modinv(self.val, p))

  @cached_property
  def is_negative(self) -> bool:
    """Upper half of the field, used to pick a canonical square root"""
    return self.val > p2

  # Legendre symbol: zero, one for non-zero squares, minus1 otherwise
  @cached_property
  def chi(self) -> fe: return fe(pow(self.val, p2, p))

  @cached_property
  def sq(self) -> fe:
    """Squared"""
    x = fe(self.val * self.val)
    x.is_square = True
    return x

  @cached_property
  def is_square(self) -> bool: return self == zero or self.chi == one

  @cached_property
  def sqrt(self) -> fe:
    """The non-negative square root. Raises ValueError if there is none."""
    if not self.is_square: raise ValueError('Not a square!')
    # p is congruent to 5 modulo 8, so (p+3)/8 is an integer and the
    # candidate root needs at most a multiplication by sqrt(-1)
    root = fe(pow(self.val, p38, p))
    if root * root != self: root *= sqrtm1
    assert root * root == self
    return abs(root)

zero, one, minus1 = fe(0), fe(1), fe(-1)

# square root of -1 (used in implementation of fe.sqrt, so cannot calculate with that)
sqrtm1 = abs(fe(pow(2, p4, p)))
assert sqrtm1 * sqrtm1 == minus1


def value_name(s: fe) -> str:
  """Return variable names rather than fe(...) for any constants defined here"""
  for name, val in globals().items():
    if isinstance(val, fe) and s == val:
      return name
  for name, val in globals().items():
    if isinstance(val, fe) and s == -val:
      return f"-{name}"
  return f"fe({s.val})"
