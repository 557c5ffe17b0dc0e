from . import ed
from .scalar import fe, minus1, one, zero
from .util import clamp, tobytes, toint

# Curve25519 constants on Montgomery curve: B v2 = u3 + A u2 + u
A = fe(486662)  # = fe(2) * (a + ed.d) / (a - ed.d) with a = -1
A24 = fe(121666)  # (A + 2) / 4

# Base point u coordinate, the Montgomery form of ed.G
U9 = fe(9)

# The point at infinity is represented by u coordinate value minus1, the only
# value without a birational conversion to Ed25519 (see ed.mont_to_y)


def scalarmult(s: int, u: fe) -> fe:
  """Multiply point u coordinate by scalar s in Curve25519"""
  if isinstance(u, ed.EdPoint): u = u.mont
  s %= 8 * ed.q
  # Special care of two low order points that the ladder mishandles
  if u == minus1: return minus1  # Point at infinity
  if u == zero: return zero if s & 1 else minus1  # Low order point with order 2
  # Montgomery ladder in projective coordinates, to avoid divisions: u = X / Z
  x2, z2 = one, zero  # "zero" point
  x3, z3 = u, one     # "one" point
  swap = False
  for n in reversed(range(ed.SCALAR_BITS)):
    bit = bool(s & 1 << n)
    swap ^= bit
    if swap:
      x2, x3 = x3, x2
      z2, z3 = z3, z2
    swap = bit  # anticipates one last swap after the loop

    # Ladder step: replaces (P2, P3) by (P2*2, P2+P3) with differential addition
    a, b = x2 + z2, x2 - z2
    aa, bb = a.sq, b.sq
    da = a * (x3 - z3)
    db = b * (x3 + z3)
    e = aa - bb
    x3, z3 = (da + db).sq, (da - db).sq * u
    x2, z2 = aa * bb, (bb + A24 * e) * e

  # last swap is necessary to compensate for the xor trick
  if swap:
    x2, x3 = x3, x2
    z2, z3 = z3, z2

  # normalises the coordinates: u == X / Z
  return x2 / z2 if z2 != zero else zero if x2 == zero else minus1


def public_key(sk: bytes) -> bytes:
  """X25519 public key (u coordinate) of a secret key, which gets clamped first"""
  return tobytes(scalarmult(clamp(toint(sk)), U9).val)
