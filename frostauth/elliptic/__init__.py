# A plain Python submodule for Ed25519/Curve25519 math and XEdDSA signatures

# Based on the Ed25519 RFC and Signal's XEdDSA specification.
# https://datatracker.ietf.org/doc/html/rfc8032
# https://signal.org/docs/specifications/xeddsa/

# Not constant time and not zeroing buffers after use. Point multiplication
# runs a fixed number of ladder steps, but Python integer arithmetic itself
# takes time that depends on the values. All functions are pure and keep no
# state, so they may be called from any number of threads.

# Public symbols are imported here. These are very low level primitives.
# Lower case constants are scalars (int or fe), upper case are EdPoints.

from . import mont
from .ed import ZERO, EdPoint, G, d, mont_to_y
from .scalar import fe, minus1, modinv, one, p, q, reduce_scalar, sqrtm1, zero
from .util import HASH1_PREFIX, clamp, hash1, hashq, tobytes, toint, tointsign
from .xeddsa import KeyPair, convert_public_key, derive_keypair, xed_sign, xed_verify, xed_verify_strict
