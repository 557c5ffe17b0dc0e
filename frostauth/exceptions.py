class XEdDSAError(ValueError):
  """Invalid input to an XEdDSA operation"""

class InvalidKeyLength(XEdDSAError):
  """Key is not exactly 32 bytes"""

class InvalidRandomLength(XEdDSAError):
  """Signing randomness is not exactly 64 bytes"""

class InvalidSignatureLength(XEdDSAError):
  """Signature is not exactly 64 bytes"""

class InvalidPointEncoding(XEdDSAError):
  """Encoding is not the canonical form of any point"""

class PointNotOnCurve(XEdDSAError):
  """Coordinate has no corresponding point on Ed25519"""

class InvalidScalarRange(XEdDSAError):
  """Scalar is not reduced modulo the group order"""

class DegenerateInput(XEdDSAError):
  """Operand with no multiplicative inverse"""

class SignatureMismatch(XEdDSAError):
  """Signature does not match the message and public key"""

class AuthenticationError(ValueError):
  """Authentication needed but not provided or is invalid"""

class MalformedKeyError(AuthenticationError):
  """Key string is malformed or keyfile is unsupported/corrupt"""

class MalformedChallengeError(AuthenticationError):
  """Server challenge is not in the expected format"""

class CliArgError(ValueError):
  """Invalid CLI argument"""
