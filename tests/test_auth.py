import logging

import nacl.bindings as sodium
import pytest

from frostauth import auth
from frostauth.elliptic import convert_public_key, mont, xed_sign, xed_verify
from frostauth.exceptions import InvalidKeyLength, MalformedChallengeError, MalformedKeyError

CHALLENGE = "b324f3f9-4a23-477d-9883-2b12d9d42b94"
OTHER_CHALLENGE = "b324f3f9-4a23-477d-9883-2b12d9d42b95"


def test_identity():
  ident = auth.Identity()
  assert len(ident.sk) == 32
  assert ident.pk == sodium.crypto_scalarmult_base(ident.sk)
  assert ident.pk == mont.public_key(ident.sk)
  assert ident.edpk == convert_public_key(ident.pk)
  assert len(ident.pkhex) == len(ident.skhex) == 64

  same = auth.Identity.from_hex(ident.skhex)
  assert same == ident
  assert hash(same) == hash(ident)
  assert same != auth.Identity()
  assert repr(ident) == f"Identity[{ident.pkhex[:8]}]"
  assert ident.skhex not in repr(ident)

  with pytest.raises(InvalidKeyLength):
    auth.Identity(bytes(31))


def test_decode_hex():
  assert auth.decode_hex(" " + "ab" * 32 + "\n") == b"\xab" * 32
  assert auth.decode_hex("00" * 64, 64, "signature") == bytes(64)

  with pytest.raises(MalformedKeyError) as exc:
    auth.decode_hex("zz" * 32, what="public key")
  assert "Unable to parse public key: not a hex string" == str(exc.value)

  with pytest.raises(MalformedKeyError) as exc:
    auth.decode_hex("00" * 31)
  assert "got 31 bytes, expected 32" in str(exc.value)


def test_read_sk(tmp_path):
  ident = auth.Identity()
  keyfile = tmp_path / "id.key"
  keyfile.write_text(f"# frostauth public key: {ident.pkhex}\n\n{ident.skhex}\n")
  loaded = auth.read_sk_any(str(keyfile))
  assert loaded == ident
  assert loaded.keystr == str(keyfile)
  assert auth.read_sk_any(ident.skhex) == ident

  with pytest.raises(MalformedKeyError) as exc:
    auth.read_sk_any(str(tmp_path / "missing.key"))
  assert "not found" in str(exc.value)

  keyfile.write_text(f"{ident.skhex}\n{auth.Identity().skhex}\n")
  with pytest.raises(MalformedKeyError) as exc:
    auth.read_sk_file(str(keyfile))
  assert "found 2" in str(exc.value)

  keyfile.write_bytes(b"\xff\xfe\x00")
  with pytest.raises(MalformedKeyError) as exc:
    auth.read_sk_file(str(keyfile))
  assert "could not be decoded" in str(exc.value)


def test_challenge_message():
  assert auth.challenge_message(CHALLENGE) == CHALLENGE.encode()
  assert auth.challenge_message(CHALLENGE, "utf8") == CHALLENGE.encode()
  # frostd signs the binary UUID
  assert auth.challenge_message(CHALLENGE, "uuid") == bytes.fromhex(CHALLENGE.replace("-", ""))
  assert auth.challenge_message(CHALLENGE.upper(), "uuid") == auth.challenge_message(CHALLENGE, "uuid")

  with pytest.raises(MalformedChallengeError):
    auth.challenge_message("not a uuid", "uuid")
  with pytest.raises(ValueError):
    auth.challenge_message(CHALLENGE, "base64")


def test_sign_verify_challenge():
  ident = auth.Identity()
  for encoding in auth.CHALLENGE_ENCODINGS:
    sig = auth.sign_challenge(ident, CHALLENGE, encoding)
    assert len(sig) == 128
    assert auth.verify_challenge(ident.pkhex, CHALLENGE, sig, encoding)
    assert not auth.verify_challenge(ident.pkhex, OTHER_CHALLENGE, sig, encoding)
    assert not auth.verify_challenge(auth.Identity().pkhex, CHALLENGE, sig, encoding)

  # The two encodings sign different messages
  sig = auth.sign_challenge(ident, CHALLENGE, "uuid")
  assert not auth.verify_challenge(ident.pkhex, CHALLENGE, sig, "utf8")
  assert xed_verify(ident.pk, bytes.fromhex(CHALLENGE.replace("-", "")), bytes.fromhex(sig))

  nonce = bytes(64)
  assert auth.sign_challenge(ident, CHALLENGE, nonce=nonce) == xed_sign(ident.sk, CHALLENGE.encode(), nonce).hex()


def test_verify_challenge_malformed():
  ident = auth.Identity()
  sig = auth.sign_challenge(ident, CHALLENGE)
  assert not auth.verify_challenge("zz", CHALLENGE, sig)
  assert not auth.verify_challenge(ident.pkhex[:62], CHALLENGE, sig)
  assert not auth.verify_challenge(ident.pkhex, CHALLENGE, sig[:126])
  assert not auth.verify_challenge(ident.pkhex, "not a uuid", sig, "uuid")
  assert not auth.verify_challenge(None, CHALLENGE, sig)
  assert not auth.verify_challenge(ident.pkhex, None, sig)
  with pytest.raises(ValueError):
    auth.verify_challenge(ident.pkhex, CHALLENGE, sig, "base64")


def test_login_request():
  ident = auth.Identity()
  req = auth.login_request(ident, CHALLENGE, "uuid")
  assert set(req) == {"challenge", "pubkey", "signature"}
  assert req["pubkey"] == ident.pkhex
  assert auth.verify_challenge(req["pubkey"], req["challenge"], req["signature"], "uuid")


def test_logging(caplog):
  ident = auth.Identity()
  with caplog.at_level(logging.DEBUG, logger="frostauth.auth"):
    sig = auth.sign_challenge(ident, CHALLENGE)
    assert not auth.verify_challenge(ident.pkhex, CHALLENGE, "00" * 64)
    assert not auth.verify_challenge("zz", CHALLENGE, sig)
  assert "Signed utf8 challenge" in caplog.text
  assert "rejected" in caplog.text
  assert "Malformed login attempt" in caplog.text
  # Secrets never appear in logs
  assert ident.skhex not in caplog.text
  assert sig not in caplog.text
