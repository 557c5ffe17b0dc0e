import sys

import pyperclip

from frostauth import auth
from frostauth.cli.keys import load_identity
from frostauth.exceptions import AuthenticationError, CliArgError

G = "\x1B[1;32m"  # valid (green)
N = "\x1B[0m"     # normal color


def encoding(args) -> str:
  return "uuid" if args.uuid else auth.DEFAULT_CHALLENGE_ENCODING


def main_sign(args):
  if len(args.files) != 1:
    raise CliArgError("Exactly one challenge should be given")
  ident = load_identity(args)
  signature = auth.sign_challenge(ident, args.files[0], encoding(args))
  if args.paste:
    pyperclip.copy(signature)
    sys.stderr.write(" 📋  Signature copied to clipboard\n")
  print(signature)


def main_verify(args):
  if len(args.files) != 3:
    raise CliArgError("Expected arguments: pubkey challenge signature")
  pk, challenge, signature = args.files
  if not auth.verify_challenge(pk, challenge, signature, encoding(args)):
    raise AuthenticationError("Signature verification failed")
  sys.stderr.write(f" {G}✔{N}  Signature valid for {pk[:8]}…\n")
