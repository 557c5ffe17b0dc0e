import os
import sys

from frostauth import auth
from frostauth.elliptic import convert_public_key
from frostauth.exceptions import CliArgError

# Secret key used when no -i is given, keeps the key out of shell history
KEY_ENV = "FROSTAUTH_KEY"


def load_identity(args) -> auth.Identity:
  if len(args.identities) > 1:
    raise CliArgError("Only one secret key may be specified")
  keystr = args.identities[0] if args.identities else os.environ.get(KEY_ENV)
  if not keystr:
    raise CliArgError(f"A secret key is needed, use -i or set {KEY_ENV}")
  return auth.read_sk_any(keystr)


def write_sk_file(path, ident: auth.Identity):
  # Never overwrite an existing key and keep the new one private to the owner
  try:
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_EXCL, 0o600)
  except FileExistsError:
    raise ValueError(f"Refusing to overwrite existing file {path}") from None
  with os.fdopen(fd, "w") as f:
    f.write(f"# frostauth public key: {ident.pkhex}\n{ident.skhex}\n")


def main_keygen(args):
  if args.files:
    raise CliArgError("keygen takes no arguments other than -o")
  if len(args.outfile) > 1:
    raise CliArgError("Only one output file may be specified")
  ident = auth.Identity()
  if args.outfile:
    write_sk_file(args.outfile[0], ident)
    sys.stderr.write(f" 🔑  Secret key written to {args.outfile[0]}\n")
  else:
    print(ident.skhex)
  sys.stderr.write(f" 🔑  Public key: {ident.pkhex}\n")


def main_pubkey(args):
  if args.files:
    raise CliArgError("pubkey takes no arguments other than -i")
  ident = load_identity(args)
  print(ident.edpk.hex() if args.ed else ident.pkhex)


def main_convert(args):
  if len(args.files) != 1:
    raise CliArgError("Exactly one public key should be given")
  pk = auth.decode_hex(args.files[0], 32, "public key")
  print(convert_public_key(pk).hex())
