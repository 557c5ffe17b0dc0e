import sys
from typing import NoReturn

import frostauth

T = "\x1B[1;44m"  # titlebar (white on blue)
H = "\x1B[1;37m"  # heading (bright white)
C = "\x1B[0;34m"  # command (dark blue)
F = "\x1B[1;34m"  # flag (light blue)
D = "\x1B[1;30m"  # dark / syntax markup
N = "\x1B[0m"     # normal color

usage = dict(
  keygen=f"{C}frostauth {F}keygen {D}[{F}-o {N}id.key{D}] —{N} create a new X25519 identity\n",
  pubkey=f"{C}frostauth {F}pubkey {D}[{F}-i {N}id.key{D}] [{F}--ed{D}] —{N} show the public key of an identity\n",
  sign=f"{C}frostauth {F}sign {D}[{F}-i {N}id.key{D}] [{F}--uuid{D}] [{F}-A{D}]{N} challenge {D}—{N} sign a login challenge\n",
  verify=f"{C}frostauth {F}verify {D}[{F}--uuid{D}]{N} pubkey challenge signature {D}—{N} check a signature\n",
  convert=f"{C}frostauth {F}convert {N}pubkey {D}—{N} X25519 public key to Ed25519\n",
)

usagetext = dict(
  keygen=f"""\
Generate a new X25519 keypair. The secret key is written to the given file
(readable by the owner only) or printed on standard output. The public key is
what the coordination server and other participants know you by.

  {F}-o{N} FILENAME       Write the secret key to a new file
""",
  pubkey=f"""\
Print the X25519 public key of an identity, or with {F}--ed{N} the Ed25519 public
key that XEdDSA verifiers derive from it.

  {F}-i {N}seckey         Secret key as hex or a key file (default ${F}FROSTAUTH_KEY{N})
  {F}--ed{N}              Show the Ed25519 form instead of X25519
""",
  sign=f"""\
Sign a challenge issued by the coordination server (frostd) for login. By
default the UTF-8 text of the challenge is signed. With {F}--uuid{N} the challenge
must be a UUID and its 16 binary bytes are signed instead.

  {F}-i {N}seckey         Secret key as hex or a key file (default ${F}FROSTAUTH_KEY{N})
  {F}-u --uuid{N}         Sign the binary UUID rather than its text
  {F}-A{N}                Copy the signature to clipboard
""",
  verify=f"""\
Verify a hex signature of a challenge made with an X25519 public key. The exit
status is zero only when the signature is valid.

  {F}-u --uuid{N}         The binary UUID was signed rather than its text
""",
  convert=f"""\
Convert an X25519 public key (Montgomery u coordinate) to the Ed25519 public key
used in XEdDSA verification. The sign bit is always zero.
""",
)

cmdhelp = {k: f"{usage[k]}\n{usagetext.get(k, '')}".rstrip("\n") + "\n" for k in usage}

introduction = f"Frostauth {frostauth.__version__} - XEdDSA login keys for FROST signing ceremonies"

introduction = f"""\
{T}{introduction:78}{N}
"""

shorthelp = f"""\
{introduction}
{"".join(usage.values())}
Getting started: create an identity ({C}frostauth {F}keygen -o{N} id.key), give the
{F}pubkey{N} to the coordinator and {F}sign{N} the challenges it issues on login.

  {F}--debug{N}           Show debug logging and full tracebacks on errors
  {F}--help --version{N}  Useful information. Help applies to subcommands too.
"""

allcommands = '\n\n'.join(cmdhelp.values())

fullhelp = f"""\
{introduction}
{allcommands}"""

def print_help(modehelp: str = None, error: str = None) -> NoReturn:
  stream = sys.stderr if error else sys.stdout
  if modehelp is None: stream.write(shorthelp)
  elif (h := cmdhelp.get(modehelp)): stream.write(h)
  else: stream.write(fullhelp)
  if error:
    stream.write(f"\n{error}\n")
    sys.exit(1)
  sys.exit(0)

def print_version() -> NoReturn:
  print(f"Frostauth {frostauth.__version__}")
  sys.exit(0)
