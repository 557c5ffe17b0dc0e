import logging
import sys
from typing import NoReturn

import colorama

from frostauth.cli.args import argparse
from frostauth.cli.keys import main_convert, main_keygen, main_pubkey
from frostauth.cli.sign import main_sign, main_verify
from frostauth.exceptions import CliArgError

modes = {
  "keygen": main_keygen,
  "pubkey": main_pubkey,
  "sign": main_sign,
  "verify": main_verify,
  "convert": main_convert,
}


def main() -> NoReturn:
  """
  The main CLI entry point.

  Consider calling frostauth.auth or frostauth.elliptic directly if you use from Python code.

  System exit codes:
  * 0 The requested function was completed successfully
  * 1 CLI argument error
  * 2 Interrupted
  * 3 I/O error (broken pipe)
  * 10 Invalid keys or input, failed verification

  :raises SystemExit: on normal exit or any expected error, including KeyboardInterrupt
  :raises Exception: on unexpected error (report a bug), or on any error with `--debug`
  """
  colorama.init()
  # CLI argument processing
  args = argparse()

  # Run the mode-specific main function
  if args.debug:
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    modes[args.mode](args)  # --debug makes us not catch errors
    sys.exit(0)
  logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")
  try:
    modes[args.mode](args)  # Normal run
  except CliArgError as e:
    sys.stderr.write(f" 💣  {e}\n")
    sys.exit(1)
  except ValueError as e:
    sys.stderr.write(f"Error: {e}\n")
    sys.exit(10)
  except BrokenPipeError:
    sys.stderr.write('I/O error (broken pipe)\n')
    sys.exit(3)
  except KeyboardInterrupt:
    sys.stderr.write("Interrupted.\n")
    sys.exit(2)
  sys.exit(0)

if __name__ == "__main__":
  main()
