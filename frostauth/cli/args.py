import sys

from frostauth.cli.help import print_help, print_version


class Args:

  def __init__(self):
    self.mode = None
    self.files = []
    self.identities = []
    self.outfile = []
    self.uuid = None
    self.ed = None
    self.paste = None
    self.debug = None


keygenargs = dict(
  outfile='-o --out --output'.split(),
  debug='--debug'.split(),
)

pubkeyargs = dict(
  identities='-i --identity'.split(),
  ed='--ed'.split(),
  debug='--debug'.split(),
)

signargs = dict(
  identities='-i --identity'.split(),
  uuid='-u --uuid'.split(),
  paste='-A'.split(),
  debug='--debug'.split(),
)

verifyargs = dict(
  uuid='-u --uuid'.split(),
  debug='--debug'.split(),
)

convertargs = dict(debug='--debug'.split(),)

def findflag(av, *flags):
  """Check for any of the flags (case insensitive) but not past --"""
  for a in av:
    if a == '--': return False
    if a.lower() in flags: return True
  return False

def subcommand(arg):
  if arg in ('keygen', 'genkey', 'id'): return 'keygen', keygenargs
  if arg in ('pubkey', 'pk'): return 'pubkey', pubkeyargs
  if arg in ('sign', '-s'): return 'sign', signargs
  if arg in ('verify', ): return 'verify', verifyargs
  if arg in ('convert', ): return 'convert', convertargs
  if arg in ('help', ): return 'help', {}
  return None, {}

def argparse():
  av = sys.argv[1:]
  if not av:
    print_help()

  if findflag(av, '-v', '--version'):
    print_version()

  args = Args()
  args.mode, flags = subcommand(av[0])

  if args.mode == 'help' or findflag(av, '-h', '--help'):
    if args.mode == 'help' and len(av) == 2 and (mode := subcommand(av[1])[0]):
      print_help(mode)
    print_help(args.mode or "help")

  if args.mode is None:
    sys.stderr.write(' 💣  Invalid or missing command (keygen/pubkey/sign/verify/convert/help).\n')
    sys.exit(1)

  # Single letter flags may be combined, e.g. -uAi KEY
  shortflags = {f[1] for switches in flags.values() for f in switches if not f.startswith('--')}
  rest = iter(av[1:])
  for a in rest:
    if a == '--':
      args.files += rest
      break
    if not a.startswith('-') or a == '-':
      args.files.append(a)
      continue
    if a.startswith('--'):
      switches = [a.lower()]
    else:
      unknown = [c for c in a[1:] if c not in shortflags]
      if unknown:
        print_help(args.mode, f' 💣  Unknown argument: frostauth {args.mode} {a} (failing -{" -".join(unknown)})')
      switches = [f'-{c}' for c in a[1:]]
    for switch in switches:
      field = next((k for k, v in flags.items() if switch in v), None)
      if field is None:
        print_help(args.mode, f' 💣  Unknown argument: frostauth {args.mode} {a}')
      values = getattr(args, field)
      if not isinstance(values, list):
        setattr(args, field, True)
        continue
      param = next(rest, None)
      if param is None:
        print_help(args.mode, f' 💣  Argument parameter missing: frostauth {args.mode} {a} …')
      values.append(param)

  return args
