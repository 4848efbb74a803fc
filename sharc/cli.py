"""
sharc - Command Line Interface

Usage:
    sharc [-hVd] [-l LEVEL] [-f FILE] [-o FILE] [VERB...]
"""

import sys

from . import __version__
from .args import Args, Failed, Parsed, ShowBanner, ShowHelp, ShowVersion, parse
from .report import BLUE, BOLD, RESET, report_error

USAGE = "Usage: sharc [-hVd] [-l LEVEL] [-f FILE] [-o FILE] [VERB...]"

HELP_MESSAGE = f"""{BOLD}DESCRIPTION{RESET}
    The compiler for the Shard Programming Language.
    Documentation can be found at https://shardlang.org/doc/

{BOLD}OPTIONS{RESET}
    -h, --help                  Show only usage with -h
    -V, --version               Show version
    -d, --debug                 Print debug information
        Shows a ton of information not intended for mere mortals.
    -l, --error-level LEVEL     [fatal|error|warn|note|silent]
        (default: warn)
    -f, --file FILE             File to compile
        (default: main.shd)
    -o, --output FILE           File to write to
        (default: main.asm)

        --no-context            Disable code context"""

HELP_NOTE = f"(Run with {BOLD}--help{RESET} for usage information)"

SHARK_ASCII = r'''                                 ,-
                               ,'::|
                              /::::|
                            ,'::::o\                                      _..
         ____........-------,..::?88b                                  ,-' /
 _.--"""". . . .      .   .  .  .  ""`-._                           ,-' .;'
<. - :::::o......  ...   . . .. . .  .  .""--._                  ,-'. .;'
 `-._  ` `":`:`:`::||||:::::::::::::::::.:. .  ""--._ ,'|     ,-'.  .;'
     """_=--       //'doo.. ````:`:`::::::::::.:.:.:. .`-`._-'.   .;'
         ""--.__     P(       \               ` ``:`:``:::: .   .;'
                "\""--.:-.     `.                             .:/
                  \. /    `-._   `.""-----.,-..::(--"".\""`.  `:\
                   `P         `-._ \          `-:\          `. `:\
                                   ""            "            `-._)'''


def get_args(argv=None) -> Args:
    """
    Parse argv (defaults to sys.argv[1:]) into Args.
    Help, version, the banner and every parse error end the process here.
    """
    if argv is None:
        argv = sys.argv[1:]

    outcome = parse(argv)

    if isinstance(outcome, Parsed):
        return outcome.args

    if isinstance(outcome, ShowHelp):
        print(USAGE)
        if outcome.full:
            print()
            print(HELP_MESSAGE)
    elif isinstance(outcome, ShowVersion):
        print(f"sharc {__version__}")
    elif isinstance(outcome, ShowBanner):
        print(f"{BLUE}{SHARK_ASCII}{RESET}")
    elif isinstance(outcome, Failed):
        report_error(outcome.error.title, HELP_NOTE)

    sys.exit(outcome.exit_code)


def main(argv=None):
    args = get_args(argv)

    def log(msg):
        if args.debug.value:
            print(f"[sharc] {msg}", file=sys.stderr)

    log(f"file:         {args.file!r}")
    log(f"output:       {args.output!r}")
    log(f"error level:  {args.level.value.name.lower()}")
    log(f"code context: {args.code_context!r}")
    log(f"verbs:        {args.verbs!r}")


if __name__ == "__main__":
    main()
