"""
kffpy

Usage: kffpy [--help] <command> [<args>...]

Options:
   -h, --help  Display this help message

Allowed kffpy commands are:
   view       View the contents of a KFF file

See 'kffpy <command>' for more information on a specific command.

"""
import sys
import logging

logger = logging.getLogger('kffpy')


def main(argv):
    from kffpy import __version__
    import importlib
    import argparse
    subcommands = {
        'view': 'kffpy.command.view.view',
    }
    parser = argparse.ArgumentParser(prog='kffpy')
    parser.add_argument('--version', action='version',
                        version='%(prog)s version {}'.format(__version__))
    parser.add_argument('subcommand', choices=sorted(subcommands.keys()),
                        help='kffpy sub-command')
    parser.add_argument('args', nargs=argparse.REMAINDER, help='sub-command arguments')
    args = parser.parse_args(argv)

    package_string, method_string = subcommands[args.subcommand].rsplit('.', 1)
    module = importlib.import_module(package_string)
    return getattr(module, method_string)(args.args)


def main_without_argv():
    from kffpy.error import KffError
    try:
        return main(sys.argv[1:])
    except KffError as error:
        print('kffpy: error: {}'.format(error), file=sys.stderr)
        return 1


if __name__ == '__main__':
    exit(main_without_argv())
