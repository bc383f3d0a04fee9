def view(argv):
    import argparse
    parser = argparse.ArgumentParser(prog='kffpy view')
    subcommands = {
        'header': view_header,
    }
    parser.add_argument('subcommand', choices=sorted(subcommands.keys()),
                        help='kffpy view sub-command')
    parser.add_argument('args', nargs=argparse.REMAINDER, help='sub-command arguments')
    args = parser.parse_args(argv)
    return subcommands[args.subcommand](args.args)


def header_to_dict(header):
    return {
        'major_version': header.major_version,
        'minor_version': header.minor_version,
        'encoding': header.nucleotide_encoding.letter_to_code,
        'uniq_kmer': header.uniq_kmer,
        'canonical_kmer': header.canonical_kmer,
        'free_block_size': len(header.free_block),
        'free_block': header.free_block.decode('latin-1'),
    }


def view_header(argv):
    import argparse
    from .shared import get_shared_argparse
    shared_parser = get_shared_argparse()

    parser = argparse.ArgumentParser(prog='kffpy view header', parents=[shared_parser])
    parser.add_argument('kff', help="KFF file. Read from stdin if '-'.")
    parser.add_argument('--to-json', action='store_true')
    args = parser.parse_args(argv)

    from kffpy.logging_config import configure_logging_from_args_and_get_logger
    logger = configure_logging_from_args_and_get_logger(args, 'kffpy.view')

    import json
    import sys
    from contextlib import ExitStack
    from kffpy.parser.header import Header

    logger.info(f'Loading header: {args.kff}')
    if args.kff == '-':
        header = Header.from_stream(sys.stdin.buffer)
    else:
        with open(args.kff, 'rb') as fh:
            header = Header.from_stream(fh)

    with ExitStack() as stack:
        if args.out == '-':
            output = sys.stdout
        else:
            output = stack.enter_context(open(args.out, 'wt'))

        header_dict = header_to_dict(header)
        if args.to_json:
            logger.info('Writing JSON representation of header')
            print(json.dumps(header_dict, sort_keys=True), file=output)
            return

        header_dict['encoding'] = '{:#010b}'.format(header.encoding)
        for field, value in header_dict.items():
            print(f'{field}: {value}', file=output)
