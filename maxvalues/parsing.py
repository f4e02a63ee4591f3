"""
Functionality for the top-level command line interface
of the maxvalues package.
"""
import argparse


def configure_tracker_options(parser: argparse.ArgumentParser) -> argparse.ArgumentParser:
    """
    Configure the incoming `parser` with the tracker and input/output options.
    Every option defaults to `None` so that unset flags fall back to the
    configuration file or the basal default.
    """
    parser.add_argument('files', type=str, nargs='*',
                        help='Files holding whitespace-separated values. If no file '
                             'is given, values are read from standard input.')
    parser.add_argument('--capacity', '-n', type=int, default=None,
                        help='Number of retained values.')
    parser.add_argument('--smallest', dest='preference', action='store_const',
                        const='smallest', default=None,
                        help='Retain the smallest instead of the largest values.')
    parser.add_argument('--dtype', type=str, choices=('int', 'float', 'str'), default=None,
                        help='Conversion applied to every input token. Defaults to float.')
    parser.add_argument('--ordering', type=str, choices=('ranked', 'unordered'), default=None,
                        help='Output the values best-first (\'ranked\') or in the '
                             'unspecified retention order (\'unordered\').')
    parser.add_argument('--report', action='store_true', default=None,
                        help='Print a summary report of the reduction after the values.')
    return parser


def configure_globopts(parser: argparse.ArgumentParser) -> argparse.ArgumentParser:
    """Configure the incoming `parser` with configuration and logging options."""
    parser.add_argument('--configuration', '-c', type=str, default=None,
                        help='Location of a YAML configuration file. Explicitly set command '
                             'line options take precedence over its values.')
    parser.add_argument('--log-level', type=str, default=None,
                        choices=('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'),
                        help='Set the level of the main logger.')
    parser.add_argument('--logfile', type=str, default=None,
                        help='Write the log records to this file. A directory receives '
                             'a timestamped logfile.')
    parser.add_argument('--save-configuration', type=str, default=None,
                        help='Save the effective, validated configuration as YAML to '
                             'this file or directory.')
    return parser


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='maxvalues',
                                     description='Select the N largest (or smallest) '
                                                 'values of a whitespace-separated input.')
    configure_tracker_options(parser)
    configure_globopts(parser)
    return parser


def cli(argv: list[str] | None = None) -> argparse.Namespace:
    parser = create_parser()
    args = parser.parse_args(argv)
    return args
