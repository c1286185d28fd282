# The stickytags project
#   Copyright (c) 2018 The stickytags developers
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the following conditions are met:
#
#     * Redistributions of source code must retain the above copyright
#       notice, this list of conditions and the following disclaimer.
#     * Redistributions in binary form must reproduce the above copyright
#       notice, this list of conditions and the following disclaimer in the
#       documentation and/or other materials provided with the distribution.
#     * Neither the name of the copyright holder nor the
#       names of its contributors may be used to endorse or promote products
#       derived from this software without specific prior written permission.
#
# THIS SOFTWARE IS PROVIDED BY THE COPYRIGHT HOLDERS AND CONTRIBUTORS "AS IS"
# AND ANY EXPRESS OR IMPLIED WARRANTIES, INCLUDING, BUT NOT LIMITED TO, THE
# IMPLIED WARRANTIES OF MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE
# ARE DISCLAIMED. IN NO EVENT SHALL THE COPYRIGHT HOLDER OR CONTRIBUTORS BE
# LIABLE FOR ANY DIRECT, INDIRECT, INCIDENTAL, SPECIAL, EXEMPLARY, OR
# CONSEQUENTIAL DAMAGES (INCLUDING, BUT NOT LIMITED TO, PROCUREMENT OF
# SUBSTITUTE GOODS OR SERVICES; LOSS OF USE, DATA, OR PROFITS; OR BUSINESS
# INTERRUPTION) HOWEVER CAUSED AND ON ANY THEORY OF LIABILITY, WHETHER IN
# CONTRACT, STRICT LIABILITY, OR TORT (INCLUDING NEGLIGENCE OR OTHERWISE)
# ARISING IN ANY WAY OUT OF THE USE OF THIS SOFTWARE, EVEN IF ADVISED OF THE
# POSSIBILITY OF SUCH DAMAGE.

"""
Command line plumbing for the :program:`stickytags-render` script: the
argument parser (which also reads configuration files), console and file
logging, and :func:`error_handler` which turns an unhandled exception into log
messages and an exit code.
"""

import sys
import logging
import traceback

import configargparse
from chameleon.exc import TemplateError

from . import __version__
from .html import InvalidAttributes


# Messages logged before configure_logging is called are printed unadorned
_CONSOLE = logging.StreamHandler(sys.stderr)
_CONSOLE.setFormatter(logging.Formatter('%(message)s'))
_CONSOLE.setLevel(logging.DEBUG)
logging.getLogger().addHandler(_CONSOLE)


class ArgParser(configargparse.ArgParser):
    """
    Raises :exc:`configargparse.ArgumentError` on usage errors instead of
    printing usage and exiting, so :func:`error_handler` can report them
    """
    # pylint: disable=method-hidden
    def error(self, message):
        raise configargparse.ArgumentError(None, message)


class WidthFormatter(logging.Formatter):
    "Truncates formatted messages longer than *maxwidth* characters"
    def __init__(self, fmt=None, maxwidth=120, ellipsis='...'):
        super().__init__(fmt)
        self.maxwidth = maxwidth
        self.ellipsis = ellipsis

    def formatMessage(self, record):
        s = super().formatMessage(record)
        if len(s) > self.maxwidth:
            s = s[:self.maxwidth - len(self.ellipsis)] + self.ellipsis
        return s


def configure_parser(description):
    """
    Return an argument parser with the options common to all renders:
    configuration file, version, and logging verbosity / destination.
    """
    parser = ArgParser(
        description=description,
        add_config_file_help=False,
        add_env_var_help=False,
        default_config_files=[
            '/etc/stickytags.conf',
            '/usr/local/etc/stickytags.conf',
            '~/.config/stickytags/stickytags.conf',
        ],
        ignore_unknown_config_file_keys=True,
    )
    parser.set_defaults(log_level=logging.WARNING)
    parser.add_argument(
        '--version', action='version', version=__version__)
    parser.add_argument(
        '-c', '--configuration', metavar='FILE', default=None,
        is_config_file=True, help='Load defaults from the specified file')
    parser.add_argument(
        '-q', '--quiet', dest='log_level', action='store_const',
        const=logging.ERROR, help='Only report errors')
    parser.add_argument(
        '-v', '--verbose', dest='log_level', action='store_const',
        const=logging.INFO, help='Report what is being rendered')
    parser.add_argument(
        '-l', '--log-file', metavar='FILE',
        help='Also log messages (with timestamps) to the specified file')
    return parser


def configure_logging(log_level, log_filename=None):
    """
    Set the console handler to *log_level* and, if *log_filename* is given,
    add a file handler which always records at least INFO messages.
    """
    _CONSOLE.setLevel(log_level)
    _CONSOLE.setFormatter(WidthFormatter('%(message)s'))
    # addHandler ignores duplicates, so this is safe if _CONSOLE is present
    logging.getLogger().addHandler(_CONSOLE)
    if log_filename is not None:
        log_file = logging.FileHandler(log_filename, encoding='utf-8')
        log_file.setFormatter(WidthFormatter(
            '%(asctime)s %(name)s %(levelname)s: %(message)s'))
        log_file.setLevel(min(logging.INFO, log_level))
        logging.getLogger().addHandler(log_file)
    logging.getLogger().setLevel(min(logging.INFO, log_level))


def _message(exc_type, exc_value, exc_tb):
    return [str(exc_value)]


def _usage(exc_type, exc_value, exc_tb):
    return [str(exc_value), 'Try the --help option for more information.']


# Errors the user can correct (bad options, a missing or broken template,
# attributes which can't be rendered) are reported without a traceback.
# Template errors include the template's filename and line in their message
ERROR_ACTIONS = (
    # Exception type               message   exit code
    (configargparse.ArgumentError, _usage,   2),
    (IOError,                      _message, 1),
    (InvalidAttributes,            _message, 1),
    (TemplateError,                _message, 1),
)


def error_handler(exc_type, exc_value, exc_tb):
    """
    Log the exception described by *exc_type*, *exc_value* and *exc_tb* as
    critical messages, and return the exit code the process should use.
    Exceptions not listed in :data:`ERROR_ACTIONS` are logged with their
    full traceback and exit with 1.
    """
    for exc_class, message, exitcode in ERROR_ACTIONS:
        if issubclass(exc_type, exc_class):
            for line in message(exc_type, exc_value, exc_tb):
                logging.critical(line)
            return exitcode
    for line in traceback.format_exception(exc_type, exc_value, exc_tb):
        for msg in line.rstrip().split('\n'):
            logging.critical(msg.replace('%', '%%'))
    return 1
