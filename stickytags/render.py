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
Contains the functions that implement the :program:`stickytags-render`
script.

.. autofunction:: main

.. autofunction:: render

.. autofunction:: load_template
"""

import sys
import logging
from pathlib import Path
from urllib.parse import parse_qsl

from chameleon import PageTemplateFile, PageTemplateLoader

from . import __version__, terminal
from .params import SubmittedParams
from .tags import FormTags


TEMPLATES = Path(__file__).parent / 'templates'


def name_value(s):
    """
    Split *s* in the form NAME=VALUE into a (name, value) tuple. Raises
    :exc:`ValueError` if *s* contains no "=".
    """
    name, sep, value = s.partition('=')
    if not sep or not name:
        raise ValueError('expected NAME=VALUE')
    return name, value


def main(args=None):
    """
    This is the main function for the :program:`stickytags-render` script. It
    renders a Chameleon page template with ``h`` bound to a
    :class:`~stickytags.tags.FormTags` instance populated from the parameters
    given on the command line, and returns the exit code of the process.
    Errors are reported by :func:`~stickytags.terminal.error_handler`.
    """
    logging.getLogger().name = 'render'
    parser = get_parser()
    try:
        config = parser.parse_args(args)
        terminal.configure_logging(config.log_level, config.log_file)
        render(config)
    except Exception:
        return terminal.error_handler(*sys.exc_info())
    return 0


def get_parser():
    "Return the argument parser for :program:`stickytags-render`"
    parser = terminal.configure_parser("""\
The stickytags-render script renders a Chameleon page template with the form
helpers available as "h" and the submitted parameters as "params". It is
intended for previewing how a sticky form will look when re-displayed with a
particular set of submitted values.
""")
    parser.add_argument(
        'template', nargs='?', default=None, metavar='TEMPLATE',
        help="The page template to render (default: a built-in example "
        "form)")
    parser.add_argument(
        '-p', '--param', dest='params', action='append', default=[],
        type=name_value, metavar='NAME=VALUE',
        help="A submitted parameter; may be given multiple times. Takes "
        "precedence over the same parameter in --query")
    parser.add_argument(
        '--query', default='', metavar='QS',
        help="Submitted parameters as a URL-encoded query string")
    parser.add_argument(
        '--request-path', default=None, metavar='PATH',
        help="The path of the current request, used to mark active links")
    parser.add_argument(
        '--no-escape', dest='escape', action='store_false',
        help="Do not HTML-escape attribute values and content (unsafe)")
    parser.add_argument(
        '--xml', action='store_true',
        help="Render XML-compatible tags (<input/>, checked=\"checked\")")
    parser.add_argument(
        '-o', '--output', metavar='FILE', default=None,
        help="Write the rendered page to FILE instead of stdout")
    return parser


def render(config):
    """
    Render the template named by *config* (obtained from parsing the command
    line) and write the result to the configured output.
    """
    logging.info("stickytags renderer version %s", __version__)
    params = SubmittedParams.from_pairs(
        config.params + parse_qsl(config.query, keep_blank_values=True))
    logging.info('rendering with %d submitted parameter(s)', len(params))
    h = FormTags(params, escape=config.escape, xml=config.xml,
                 request_path=config.request_path)
    template = load_template(config.template)
    page = template(h=h, params=params)
    if config.output is None:
        sys.stdout.write(page)
    else:
        with open(config.output, 'w', encoding='utf-8') as f:
            f.write(page)
        logging.info('wrote %s', config.output)


def load_template(filename=None):
    """
    Return the Chameleon page template in *filename*, or the built-in example
    form if *filename* is ``None``.
    """
    if filename is None:
        templates = PageTemplateLoader(
            search_path=[str(TEMPLATES)], default_extension='.pt')
        return templates['example']
    if not Path(filename).is_file():
        raise IOError('template %s does not exist' % filename)
    return PageTemplateFile(filename)
