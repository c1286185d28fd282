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
The stickytags project provides helpers for rendering HTML form tags on the
server side. Fields are re-populated from the values submitted with the
current request ("sticky" forms), and the matching option, radio button or
checkbox is marked as selected / checked. The following script is defined:

* ``stickytags-render`` - renders a Chameleon page template with the form
  helpers bound to a set of submitted parameters given on the command line.
  Handy for previewing forms.

The helpers themselves live in :mod:`stickytags.tags`; most users only need
:class:`~stickytags.tags.FormTags`.
"""

# Stop pylint's crusade against nicely aligned code
# pylint: disable=bad-whitespace

__project__      = 'stickytags'
__version__      = '0.1'
__keywords__     = ['html', 'forms', 'templates', 'sticky']
__author__       = 'The stickytags developers'
__author_email__ = 'stickytags@example.org'
__url__          = 'https://example.org/stickytags/'
__platforms__    = 'ALL'

__requires__ = ['configargparse', 'voluptuous', 'chameleon']

__extra_requires__ = {
    'test':    ['pytest', 'coverage'],
}

__classifiers__ = [
    'Development Status :: 4 - Beta',
    'Environment :: Web Environment',
    'Intended Audience :: Developers',
    'License :: OSI Approved :: BSD License',
    'Operating System :: OS Independent',
    'Programming Language :: Python :: 3',
    'Topic :: Internet :: WWW/HTTP :: Dynamic Content',
]

__entry_points__ = {
    'console_scripts': [
        'stickytags-render = stickytags.render:main',
    ],
}
