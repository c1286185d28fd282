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
The attribute engine and primitive tag builders underlying all the form
helpers. Everything in here is a pure function returning :class:`literal`
strings, so the output can be handed straight to a template engine that
honours the ``__html__`` protocol (Chameleon, Jinja2, Mako, ...).

.. autofunction:: to_attributes

.. autofunction:: open_tag

.. autofunction:: close_tag

.. autofunction:: content_tag

.. autofunction:: escape_html

.. autoexception:: InvalidAttributes
"""

from collections.abc import Mapping

from voluptuous import Schema, Any, Invalid


class literal(str):
    "A str sub-class that assumes its content is HTML"
    def __html__(self):
        return self


class content(str):
    "A str sub-class which escapes content for inclusion in HTML"
    def __html__(self):
        return literal(self.\
                replace('&', '&amp;').\
                replace('"', '&quot;').\
                replace("'", '&#x27;').\
                replace('<', '&lt;').\
                replace('>', '&gt;'))


def html(s):
    "Return s in a form suitable for inclusion in an HTML document"
    if hasattr(s, '__html__'):
        return s.__html__()
    else:
        return content(s).__html__()


def escape_html(text):
    """
    Unconditionally escape *text* for inclusion in an HTML document. Unlike
    :func:`html`, this escapes :class:`literal` strings too.
    """
    return content(text).__html__()


# The set of HTML elements which should never have a closing tag

EMPTY_ELEMENTS = (
    # From HTML4 standard
    'area',
    'base',
    'basefont',
    'br',
    'col',
    'frame',
    'hr',
    'img',
    'input',
    'isindex',
    'link',
    'meta',
    'param',
    # Proprietary extensions
    'bgsound',
    'embed',
    'keygen',
    'spacer',
    'wbr',
    )


class InvalidAttributes(ValueError):
    "Error raised when an attribute mapping cannot be rendered"


# bool is a sub-class of int so True / False are covered by the scalars
_SCALAR = Any(str, bytes, int, float, None)

ATTRIBUTES = Schema({str: Any(_SCALAR, {str: _SCALAR})})


def _format(value, escape=True):
    if value is None:
        value = ''
    elif isinstance(value, bytes):
        value = value.decode('utf-8')
    elif isinstance(value, bool):
        value = str(value).lower()
    elif not isinstance(value, str):
        value = str(value)
    if escape:
        return html(value)
    return value


def to_attributes(attributes, escape=True, xml=False):
    """
    Convert the *attributes* mapping into HTML attribute syntax. Values of
    ``True`` produce a bare flag (``checked``), ``False`` omits the attribute,
    ``None`` renders a blank value (``value=""``), and a nested mapping
    produces one ``outer-inner="value"`` attribute per key (handy for
    ``data-*`` attributes)::

        >>> to_attributes({'value': 'foo', 'checked': True})
        'value="foo" checked'
        >>> to_attributes({'data': {'id': 1, 'kind': 'user'}})
        'data-id="1" data-kind="user"'

    If *escape* is ``True`` (the default), values are HTML-escaped unless they
    are :class:`literal` strings. If *xml* is ``True``, flags are rendered in
    the XML-compatible ``checked="checked"`` form.

    Raises :exc:`InvalidAttributes` if *attributes* contains anything other
    than string keys mapped to scalars, flags, or a single level of nested
    mapping.
    """
    if attributes is None:
        return literal('')
    if not isinstance(attributes, Mapping):
        raise InvalidAttributes(
            'expected a mapping of attributes, not %r' % (attributes,))
    try:
        ATTRIBUTES(dict(attributes))
    except Invalid as exc:
        raise InvalidAttributes(str(exc)) from exc
    tokens = []
    for key, value in attributes.items():
        if isinstance(value, Mapping):
            tokens.extend(
                '%s-%s="%s"' % (key, inner_key, _format(inner_value, escape))
                for inner_key, inner_value in value.items()
            )
        elif value is True:
            tokens.append('%s="%s"' % (key, key) if xml else key)
        elif value is not False:
            tokens.append('%s="%s"' % (key, _format(value, escape)))
    return literal(' '.join(tokens))


def open_tag(name, attributes=None, escape=True, xml=False):
    """
    Return the opening tag for the element *name* with the specified
    *attributes*. When *xml* is ``True``, elements which are declared "empty"
    by HTML (``<input>``, ``<br>``, etc.) are explicitly closed::

        >>> open_tag('input', {'type': 'text'})
        '<input type="text">'
        >>> open_tag('input', {'type': 'text'}, xml=True)
        '<input type="text"/>'
    """
    attrs = to_attributes(attributes, escape=escape, xml=xml)
    if xml and name.lower() in EMPTY_ELEMENTS:
        template = '<%s%s/>'
    else:
        template = '<%s%s>'
    return literal(template % (name, ' ' + attrs if attrs else ''))


def close_tag(name):
    "Return the closing tag for the element *name*"
    return literal('</%s>' % name)


def content_tag(name, tag_content, attributes=None, escape=True, xml=False):
    """
    Return the element *name* wrapping *tag_content*. The content is escaped
    (unless it is a :class:`literal`) when *escape* is ``True``::

        >>> content_tag('option', 'Fish & Chips', {'value': 'fc'})
        '<option value="fc">Fish &amp; Chips</option>'
    """
    return literal(''.join((
        open_tag(name, attributes, escape=escape, xml=xml),
        _format(tag_content, escape),
        close_tag(name),
    )))
