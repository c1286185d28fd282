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
Defines :class:`FormTags`, the collection of form helpers which render
"sticky" form fields: fields which are re-populated with the values submitted
by the current request.

.. autoclass:: FormTags
    :members:
"""

import logging
from collections.abc import Mapping

from . import options
from .html import literal, open_tag, close_tag, content_tag
from .params import SubmittedParams


logger = logging.getLogger(__name__)


def _text(value):
    # Comparisons of submitted values against option / radio values are
    # always performed on the string forms
    if value is None:
        return ''
    elif isinstance(value, bytes):
        return value.decode('utf-8')
    else:
        return str(value)


def _merge(*mappings):
    result = {}
    for mapping in mappings:
        if mapping:
            result.update(mapping)
    return result


def _keywords(kwargs):
    return {
        key.rstrip('_').replace('_', '-'): value
        for key, value in kwargs.items()
    }


class FormTags:
    """
    Renders form fields re-populated from the submitted *params* of the
    current request. *params* is any mapping of parameter names to submitted
    values (see :class:`~stickytags.params.SubmittedParams`); construct one
    instance per request and hand it to your templates (conventionally as
    ``h``).

    Every helper accepts an optional mapping of *attributes* along with
    keyword attributes. Keywords lose any trailing underscores and have
    underscores converted to dashes, so ``class_='big'`` renders as
    ``class="big"`` and ``data_id=1`` as ``data-id="1"``. Keyword attributes
    override those in the mapping, which in turn override the helper's
    defaults. The caller's mapping is never modified.

    If *escape* is ``True`` (the default), all attribute values and content
    are HTML-escaped unless they are :class:`~stickytags.html.literal`
    strings. Passing ``False`` renders them verbatim, which is only safe if
    neither the submitted parameters nor the labels can contain markup.

    If *xml* is ``True``, empty elements are explicitly closed and flags are
    rendered as ``checked="checked"``.

    The *request_path* and *resolve_link* parameters are only used by
    :meth:`link_to`. *resolve_link* maps a path to the URL that should be
    rendered (it defaults to returning the path unchanged).
    """
    def __init__(self, params=None, escape=True, xml=False,
                 request_path=None, resolve_link=None):
        self.params = SubmittedParams(params)
        self.escape = escape
        self.xml = xml
        self.request_path = request_path
        if resolve_link is None:
            resolve_link = lambda path: path
        self.resolve_link = resolve_link
        if not escape:
            logger.warning(
                'HTML escaping is disabled; submitted values will be '
                'rendered verbatim')

    def tag(self, name, attributes=None):
        "Render the opening tag of *name*"
        return open_tag(name, attributes, escape=self.escape, xml=self.xml)

    def close_tag(self, name):
        "Render the closing tag of *name*"
        return close_tag(name)

    def content_tag(self, name, tag_content, attributes=None):
        "Render the element *name* wrapping *tag_content*"
        return content_tag(name, tag_content, attributes,
                           escape=self.escape, xml=self.xml)

    def input_for(self, param, attributes=None, **kwargs):
        """
        Render an ``<input>`` for *param*. The type defaults to "text", the
        name and id default to *param*, and the value defaults to the value
        submitted for *param* (or blank)::

            >>> h = FormTags({'email': 'fred@example.com'})
            >>> h.input_for('email')
            '<input type="text" value="fred@example.com" name="email" id="email">'
            >>> h.input_for('secret', type='hidden', value='shhh')
            '<input type="hidden" value="shhh" name="secret" id="secret">'
        """
        attributes = _merge({
            'type':  'text',
            'value': self.params.get(param, ''),
            'name':  param,
            'id':    param,
        }, attributes, _keywords(kwargs))
        return self.tag('input', attributes)

    def radio_for(self, param, attributes=None, **kwargs):
        """
        Render a radio button for *param*, marked ``checked`` if the value
        submitted for *param* matches the button's value. The comparison is
        between string forms, so a value of ``1`` matches a submitted "1".
        """
        attributes = _merge({'type': 'radio'}, attributes, _keywords(kwargs))
        if _text(self.params.get(param)) == _text(attributes.get('value')):
            attributes['checked'] = True
        return self.input_for(param, attributes)

    def checkbox_for(self, param, checked_if=False, attributes=None,
                     **kwargs):
        """
        Render a checkbox for *param* with the value "true". The checkbox is
        marked ``checked`` if *checked_if* is truthy, or if "true" was
        submitted for *param*.
        """
        attributes = _merge({
            'type':  'checkbox',
            'value': 'true',
        }, attributes, _keywords(kwargs))
        if checked_if or self.params.get(param) == 'true':
            attributes['checked'] = True
        return self.input_for(param, attributes)

    def textarea_for(self, param, attributes=None, **kwargs):
        "Render a ``<textarea>`` containing the value submitted for *param*"
        attributes = _merge({
            'name': param,
            'id':   param,
        }, attributes, _keywords(kwargs))
        return self.content_tag(
            'textarea', self.params.get(param, ''), attributes)

    def option_for(self, param, attributes=None, **kwargs):
        """
        Render an ``<option>`` for use within the ``<select>`` for *param*.
        The *key* attribute is the label of the option, and *value* is its
        value. The option is marked ``selected`` if its value matches the
        value submitted for *param*; if nothing (or only whitespace) was
        submitted, it is compared against the optional *default* attribute
        instead::

            >>> h = FormTags({'size': 'L'})
            >>> h.option_for('size', key='Large', value='L', default='M')
            '<option value="L" selected>Large</option>'
            >>> FormTags().option_for('size', key='Large', value='L', default='M')
            '<option value="L">Large</option>'
        """
        attributes = _merge(attributes, _keywords(kwargs))
        selected = _text(attributes.pop('default', None))
        if self.params.present(param):
            selected = self.params[param]
        if selected == _text(attributes.get('value')):
            attributes['selected'] = True
        label = attributes.pop('key', None)
        return self.content_tag('option', label, attributes)

    def select_for(self, param, option_set, attributes=None, **kwargs):
        """
        Render a ``<select>`` for *param* containing an ``<option>`` for each
        (label, value) pair in *option_set* (which may also be a mapping of
        labels to values), in order. The name and id default to *param* and
        the size to "1". A *default* attribute is not rendered; it is passed
        to each :meth:`option_for` call instead.

        The opening tag, each option, and the closing tag are separated by a
        single space.
        """
        attributes = _merge({
            'name': param,
            'id':   param,
            'size': '1',
        }, attributes, _keywords(kwargs))
        default = attributes.pop('default', None)
        if isinstance(option_set, Mapping):
            option_set = option_set.items()
        parts = [self.tag('select', attributes)]
        parts.extend(
            self.option_for(param, {
                'key':     label,
                'value':   value,
                'default': default,
            })
            for label, value in option_set
        )
        parts.append(self.close_tag('select'))
        return literal(' '.join(parts))

    def months_for(self, param, attributes=None, **kwargs):
        "Render a ``<select>`` of the months of the year"
        return self.select_for(param, options.MONTHS, attributes, **kwargs)

    def days_for(self, param, attributes=None, **kwargs):
        "Render a ``<select>`` of the days of a month (1 to 31)"
        return self.select_for(param, options.days(), attributes, **kwargs)

    def years_for(self, param, span=None, attributes=None, **kwargs):
        """
        Render a ``<select>`` of years. *span* is a (first, last) tuple or a
        :class:`range`, and is inclusive of both ends; options run from last
        to first. If *span* is omitted, it covers 1940 to the current year,
        latest first.
        """
        if span is None:
            option_set = options.years()
        elif isinstance(span, range):
            if span:
                option_set = options.years(span[0], span[-1])
            else:
                option_set = (('Year', ''),)
        else:
            first, last = span
            option_set = options.years(first, last)
        return self.select_for(param, option_set, attributes, **kwargs)

    def states_for(self, param, attributes=None, **kwargs):
        "Render a ``<select>`` of US state codes (including DC)"
        return self.select_for(param, options.STATES, attributes, **kwargs)

    def link_to(self, path, link_content, attributes=None, **kwargs):
        """
        Render an ``<a>`` linking to *path* (after passing it through
        *resolve_link*). If the resolved link is the current *request_path*,
        the "active" class is added to the link.
        """
        href = self.resolve_link(path)
        attributes = _merge({'href': href}, attributes, _keywords(kwargs))
        if self.request_path is not None and href == self.request_path:
            classes = attributes.get('class')
            if not classes:
                attributes['class'] = 'active'
            elif 'active' not in classes.split():
                attributes['class'] = '%s active' % classes
        return self.content_tag('a', link_content, attributes)
