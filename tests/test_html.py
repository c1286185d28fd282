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


import pytest

from stickytags.html import (
    html,
    literal,
    content,
    escape_html,
    to_attributes,
    open_tag,
    close_tag,
    content_tag,
    InvalidAttributes,
)


def test_literals():
    assert html(literal('foo')) == 'foo'
    assert html(literal('<foo>')) == '<foo>'
    assert html(literal('foo & bar')) == 'foo & bar'


def test_content():
    assert html(content('foo')) == 'foo'
    assert html(content('<foo>')) == '&lt;foo&gt;'
    assert html(content('foo & bar')) == 'foo &amp; bar'
    assert html(content('"foo\'s"')) == '&quot;foo&#x27;s&quot;'


def test_str():
    assert html('foo') == 'foo'
    assert html('<foo>') == '&lt;foo&gt;'
    assert html('foo & bar') == 'foo &amp; bar'


def test_escape_html():
    assert escape_html('<foo>') == '&lt;foo&gt;'
    assert escape_html(literal('<foo>')) == '&lt;foo&gt;'
    assert escape_html("it's") == 'it&#x27;s'


def test_attributes_scalars():
    assert to_attributes({}) == ''
    assert to_attributes(None) == ''
    assert to_attributes({'type': 'text'}) == 'type="text"'
    assert to_attributes({'type': 'text', 'size': 1, 'step': 0.5}) == (
        'type="text" size="1" step="0.5"')
    assert to_attributes({'value': b'm\xc2\xb5'}) == 'value="mµ"'


def test_attributes_order():
    assert to_attributes({'b': '1', 'a': '2', 'c': '3'}) == 'b="1" a="2" c="3"'


def test_attributes_flags():
    assert to_attributes({'checked': True}) == 'checked'
    assert to_attributes({'value': 'x', 'selected': True}) == 'value="x" selected'
    assert to_attributes({'checked': True}, xml=True) == 'checked="checked"'
    assert '=' not in to_attributes({'disabled': True, 'checked': True})


def test_attributes_false_omitted():
    assert to_attributes({'checked': False}) == ''
    assert to_attributes({'a': 'b', 'c': False}) == 'a="b"'


def test_attributes_none_blank():
    assert to_attributes({'value': None}) == 'value=""'
    assert to_attributes({'a': 'b', 'c': False, 'd': None}) == (
        'a="b" d=""')
    assert to_attributes({'value': None}, escape=False) == 'value=""'


def test_attributes_nested():
    assert to_attributes({'data': {'foo': 'bar'}}) == 'data-foo="bar"'
    assert to_attributes({'data': {'id': 1, 'kind': 'user'}}) == (
        'data-id="1" data-kind="user"')
    assert to_attributes({'data': {'on': True, 'off': False, 'x': None}}) == (
        'data-on="true" data-off="false" data-x=""')
    assert to_attributes({'id': 'x', 'data': {}}) == 'id="x"'


def test_attributes_escaping():
    assert to_attributes({'value': '"><script>'}) == (
        'value="&quot;&gt;&lt;script&gt;"')
    assert to_attributes({'value': '"><script>'}, escape=False) == (
        'value=""><script>"')
    assert to_attributes({'title': literal('&amp;')}) == 'title="&amp;"'
    assert to_attributes({'data': {'x': '<'}}) == 'data-x="&lt;"'


def test_attributes_invalid():
    with pytest.raises(InvalidAttributes):
        to_attributes({'value': ['a', 'b']})
    with pytest.raises(InvalidAttributes):
        to_attributes({'data': {'foo': {'bar': 'baz'}}})
    with pytest.raises(InvalidAttributes):
        to_attributes({1: 'foo'})
    with pytest.raises(InvalidAttributes):
        to_attributes([('type', 'text')])
    with pytest.raises(InvalidAttributes):
        to_attributes([])
    with pytest.raises(InvalidAttributes):
        to_attributes(0)
    with pytest.raises(InvalidAttributes):
        to_attributes('')
    with pytest.raises(ValueError):
        to_attributes({'value': object()})


def test_open_tag():
    assert open_tag('input', {'type': 'text'}) == '<input type="text">'
    assert open_tag('div') == '<div>'
    assert open_tag('select', {'name': 'x', 'size': '1'}) == (
        '<select name="x" size="1">')
    assert isinstance(open_tag('div'), literal)


def test_open_tag_xml():
    assert open_tag('input', {'type': 'text'}, xml=True) == '<input type="text"/>'
    assert open_tag('br', xml=True) == '<br/>'
    assert open_tag('div', {'id': 'x'}, xml=True) == '<div id="x">'


def test_close_tag():
    assert close_tag('select') == '</select>'


def test_content_tag():
    assert content_tag('option', 'Fish & Chips', {'value': 'fc'}) == (
        '<option value="fc">Fish &amp; Chips</option>')
    assert content_tag('option', 'Fish & Chips', {'value': 'fc'},
                       escape=False) == (
        '<option value="fc">Fish & Chips</option>')
    assert content_tag('p', literal('<b>x</b>')) == '<p><b>x</b></p>'
    assert content_tag('p', 5) == '<p>5</p>'
    assert content_tag('p', None) == '<p></p>'
