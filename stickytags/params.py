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
Defines :class:`SubmittedParams`, the read-only view of the current request's
submitted form / query values that the form helpers consult.

.. autoclass:: SubmittedParams
    :members:
"""

from collections.abc import Mapping


class SubmittedParams(Mapping):
    """
    A read-only wrapper around the *params* submitted with a request.

    The wrapped object can be any mapping of parameter names to values. If it
    has a ``getlist`` method (like the multi-dicts of most WSGI toolkits) or
    maps names to lists of values, the first value submitted for a name is
    used. Values are always returned as strings; :meth:`get` returns ``None``
    for parameters that were not submitted at all::

        >>> params = SubmittedParams({'color': 'red', 'size': ['L', 'XL']})
        >>> params.get('color')
        'red'
        >>> params.get('size')
        'L'
        >>> params.get('shape') is None
        True

    The wrapped object is never modified.
    """
    __slots__ = ('_params',)

    def __init__(self, params=None):
        if params is None:
            params = {}
        elif isinstance(params, SubmittedParams):
            params = params._params
        self._params = params

    @classmethod
    def from_pairs(cls, pairs):
        """
        Construct an instance from an iterable of (name, value) *pairs*, such
        as the output of :func:`urllib.parse.parse_qsl`. When a name occurs
        more than once, the first value wins.
        """
        params = {}
        for name, value in pairs:
            params.setdefault(name, value)
        return cls(params)

    def __repr__(self):
        return '<SubmittedParams %r>' % (self._params,)

    def __len__(self):
        return len(self._params)

    def __iter__(self):
        return iter(self._params)

    def __getitem__(self, name):
        try:
            getlist = self._params.getlist
        except AttributeError:
            value = self._params[name]
        else:
            values = getlist(name)
            if not values:
                raise KeyError(name)
            value = values[0]
        if isinstance(value, (list, tuple)):
            if not value:
                raise KeyError(name)
            value = value[0]
        if value is None:
            raise KeyError(name)
        if isinstance(value, bytes):
            return value.decode('utf-8')
        return str(value)

    def present(self, name):
        """
        Return ``True`` if *name* was submitted with a value that isn't blank
        (empty or whitespace only).
        """
        value = self.get(name)
        return value is not None and bool(value.strip())
