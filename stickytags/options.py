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
Canned option sets for the convenience select builders. Each is a sequence of
(label, value) pairs, starting with a placeholder entry whose value is blank.

.. data:: MONTHS

.. data:: STATES

.. autofunction:: days

.. autofunction:: years
"""

from datetime import date


FIRST_YEAR = 1940

MONTHS = (
    ('Month',          ''),
    ('1 - January',    '01'),
    ('2 - February',   '02'),
    ('3 - March',      '03'),
    ('4 - April',      '04'),
    ('5 - May',        '05'),
    ('6 - June',       '06'),
    ('7 - July',       '07'),
    ('8 - August',     '08'),
    ('9 - September',  '09'),
    ('10 - October',   '10'),
    ('11 - November',  '11'),
    ('12 - December',  '12'),
)

# The 50 states plus the District of Columbia
STATES = (('State', ''),) + tuple((code, code) for code in sorted((
    'AK', 'AL', 'AR', 'AZ', 'CA', 'CO', 'CT', 'DC', 'DE', 'FL', 'GA', 'HI',
    'IA', 'ID', 'IL', 'IN', 'KS', 'KY', 'LA', 'MA', 'MD', 'ME', 'MI', 'MN',
    'MO', 'MS', 'MT', 'NC', 'ND', 'NE', 'NH', 'NJ', 'NM', 'NV', 'NY', 'OH',
    'OK', 'OR', 'PA', 'RI', 'SC', 'SD', 'TN', 'TX', 'UT', 'VA', 'VT', 'WA',
    'WI', 'WV', 'WY',
)))


def days():
    "Return the option set for the days of a month, 1 to 31"
    return (('Day', ''),) + tuple((day, day) for day in range(1, 32))


def years(first=FIRST_YEAR, last=None):
    """
    Return the option set for every year from *last* to *first* inclusive.
    *last* defaults to the current year (evaluated on each call). Options run
    from *last* towards *first*, so they are descending when *last* is the
    later year, and ascending otherwise::

        >>> years(2000, 2002)
        (('Year', ''), (2002, 2002), (2001, 2001), (2000, 2000))
        >>> years(2002, 2000)
        (('Year', ''), (2000, 2000), (2001, 2001), (2002, 2002))
    """
    if last is None:
        last = date.today().year
    step = -1 if last >= first else 1
    return (('Year', ''),) + tuple(
        (year, year) for year in range(last, first + step, step))
