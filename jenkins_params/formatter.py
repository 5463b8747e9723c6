#!/usr/bin/env python
# Copyright (C) 2015 OpenStack, LLC.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
# http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS, WITHOUT
# WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the
# License for the specific language governing permissions and limitations
# under the License.

# Render Python values as Groovy literals.

import logging
import numbers

__all__ = [
    "escape",
    "render_literal",
    "render_arguments",
]

logger = logging.getLogger(__name__)

# backslash has to go first, every later replacement inserts one
_ESCAPES = (
    ('\\', '\\\\'),
    ("'", "\\'"),
    ('\n', '\\n'),
    ('\r', '\\r'),
    ('\t', '\\t'),
)


def escape(value):
    """Escape a value for interpolation into a single-quoted Groovy string.

    ``None`` becomes the empty string and any other non-string value is
    converted with ``str()`` first.
    """
    if value is None:
        return ''
    if not isinstance(value, str):
        value = str(value)
    for raw, escaped in _ESCAPES:
        value = value.replace(raw, escaped)
    return value


def quote(value):
    return "'%s'" % escape(value)


def render_literal(value):
    """Render a Python value as Groovy source text.

    Strings are single-quoted and escaped, booleans become the bare
    ``true``/``false`` tokens, numbers are emitted as-is and lists or
    tuples become Groovy list literals. Anything else falls back to its
    ``str()`` representation, unquoted.
    """
    # bool first, it is a numbers.Number too
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, str):
        return quote(value)
    if value is None:
        return 'null'
    if isinstance(value, numbers.Number):
        return str(value)
    if isinstance(value, (list, tuple)):
        return '[%s]' % ', '.join(render_literal(item) for item in value)

    logger.debug("Rendering %s value %r with its default representation",
                 type(value).__name__, value)
    return str(value)


def render_arguments(properties):
    """Render a property mapping as Groovy named arguments, keeping the
    mapping's order: ``k1: v1, k2: v2``.
    """
    return ', '.join('%s: %s' % (key, render_literal(value))
                     for key, value in properties.items())
