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

# Collect the data properties of parameter definitions.

from collections import OrderedDict
import logging
import re

__all__ = [
    "PropertyExtractor",
    "EXCLUDED_PROPERTIES",
    "INTERNAL_NAMESPACES",
]

logger = logging.getLogger(__name__)

EXCLUDED_PROPERTIES = frozenset([
    'class',
    'javaClass',
    'descriptor',
    'type',
    'formattedDescription',
    'defaultParameterValue',
    'defaultValueAsSecret',
])

INTERNAL_NAMESPACES = (
    'hudson.',
    'jenkins.',
    'org.jenkinsci.',
    'jenkins_params.',
)

# seeded by the extractor itself, never read reflectively
SEEDED_PROPERTIES = ('name', 'description')

_CAMEL_RE = re.compile(r'_([a-z0-9])')


def camel_case(name):
    return _CAMEL_RE.sub(lambda m: m.group(1).upper(), name)


def value_namespace(value):
    """Return the dotted origin of a value: the Jenkins class it was read
    from when known, otherwise the Python module and class of its type.
    """
    java_class = getattr(value, 'java_class', None)
    if isinstance(java_class, str) and java_class:
        return java_class
    cls = type(value)
    return '%s.%s' % (cls.__module__, cls.__name__)


def iter_property_names(obj):
    """Yield the public readable property names of ``obj``.

    Properties declared on its classes come first, base classes before
    subclasses and each in declaration order, then the public instance
    attributes in insertion order.
    """
    seen = set()
    for cls in reversed(type(obj).__mro__):
        for attr, value in vars(cls).items():
            if attr.startswith('_') or attr in seen:
                continue
            if isinstance(value, property):
                seen.add(attr)
                yield attr
    for attr in getattr(obj, '__dict__', {}):
        if attr.startswith('_') or attr in seen:
            continue
        seen.add(attr)
        yield attr


class PropertyExtractor(object):
    """Build the ordered property map of a parameter definition.

    :arg iterable exclude: property names to drop on top of
        ``EXCLUDED_PROPERTIES``
    :arg iterable internal_namespaces: namespace prefixes identifying
        values that belong to the host's object graph
    """

    def __init__(self, exclude=None, internal_namespaces=None):
        self.excluded = EXCLUDED_PROPERTIES.union(exclude or [])
        if internal_namespaces is None:
            internal_namespaces = INTERNAL_NAMESPACES
        self.internal_namespaces = tuple(internal_namespaces)

    def is_internal(self, value):
        return value_namespace(value).startswith(self.internal_namespaces)

    def extract(self, definition):
        properties = OrderedDict()
        properties['name'] = definition.name
        description = getattr(definition, 'description', None)
        if description:
            properties['description'] = description

        for attr in iter_property_names(definition):
            key = camel_case(attr)
            if (key in SEEDED_PROPERTIES or key in properties or
                    key in self.excluded):
                continue
            try:
                value = getattr(definition, attr)
                if value is None or callable(value):
                    continue
                if self.is_internal(value):
                    logger.debug("Dropping internal value of %s.%s",
                                 definition.name, key)
                    continue
            except Exception as e:
                logger.debug("Skipping property %s of %s: %s",
                             key, definition.name, e)
                continue
            properties[key] = value

        return properties
