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

# Generate pipeline parameter blocks from parameter definitions.

import logging

from jenkins_params.extractor import PropertyExtractor
from jenkins_params.formatter import render_arguments
from jenkins_params.registry import default_registry

__all__ = [
    "BlockGenerator",
    "generate_parameters_block",
]

logger = logging.getLogger(__name__)

EMPTY_BLOCK = "parameters {\n}\n"


def kind_of(definition):
    """Return the kind identifier of a parameter definition."""
    java_class = getattr(definition, 'java_class', None)
    if isinstance(java_class, str) and java_class:
        return java_class
    cls = type(definition)
    return '%s.%s' % (cls.__module__, cls.__qualname__)


def simple_name(definition):
    return kind_of(definition).rsplit('.', 1)[-1]


def _display_name(definition):
    try:
        return definition.name
    except Exception:
        return repr(definition)


def declarative_name(definition):
    """Return the first symbol declared for the definition's kind, or
    ``None`` when the kind has none.
    """
    try:
        descriptor = getattr(definition, 'descriptor', None)
        symbols = getattr(descriptor, 'symbols', None)
    except Exception as e:
        logger.debug("Unable to resolve the descriptor of %r: %s",
                     definition, e)
        return None
    if symbols:
        return symbols[0]
    return None


class BlockGenerator(object):
    """Assemble the ``parameters`` block of a pipeline from a job's ordered
    parameter definitions.

    When every definition has a declarative name the block uses the
    declarative form::

      parameters {
          string(name: 'FOO', defaultValue: 'bar', description: '')
      }

    otherwise the whole block falls back to the class-tagged form of a
    scripted pipeline::

      properties([
          parameters([
              [$class: 'FileParameterDefinition', name: 'FOO'],
          ])
      ])

    :arg FormatterRegistry registry: formatters for declarative mode,
        defaults to the process-wide registry
    :arg PropertyExtractor extractor: property extractor, defaults to one
        with the standard exclusions
    """

    def __init__(self, registry=None, extractor=None):
        if registry is None:
            registry = default_registry()
        if extractor is None:
            extractor = PropertyExtractor()
        self.registry = registry
        self.extractor = extractor

    def generate(self, definitions):
        if not definitions:
            return EMPTY_BLOCK
        definitions = list(definitions)

        declarative = all(declarative_name(definition) is not None
                          for definition in definitions)
        logger.debug("Rendering %d parameter(s) in %s mode",
                     len(definitions),
                     'declarative' if declarative else 'class map')

        lines = []
        for definition in definitions:
            line = self.generate_parameter(definition, declarative)
            if line is not None:
                lines.append(line)

        if declarative:
            return "parameters {\n%s}\n" % ''.join(
                "    %s\n" % line for line in lines)
        return "properties([\n    parameters([\n%s    ])\n])\n" % ''.join(
            "        %s,\n" % line for line in lines)

    def generate_parameter(self, definition, declarative):
        """Render one parameter, returning ``None`` when it can't be."""
        try:
            properties = self.extractor.extract(definition)
            return self.format_parameter(definition, properties, declarative)
        except Exception as e:
            logger.error("Error generating parameter block for %s: %s",
                         _display_name(definition), e)
            return None

    def format_parameter(self, definition, properties, declarative):
        if not declarative:
            return self.format_class_map(definition, properties)

        formatter = self.registry.lookup(kind_of(definition))
        if formatter is not None:
            return formatter(definition, properties)
        return "%s(%s)" % (declarative_name(definition),
                           render_arguments(properties))

    def format_class_map(self, definition, properties):
        block = "[$class: '%s'" % simple_name(definition)
        if properties:
            block += ", " + render_arguments(properties)
        return block + "]"


def generate_parameters_block(definitions, registry=None, extractor=None):
    """Shortcut for ``BlockGenerator(registry, extractor).generate()``."""
    return BlockGenerator(registry, extractor).generate(definitions)
