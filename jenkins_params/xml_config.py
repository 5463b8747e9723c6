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

# Read parameter definitions from Jenkins XML job configuration.

from collections import OrderedDict
import logging
import re
import xml.etree.ElementTree as XML

from jenkins_params.errors import MissingAttributeError
from jenkins_params.modules import hudson_model

__all__ = [
    "ParameterDefinitionReader",
    "XmlObject",
    "DEFAULT_SYMBOLS",
]

logger = logging.getLogger(__name__)

PARAMETERS_PROPERTY = 'hudson.model.ParametersDefinitionProperty'

# pipeline symbols of parameter kinds contributed by plugins
DEFAULT_SYMBOLS = {
    'org.biouno.unochoice.ChoiceParameter': 'activeChoice',
    'org.biouno.unochoice.CascadeChoiceParameter':
        'activeChoiceReactiveParam',
    'org.biouno.unochoice.DynamicReferenceParameter':
        'activeChoiceReactiveReferenceParam',
    'net.uaznia.lukanus.hudson.plugins.gitparameter.GitParameterDefinition':
        'gitParameter',
    'com.cwctravel.hudson.plugins.extended_choice_parameter.'
    'ExtendedChoiceParameterDefinition': 'extendedChoice',
    'hudson.plugins.validating_string_parameter.'
    'ValidatingStringParameterDefinition': 'validatingString',
}

_INTEGER_RE = re.compile(r'^-?(0|[1-9][0-9]*)$')
_XML_DECLARATION_RE = re.compile(r'^\s*<\?xml[^>]*\?>')


def remove_ignorable_whitespace(node):
    """Remove insignificant whitespace from XML nodes

    It should only remove whitespace in between elements and sub elements.
    This should be safe for Jenkins due to how it's XML serialization works
    but may not be valid for other XML documents.
    """
    # strip tail whitespace if it's not significant
    if node.tail and node.tail.strip() == "":
        node.tail = None

    for child in node:
        # only strip whitespace from the text node if there are subelement
        # nodes as this means we are removing leading whitespace before such
        # sub elements. Otherwise risk removing whitespace from an element
        # that only contains whitespace
        if node.text and node.text.strip() == "":
            node.text = None
        remove_ignorable_whitespace(child)


class XmlObject(object):
    """An object serialized by Jenkins which has no Python counterpart.

    ``java_class`` is taken from the element's ``class`` attribute; the
    child elements are available as attributes.
    """

    def __init__(self, tag, java_class=None, fields=None):
        self.tag = tag
        self.java_class = java_class
        self.fields = fields if fields is not None else OrderedDict()

    def __getattr__(self, name):
        fields = self.__dict__.get('fields')
        if fields is not None and name in fields:
            return fields[name]
        raise AttributeError(name)

    def __str__(self):
        name = (self.java_class or self.tag).rsplit('.', 1)[-1]
        return '%s [%s]' % (name, ', '.join(
            '%s=%s' % (key, value) for key, value in self.fields.items()))

    def __repr__(self):
        return '<XmlObject %s>' % (self.java_class or self.tag)


def _string_list(element):
    """Return the texts of a list of ``<string>`` elements, either directly
    below ``element`` or in a ``string-array``, or ``None``.
    """
    children = list(element)
    if (len(children) == 1 and children[0].tag == 'a' and
            children[0].get('class') == 'string-array'):
        children = list(children[0])
    if not children or any(child.tag != 'string' for child in children):
        return None
    return [child.text or '' for child in children]


def convert_value(element):
    """Convert a field element into a plain Python value where possible."""
    if len(element):
        strings = _string_list(element)
        if strings is not None:
            return strings
        fields = OrderedDict(
            (child.tag, convert_value(child)) for child in element)
        return XmlObject(element.tag, element.get('class'), fields)

    if element.get('class') is not None and not element.text:
        return XmlObject(element.tag, element.get('class'))

    text = element.text or ''
    if text in ('true', 'false'):
        return text == 'true'
    if _INTEGER_RE.match(text):
        return int(text)
    return text


def _text(element, tag, default=None):
    child = element.find(tag)
    if child is None:
        return default
    return child.text if child.text is not None else default


def _bool(element, tag, default=False):
    text = _text(element, tag)
    if text is None:
        return default
    return text.strip().lower() == 'true'


class ParameterDefinitionReader(object):
    """Turn the parameter definitions of a job's ``config.xml`` into
    parameter definition objects.

    :arg dict symbols: pipeline symbols by Jenkins class name, overlaid on
        ``DEFAULT_SYMBOLS``, for the classes without a model
    """

    def __init__(self, symbols=None):
        self.symbols = dict(DEFAULT_SYMBOLS)
        self.symbols.update(symbols or {})

    def read(self, xml):
        """Return the job's parameter definitions in their configured order.

        :arg xml: the job configuration as text or as an Element
        :returns: a list of definitions, or ``None`` when the job has no
            parameters property at all
        """
        if isinstance(xml, bytes):
            xml = xml.decode('utf-8')
        if isinstance(xml, str):
            # Jenkins declares version='1.1', the parser expects 1.0
            root = XML.fromstring(_XML_DECLARATION_RE.sub('', xml, count=1))
        else:
            root = xml
        remove_ignorable_whitespace(root)

        if root.tag == PARAMETERS_PROPERTY:
            pdefp = root
        else:
            pdefp = root.find('.//' + PARAMETERS_PROPERTY)
        if pdefp is None:
            logger.debug("No %s found", PARAMETERS_PROPERTY)
            return None

        pdefs = pdefp.find('parameterDefinitions')
        if pdefs is None:
            return []
        return [self._read_definition(element) for element in pdefs]

    def _read_definition(self, element):
        name = _text(element, 'name')
        if name is None:
            raise MissingAttributeError('name')
        description = _text(element, 'description')

        java_class = element.tag
        if java_class == hudson_model.StringParameterDefinition.java_class:
            return hudson_model.StringParameterDefinition(
                name, _text(element, 'defaultValue', ''), description,
                _bool(element, 'trim'))
        if java_class == hudson_model.TextParameterDefinition.java_class:
            return hudson_model.TextParameterDefinition(
                name, _text(element, 'defaultValue', ''), description,
                _bool(element, 'trim'))
        if java_class == hudson_model.PasswordParameterDefinition.java_class:
            return hudson_model.PasswordParameterDefinition(
                name, _text(element, 'defaultValue', ''), description)
        if java_class == hudson_model.BooleanParameterDefinition.java_class:
            return hudson_model.BooleanParameterDefinition(
                name, _bool(element, 'defaultValue'), description)
        if java_class == hudson_model.ChoiceParameterDefinition.java_class:
            choices = element.find('choices')
            return hudson_model.ChoiceParameterDefinition(
                name, [string.text or '' for string in choices.iter('string')]
                if choices is not None else [], description)
        if java_class == hudson_model.RunParameterDefinition.java_class:
            return hudson_model.RunParameterDefinition(
                name, _text(element, 'projectName'), description,
                _text(element, 'filter', 'ALL'))
        if java_class == hudson_model.FileParameterDefinition.java_class:
            return hudson_model.FileParameterDefinition(name, description)

        fields = OrderedDict(
            (child.tag, convert_value(child)) for child in element
            if child.tag not in ('name', 'description'))
        symbol = self.symbols.get(java_class)
        logger.debug("Reading %s as a generic parameter definition "
                     "(symbol: %s)", java_class, symbol)
        return hudson_model.GenericParameterDefinition(
            java_class, name, description, fields,
            (symbol,) if symbol else ())
