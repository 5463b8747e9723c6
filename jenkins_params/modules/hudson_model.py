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

# Representation of the hudson.model.ParameterDefinition classes

"""
Stand-ins for the parameter definition classes of Jenkins core.

Each class exposes the same readable properties as the Jenkins getters
(``default_value`` for ``getDefaultValue()``, ``trim`` for ``isTrim()``...)
and names its Jenkins counterpart in ``java_class``, which is the kind
identifier formatters are registered under.
"""

HUDSON_MODEL = 'hudson.model.'


class Descriptor(object):
    """Describes a parameter kind, carrying the symbols declared for it."""

    def __init__(self, java_class, symbols=()):
        self.java_class = java_class
        self.symbols = tuple(symbols)

    def __repr__(self):
        return '<Descriptor %s %r>' % (self.java_class, self.symbols)


def symbol(*names):
    """Class decorator declaring the pipeline symbols of a parameter kind.

    Symbols belong to the decorated class only, subclasses have to declare
    their own.
    """
    def decorator(cls):
        cls._symbols = names
        return cls
    return decorator


class ParameterValue(object):

    def __init__(self, name, value, description=None):
        self.name = name
        self.value = value
        self.description = description


class ParameterDefinition(object):

    java_class = HUDSON_MODEL + 'ParameterDefinition'

    def __init__(self, name, description=None):
        self._name = name
        self._description = description

    @property
    def name(self):
        return self._name

    @property
    def description(self):
        return self._description

    @property
    def formatted_description(self):
        return self._description or ''

    @property
    def type(self):
        return self.java_class.rsplit('.', 1)[-1]

    @property
    def descriptor(self):
        return Descriptor(self.java_class,
                          type(self).__dict__.get('_symbols', ()))

    @property
    def default_parameter_value(self):
        return None

    def __repr__(self):
        return '<%s %s>' % (type(self).__name__, self._name)


class SimpleParameterDefinition(ParameterDefinition):
    pass


@symbol('string')
class StringParameterDefinition(SimpleParameterDefinition):

    java_class = HUDSON_MODEL + 'StringParameterDefinition'

    def __init__(self, name, default_value='', description=None,
                 trim=False):
        super(StringParameterDefinition, self).__init__(name, description)
        self._default_value = default_value
        self._trim = trim

    @property
    def default_value(self):
        return self._default_value

    @property
    def trim(self):
        return self._trim

    @property
    def default_parameter_value(self):
        value = self._default_value
        if self._trim and value is not None:
            value = value.strip()
        return ParameterValue(self._name, value, self._description)


@symbol('text')
class TextParameterDefinition(StringParameterDefinition):

    java_class = HUDSON_MODEL + 'TextParameterDefinition'


@symbol('password')
class PasswordParameterDefinition(SimpleParameterDefinition):

    java_class = HUDSON_MODEL + 'PasswordParameterDefinition'

    def __init__(self, name, default_value='', description=None):
        super(PasswordParameterDefinition, self).__init__(name, description)
        self._default_value = default_value

    @property
    def default_value(self):
        return self._default_value

    @property
    def default_value_as_secret(self):
        return ParameterValue(self._name, self._default_value)


@symbol('booleanParam')
class BooleanParameterDefinition(SimpleParameterDefinition):

    java_class = HUDSON_MODEL + 'BooleanParameterDefinition'

    def __init__(self, name, default_value=False, description=None):
        super(BooleanParameterDefinition, self).__init__(name, description)
        self._default_value = default_value

    @property
    def default_value(self):
        return self._default_value

    @property
    def default_parameter_value(self):
        return ParameterValue(self._name, self._default_value,
                              self._description)


@symbol('choice')
class ChoiceParameterDefinition(SimpleParameterDefinition):

    java_class = HUDSON_MODEL + 'ChoiceParameterDefinition'

    def __init__(self, name, choices=None, description=None):
        super(ChoiceParameterDefinition, self).__init__(name, description)
        self._choices = list(choices or [])

    @property
    def choices(self):
        return list(self._choices)

    @property
    def default_parameter_value(self):
        if not self._choices:
            return None
        return ParameterValue(self._name, self._choices[0],
                              self._description)


@symbol('run')
class RunParameterDefinition(SimpleParameterDefinition):

    java_class = HUDSON_MODEL + 'RunParameterDefinition'

    def __init__(self, name, project_name, description=None, filter='ALL'):
        super(RunParameterDefinition, self).__init__(name, description)
        self._project_name = project_name
        self._filter = filter

    @property
    def project_name(self):
        return self._project_name

    @property
    def filter(self):
        return self._filter


class FileParameterDefinition(ParameterDefinition):

    java_class = HUDSON_MODEL + 'FileParameterDefinition'


class GenericParameterDefinition(ParameterDefinition):
    """A parameter definition of a class this module has no model for.

    Its properties are the fields it was read with, set as instance
    attributes in their original order.
    """

    def __init__(self, java_class, name, description=None, fields=None,
                 symbols=()):
        super(GenericParameterDefinition, self).__init__(name, description)
        self._java_class = java_class
        self._generic_symbols = tuple(symbols)
        # read-only properties such as ``type`` shadow same-named fields
        self.__dict__.update(fields or {})

    @property
    def java_class(self):
        return self._java_class

    @property
    def descriptor(self):
        return Descriptor(self._java_class, self._generic_symbols)
