# Copyright 2012 Hewlett-Packard Development Company, L.P.
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


"""
The Parameters module holds the declarative formatters for the parameter
kinds whose pipeline syntax differs from the generic keyword form.

**Component**: parameters
  :Entry Point: jenkins_params.formatters

Each formatter is called with the parameter definition and its extracted
property map and returns one declaration, e.g.::

  string(name: 'FOO', defaultValue: 'bar', description: 'A parameter')

Formatters for parameter kinds supplied by optional Jenkins plugins are
registered by :func:`register_optional_formatters` once the plugin is known
to be installed.
"""

import logging

from jenkins_params.errors import ParameterFormatError
from jenkins_params.formatter import escape
from jenkins_params.modules import hudson_model

logger = logging.getLogger(__name__)

ACTIVE_CHOICES_PLUGIN = 'uno-choice'
CASCADE_CHOICE_PARAMETER = 'org.biouno.unochoice.CascadeChoiceParameter'


def _bool_literal(value):
    if isinstance(value, str):
        value = value.strip().lower() == 'true'
    return 'true' if value else 'false'


def string_param(definition, properties):
    """kind: hudson.model.StringParameterDefinition
    A string parameter.

    Example::

      string(name: 'FOO', defaultValue: 'bar', description: 'A FOO')
    """
    return "string(name: '%s', defaultValue: '%s', description: '%s')" % (
        escape(properties.get('name')),
        escape(properties.get('defaultValue')),
        escape(properties.get('description')))


def bool_param(definition, properties):
    """kind: hudson.model.BooleanParameterDefinition
    A boolean parameter, its default is rendered unquoted.

    Example::

      booleanParam(name: 'FOO', defaultValue: false, description: 'A FOO')
    """
    return ("booleanParam(name: '%s', defaultValue: %s, description: '%s')"
            % (escape(properties.get('name')),
               _bool_literal(properties.get('defaultValue')),
               escape(properties.get('description'))))


def choice_param(definition, properties):
    """kind: hudson.model.ChoiceParameterDefinition
    A single selection parameter, choices keep their order.

    Example::

      choice(name: 'project', choices: ['nova', 'glance'], description: '')
    """
    choices = properties.get('choices', [])
    if isinstance(choices, str) or not isinstance(choices, (list, tuple)):
        raise ParameterFormatError('choices', choices,
                                   properties.get('name'))
    return "choice(name: '%s', choices: [%s], description: '%s')" % (
        escape(properties.get('name')),
        ', '.join("'%s'" % escape(choice) for choice in choices),
        escape(properties.get('description')))


def _script_text(script):
    # GroovyScript keeps its source in a SecureGroovyScript
    secure_script = getattr(script, 'secureScript', None)
    if secure_script is not None:
        script = secure_script
    return getattr(script, 'script', script)


def active_choice_param(definition, properties):
    """kind: org.biouno.unochoice.CascadeChoiceParameter
    An Active Choices reactive parameter. Requires the Jenkins
    :jenkins-wiki:`Active Choices Plugin <Active+Choices+Plugin>`.

    Example::

      activeChoice(name: 'FOO', script: '''return ['a']''',
                   description: '', choiceType: 'PT_SINGLE_SELECT')
    """
    if 'script' not in properties:
        raise ParameterFormatError('script', None, properties.get('name'))
    return ("activeChoice(name: '%s', script: '''%s''', description: '%s', "
            "choiceType: '%s')" % (
                escape(properties.get('name')),
                escape(_script_text(properties['script'])),
                escape(properties.get('description')),
                escape(properties.get('choiceType'))))


BUILTIN_FORMATTERS = (
    (hudson_model.StringParameterDefinition.java_class, string_param),
    (hudson_model.BooleanParameterDefinition.java_class, bool_param),
    (hudson_model.ChoiceParameterDefinition.java_class, choice_param),
)


def has_plugin(plugins_info, plugin_name):
    return any(plugin_name in (info.get('shortName'), info.get('longName'))
               for info in plugins_info or [])


def register_optional_formatters(registry, plugins_info):
    """Register the formatters of plugin-supplied parameter kinds whose
    plugin is listed in ``plugins_info``.

    :arg FormatterRegistry registry: registry to extend
    :arg list plugins_info: plugin info dicts as returned by the Jenkins
        plugin manager API, see
        :py:meth:`jenkins_params.builder.JenkinsManager.get_plugins_info`
    """
    if has_plugin(plugins_info, ACTIVE_CHOICES_PLUGIN):
        logger.debug("Active Choices plugin found, registering formatter "
                     "for %s", CASCADE_CHOICE_PARAMETER)
        registry.register(CASCADE_CHOICE_PARAMETER, active_choice_param)
