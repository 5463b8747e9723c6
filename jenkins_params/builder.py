#!/usr/bin/env python
# Copyright (C) 2012 OpenStack, LLC.
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

# Export job parameters from a Jenkins server

import logging
from pprint import pformat
import re

import jenkins

from jenkins_params.config import DEFAULT_TIMEOUT
from jenkins_params.extractor import PropertyExtractor
from jenkins_params.generator import BlockGenerator
from jenkins_params.modules.parameters import register_optional_formatters
from jenkins_params.registry import default_registry
from jenkins_params.xml_config import ParameterDefinitionReader

__all__ = [
    "JenkinsManager",
    "ParametersExporter",
]

logger = logging.getLogger(__name__)


class JenkinsManager(object):

    def __init__(self, jp_config):
        url = jp_config.jenkins['url']
        user = jp_config.jenkins['user']
        password = jp_config.jenkins['password']
        timeout = jp_config.jenkins['timeout']

        if timeout != DEFAULT_TIMEOUT:
            self.jenkins = jenkins.Jenkins(url, user, password, timeout)
        else:
            self.jenkins = jenkins.Jenkins(url, user, password)

        self._plugins_list = jp_config.exporter['plugins_info']
        self._jobs = None
        self._jp_config = jp_config

    @property
    def jobs(self):
        if self._jobs is None:
            # populate jobs
            self._jobs = self.jenkins.get_all_jobs()

        return self._jobs

    def get_jobs(self, cache=True):
        if not cache:
            self._jobs = None
        return self.jobs

    def get_job_config(self, job_name):
        logger.debug("Fetching configuration of jenkins job %s", job_name)
        return self.jenkins.get_job_config(job_name)

    def get_plugins_info(self):
        """ Return a list of plugin_info dicts, one for each plugin on the
        Jenkins instance.
        """
        try:
            plugins_list = list(self.jenkins.get_plugins().values())

        except jenkins.JenkinsException as e:
            if re.search("(Connection refused|Forbidden)", str(e)):
                logger.warning(
                    "Unable to retrieve Jenkins Plugin Info from {0},"
                    " using default empty plugins info list.".format(
                        self.jenkins.server))
                plugins_list = [{'shortName': '',
                                 'version': '',
                                 'longName': ''}]
            else:
                raise
        logger.debug("Jenkins Plugin Info {0}".format(pformat(plugins_list)))

        return plugins_list

    @property
    def plugins_list(self):
        if self._plugins_list is None:
            self._plugins_list = self.get_plugins_info()
        return self._plugins_list


class ParametersExporter(object):
    """Generate the pipeline parameters block of Jenkins jobs.

    :arg JPConfig jp_config: configuration
    :arg list plugins_list: plugin info dicts of the Jenkins instance the
        jobs come from; formatters of optional plugin parameter kinds are
        only registered for the plugins it lists
    :arg FormatterRegistry registry: defaults to the process-wide registry
    """

    def __init__(self, jp_config, plugins_list=None, registry=None):
        if registry is None:
            registry = default_registry()
        register_optional_formatters(registry, plugins_list)

        self.reader = ParameterDefinitionReader(jp_config.symbols)
        extractor = PropertyExtractor(
            exclude=jp_config.exporter['exclude_properties'],
            internal_namespaces=jp_config.exporter['internal_namespaces'])
        self.generator = BlockGenerator(registry, extractor)

    def get_definitions(self, xml):
        return self.reader.read(xml) or []

    def export_xml(self, xml):
        """Return the parameters block of the job configured by ``xml``."""
        return self.generator.generate(self.get_definitions(xml))

    def export_job(self, jenkins_manager, job_name):
        return self.export_xml(jenkins_manager.get_job_config(job_name))
