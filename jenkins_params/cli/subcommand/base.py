#!/usr/bin/env python
# Copyright (C) 2015 Wayne Warren
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


import abc
import logging

from jenkins_params.builder import JenkinsManager
from jenkins_params.errors import JenkinsParamsException
from jenkins_params import utils

logger = logging.getLogger(__name__)

GLOB_CHARS = frozenset("*?[")


class BaseSubCommand(metaclass=abc.ABCMeta):
    """Base class for jenkins-params subcommands, intended to allow
    subcommands to be loaded as stevedore extensions by third party users.
    """
    def __init__(self):
        pass

    @abc.abstractmethod
    def parse_args(self, subparsers):
        """Define subcommand arguments.

        :param subparsers
          A sub parser object. Implementations of this method should
          create a new subcommand parser by calling
            parser = subparsers.add_parser('command-name', ...)
          This will return a new ArgumentParser object; all other arguments to
          this method will be passed to the argparse.ArgumentParser constructor
          for the returned object.
        """

    @abc.abstractmethod
    def execute(self, options, jp_config):
        """Execute subcommand behavior.

        :param options
          Parsed command line arguments.
        :param jp_config
          JPConfig object containing final configuration from config files,
          command line arguments, and environment variables.
        """

    @staticmethod
    def parse_option_file(parser):
        """Add the '--file' argument to given parser.
        """
        parser.add_argument(
            '-f', '--file',
            dest='path',
            default=None,
            help="read the job configuration from a local config.xml "
            "file instead of Jenkins, '-' reads it from stdin")

    def get_plugins_list(self, options, jp_config):
        """Return the plugins info used to pick optional formatters; local
        files never trigger a query to Jenkins.
        """
        if options.path is not None:
            return jp_config.exporter['plugins_info'] or []
        return self.get_jenkins(jp_config).plugins_list

    def get_jenkins(self, jp_config):
        if getattr(self, 'jenkins', None) is None:
            self.jenkins = JenkinsManager(jp_config)
        return self.jenkins

    def get_job_configs(self, options, jp_config):
        """Yield ``(job name, config.xml)`` pairs for the requested jobs.
        The job name is ``None`` for a local file.
        """
        if options.path is not None:
            yield None, utils.read_config_xml(options.path)
            return
        if not options.names:
            raise JenkinsParamsException(
                "Either a job name or a config.xml file is required")
        jenkins = self.get_jenkins(jp_config)
        for name in self.expand_job_names(options.names, jenkins):
            yield name, jenkins.get_job_config(name)

    def expand_job_names(self, names, jenkins):
        """Replace the glob patterns among ``names`` by the names of the
        matching Jenkins jobs, keeping plain names as given.
        """
        expanded = []
        for name in names:
            if not GLOB_CHARS.intersection(name):
                expanded.append(name)
                continue
            matched = [job.get("fullname", job["name"])
                       for job in jenkins.get_jobs()
                       if utils.matches(job.get("fullname", job["name"]),
                                        [name])]
            if not matched:
                logger.warning("No job matches %s", name)
            expanded.extend(matched)
        return expanded
