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


import io
import logging
import sys

from stevedore import extension
import yaml

from jenkins_params.cli.parser import create_parser
from jenkins_params.config import JPConfig

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger()


class JenkinsParams(object):
    """ This is the entry point class for the `jenkins-params` command line
    tool. While this class can be used programmatically by external users of
    the API, the main goal here is to abstract the `jenkins_params` tool in a
    way that prevents test suites from caring overly much about various
    implementation details--for example, tests of subcommands must not have
    access to directly modify configuration objects, instead they must provide
    a fixture in the form of an .ini file that provides the configuration
    necessary for testing.
    """

    def __init__(self, args=None, **kwargs):
        if args is None:
            args = []
        self.parser = create_parser()
        self.options = self.parser.parse_args(args)

        self.jp_config = JPConfig(self.options.conf,
                                  config_section=self.options.section,
                                  **kwargs)

        if not self.options.command:
            self.parser.error("Must specify a 'command' to be performed")

        if (self.options.log_level is not None):
            self.options.log_level = getattr(logging,
                                             self.options.log_level.upper(),
                                             logger.getEffectiveLevel())
            logger.setLevel(self.options.log_level)

        self._parse_additional()
        self.jp_config.validate()

    def _set_config(self, target, option):
        """
        Sets the option in target only if the given option was explicitly set
        """
        opt_val = getattr(self.options, option, None)
        if opt_val is not None:
            target[option] = opt_val

    def _parse_additional(self):

        self._set_config(self.jp_config.jenkins, 'section')
        self._set_config(self.jp_config.jenkins, 'user')
        self._set_config(self.jp_config.jenkins, 'password')

        if getattr(self.options, 'plugins_info_path', None) is not None:
            with io.open(self.options.plugins_info_path, 'r',
                         encoding='utf-8') as yaml_file:
                plugins_info = yaml.safe_load(yaml_file)
            if not isinstance(plugins_info, list):
                self.parser.error("{0} must contain a Yaml list!".format(
                                  self.options.plugins_info_path))
            self.jp_config.exporter['plugins_info'] = plugins_info

    def execute(self):

        extension_manager = extension.ExtensionManager(
            namespace='jenkins_params.cli.subcommands',
            invoke_on_load=True,)

        ext = extension_manager[self.options.command]
        ext.obj.execute(self.options, self.jp_config)


def main():
    argv = sys.argv[1:]
    jp = JenkinsParams(argv)
    jp.execute()


if __name__ == "__main__":
    main()
