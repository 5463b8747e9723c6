#!/usr/bin/env python
# Copyright (C) 2018 Sorin Sbarnea
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


import logging
import sys

from jenkins_params.builder import ParametersExporter
from jenkins_params.generator import declarative_name
from jenkins_params.generator import simple_name
from jenkins_params import utils
import jenkins_params.cli.subcommand.base as base


class ListSubCommand(base.BaseSubCommand):

    def parse_args(self, subparser):
        list = subparser.add_parser('list', help="List job parameters")

        self.parse_option_file(list)

        list.add_argument('names',
                          help='name(s) of job(s)',
                          nargs='*',
                          default=None)

    def execute(self, options, jp_config):
        exporter = ParametersExporter(jp_config, [])
        stdout = utils.wrap_stream(sys.stdout)

        configs = list(self.get_job_configs(options, jp_config))
        count = 0
        for name, xml in configs:
            for definition in exporter.get_definitions(xml):
                line = "{0} {1} {2}\n".format(
                    definition.name, simple_name(definition),
                    declarative_name(definition) or '-')
                if len(configs) > 1:
                    line = "{0}: {1}".format(name, line)
                stdout.write(line.encode('utf-8'))
                count += 1
        stdout.flush()

        logging.info("Matching parameters: %d", count)
