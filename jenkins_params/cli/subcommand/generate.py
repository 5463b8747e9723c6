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

from jenkins_params.builder import ParametersExporter
from jenkins_params import utils
import jenkins_params.cli.subcommand.base as base


logger = logging.getLogger(__name__)


class GenerateSubCommand(base.BaseSubCommand):

    def parse_args(self, subparser):
        generate = subparser.add_parser(
            'generate',
            help="Generate the pipeline parameters block of jobs")

        self.parse_option_file(generate)

        generate.add_argument(
            'names',
            help='name(s) of job(s)', nargs='*')
        generate.add_argument(
            '--plugin-info',
            dest='plugins_info_path',
            default=None,
            help='path to plugin info YAML file. Can be used to provide '
            'previously retrieved plugins info when connecting credentials '
            'don\'t have permissions to query.')
        generate.add_argument(
            '-o',
            dest='output',
            default=sys.stdout,
            help='path to write the generated block to')

    def execute(self, options, jp_config):
        exporter = ParametersExporter(
            jp_config, self.get_plugins_list(options, jp_config))

        configs = list(self.get_job_configs(options, jp_config))
        blocks = []
        for name, xml in configs:
            block = exporter.export_xml(xml)
            if len(configs) > 1:
                block = "// {0}\n{1}".format(name, block)
            blocks.append(block)
        output = "\n".join(blocks)

        if hasattr(options.output, 'write'):
            stream = utils.wrap_stream(options.output)
            stream.write(output.encode('utf-8'))
            stream.flush()
        else:
            logger.info("Writing parameters block to %s", options.output)
            with io.open(options.output, 'w', encoding='utf-8') as f:
                f.write(output)
