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

# Manage jenkins_params configuration sources, defaults, and access.

from collections import defaultdict
import configparser
import io
import logging
import os

from jenkins_params.errors import JPConfigException
from jenkins_params.errors import JenkinsParamsException
from jenkins_params.extractor import INTERNAL_NAMESPACES

__all__ = [
    "JPConfig"
]

logger = logging.getLogger(__name__)

DEFAULT_CONF = """
[exporter]
exclude_properties=
internal_namespaces={internal_namespaces}

[symbols]

# other named sections could be used in addition to the implicit [jenkins]
# if you have multiple jenkins servers.
[jenkins]
url=http://localhost:8080/
query_plugins_info=True
""".format(internal_namespaces=','.join(INTERNAL_NAMESPACES))

CONFIG_REQUIRED_MESSAGE = ("A valid configuration file is required. "
                           "No configuration file passed.")

# sentinel for "let python-jenkins pick its own timeout"
DEFAULT_TIMEOUT = object()


def _split_list(value):
    return [item.strip() for item in value.split(',') if item.strip()]


class JPConfig(object):

    def __init__(self, config_filename=None,
                 config_file_required=False,
                 config_section='jenkins'):

        """
        The JPConfig class encapsulates and resolves priority between all
        sources of configuration for jenkins_params, so that the command line
        tool and users of the library API read settings the same way.

        :arg str config_filename: Name of configuration file on which to base
            this config object.
        :arg bool config_file_required: Allows users of the JPConfig class to
            decide whether or not it's really necessary for a config file to be
            passed in when creating an instance. It determines whether or not
            failure to read the config file will raise an exception or simply
            log a warning and carry on with the default values.
        :arg str config_section: Name of the section holding the Jenkins
            server settings.
        """

        config_parser = self._init_defaults()

        global_conf = '/etc/jenkins_params/jenkins_params.ini'
        user_conf = os.path.join(os.path.expanduser('~'), '.config',
                                 'jenkins_params', 'jenkins_params.ini')
        local_conf = os.path.join(os.path.dirname(__file__),
                                  'jenkins_params.ini')
        conf = None
        if config_filename is not None:
            conf = config_filename
        else:
            if os.path.isfile(local_conf):
                conf = local_conf
            elif os.path.isfile(user_conf):
                conf = user_conf
            else:
                conf = global_conf

        if config_file_required and conf is None:
            raise JPConfigException(CONFIG_REQUIRED_MESSAGE)

        config_fp = None
        if conf is not None:
            try:
                config_fp = self._read_config_file(conf)
            except JPConfigException:
                if config_file_required:
                    raise JPConfigException(CONFIG_REQUIRED_MESSAGE)
                else:
                    logger.warning("Config file, {0}, not found. Using "
                                   "default config values.".format(conf))

        if config_fp is not None:
            with config_fp:
                config_parser.read_file(config_fp)

        self.config_parser = config_parser

        self._section = config_section

        self.jenkins = defaultdict(None)
        self.exporter = defaultdict(None)
        self.symbols = {}

        self._setup()

    def _init_defaults(self):
        """ Initialize default configuration values using DEFAULT_CONF
        """
        config = configparser.ConfigParser()
        # keep the case of Jenkins class names in [symbols]
        config.optionxform = str
        # Load default config always
        config.read_string(DEFAULT_CONF)
        return config

    def _read_config_file(self, config_filename):
        """ Given path to configuration file, read it in as a ConfigParser
        object and return that object.
        """
        if os.path.isfile(config_filename):
            self.__config_file = config_filename  # remember file we read from
            logger.debug("Reading config from {0}".format(config_filename))
            config_fp = io.open(config_filename, 'r', encoding='utf-8')
        else:
            raise JPConfigException(
                "A valid configuration file is required. "
                "\n{0} is not valid.".format(config_filename))

        return config_fp

    def _setup(self):
        config = self.config_parser

        logger.debug("Config: {0}".format(config))

        if not config.has_section(self._section):
            raise JPConfigException(
                "Jenkins server section [{0}] is not defined in the "
                "configuration.".format(self._section))

        # Jenkins supports access as an anonymous user, which is enough to
        # read job configurations on many instances. To enable must pass
        # 'None' as the value for user and password to python-jenkins
        try:
            user = config.get(self._section, 'user')
        except configparser.NoOptionError:
            user = None
        self.jenkins['user'] = user

        try:
            password = config.get(self._section, 'password')
        except configparser.NoOptionError:
            password = None
        self.jenkins['password'] = password

        # None -- no timeout, blocking mode; same as setblocking(True)
        # 0.0 -- non-blocking mode; same as setblocking(False) <--- default
        # > 0 -- timeout mode; operations time out after timeout seconds
        # < 0 -- illegal; raises an exception
        # to retain the default must not set timeout at all.
        try:
            timeout = config.getfloat(self._section, 'timeout')
        except ValueError:
            raise JenkinsParamsException("Jenkins timeout config is invalid")
        except configparser.NoOptionError:
            timeout = DEFAULT_TIMEOUT
        self.jenkins['timeout'] = timeout

        self.jenkins['url'] = config.get(self._section, 'url')

        plugins_info = None
        if (config.has_option(self._section, 'query_plugins_info') and
                not config.getboolean(self._section, "query_plugins_info")):
            logger.debug("Skipping plugin info retrieval")
            plugins_info = []
        self.exporter['plugins_info'] = plugins_info

        self.exporter['exclude_properties'] = _split_list(
            config.get('exporter', 'exclude_properties', fallback=''))
        self.exporter['internal_namespaces'] = _split_list(
            config.get('exporter', 'internal_namespaces',
                       fallback=','.join(INTERNAL_NAMESPACES)))

        if config.has_section('symbols'):
            for java_class in config.options('symbols'):
                self.symbols[java_class] = config.get('symbols', java_class)

    def validate(self):
        # Inform the user as to what is likely to happen when talking to a
        # Jenkins instance.
        if self.jenkins['user'] is None and self.jenkins['password'] is None:
            logger.info("Will use anonymous access to Jenkins if needed.")
        elif ((self.jenkins['user'] is not None and
               self.jenkins['password'] is None) or
              (self.jenkins['user'] is None and
               self.jenkins['password'] is not None)):
            raise JenkinsParamsException(
                "Cannot authenticate to Jenkins with only one of User and "
                "Password provided, please check your configuration."
            )

        if (self.exporter['plugins_info'] is not None and
                not isinstance(self.exporter['plugins_info'], list)):
            raise JenkinsParamsException("plugins_info must contain a list!")
