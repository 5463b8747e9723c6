# Licensed under the Apache License, Version 2.0 (the "License"); you may
# not use this file except in compliance with the License. You may obtain
# a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS, WITHOUT
# WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the
# License for the specific language governing permissions and limitations
# under the License.

import xml.etree.ElementTree as XML

from testtools import ExpectedException

from jenkins_params import errors
from tests import base


def _read_definition(element):
    raise errors.MissingAttributeError('name')


def format_parameter(properties):
    raise errors.ParameterFormatError('choices', 'x')


class TestParameterFormatError(base.BaseTestCase):

    def test_with_module_name(self):
        with ExpectedException(
                errors.ParameterFormatError,
                "'1' is not a usable value for FOO.choices"):
            raise errors.ParameterFormatError('choices', 1, 'FOO')

    def test_name_from_formatter_frame(self):
        with ExpectedException(
                errors.ParameterFormatError,
                "'x' is not a usable value for BAR.choices"):
            format_parameter({'name': 'BAR'})

    def test_unresolved_name(self):
        with ExpectedException(
                errors.ParameterFormatError,
                "'x' is not a usable value for <unresolved>.mode"):
            raise errors.ParameterFormatError('mode', 'x')


class TestMissingAttributeError(base.BaseTestCase):

    def test_name_from_reader_frame(self):
        element = XML.Element('com.example.FooParameterDefinition')
        with ExpectedException(
                errors.MissingAttributeError,
                "Missing name from an instance of "
                "'com.example.FooParameterDefinition'"):
            _read_definition(element)

    def test_one_of(self):
        with ExpectedException(
                errors.MissingAttributeError,
                "One of 'script', 'fallbackScript' must be present in "
                "'ZONE'"):
            raise errors.MissingAttributeError(['script', 'fallbackScript'],
                                               'ZONE')
