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
from jenkins_params.modules import hudson_model
from jenkins_params import xml_config
from tests import base

PROPERTY = """<?xml version='1.1' encoding='UTF-8'?>
<project>
  <properties>
    <hudson.model.ParametersDefinitionProperty>
      <parameterDefinitions>
%s
      </parameterDefinitions>
    </hudson.model.ParametersDefinitionProperty>
  </properties>
</project>
"""


class TestParameterDefinitionReader(base.BaseTestCase):

    def setUp(self):
        super(TestParameterDefinitionReader, self).setUp()
        self.reader = xml_config.ParameterDefinitionReader()

    def read(self, definitions):
        return self.reader.read(PROPERTY % definitions)

    def test_no_property(self):
        self.assertIsNone(self.reader.read('<project><properties/></project>'))

    def test_no_definitions(self):
        self.assertEqual([], self.reader.read(
            '<hudson.model.ParametersDefinitionProperty/>'))

    def test_bytes_and_elements(self):
        xml = (PROPERTY % '<hudson.model.FileParameterDefinition>'
               '<name>F</name></hudson.model.FileParameterDefinition>')
        from_bytes = self.reader.read(xml.encode('utf-8'))
        self.assertEqual('F', from_bytes[0].name)
        root = XML.fromstring(xml.split('?>', 1)[1])
        self.assertEqual('F', self.reader.read(root)[0].name)

    def test_core_definitions(self):
        definitions = self.read("""
        <hudson.model.StringParameterDefinition>
          <name>S</name>
          <defaultValue>  padded  </defaultValue>
          <trim>true</trim>
        </hudson.model.StringParameterDefinition>
        <hudson.model.PasswordParameterDefinition>
          <name>P</name>
          <description>Secret</description>
          <defaultValue>{AQAAABAAAAAQ}</defaultValue>
        </hudson.model.PasswordParameterDefinition>
        <hudson.model.ChoiceParameterDefinition>
          <name>C</name>
          <choices>
            <string>one</string>
            <string>two</string>
          </choices>
        </hudson.model.ChoiceParameterDefinition>
        <hudson.model.RunParameterDefinition>
          <name>R</name>
          <projectName>upstream</projectName>
        </hudson.model.RunParameterDefinition>
        """)
        self.assertEqual(
            [hudson_model.StringParameterDefinition,
             hudson_model.PasswordParameterDefinition,
             hudson_model.ChoiceParameterDefinition,
             hudson_model.RunParameterDefinition],
            [type(definition) for definition in definitions])
        string, password, choice, run = definitions
        self.assertEqual('  padded  ', string.default_value)
        self.assertTrue(string.trim)
        self.assertEqual('padded', string.default_parameter_value.value)
        self.assertIsNone(string.description)
        self.assertEqual('Secret', password.description)
        self.assertEqual(['one', 'two'], choice.choices)
        self.assertEqual('upstream', run.project_name)
        self.assertEqual('ALL', run.filter)

    def test_generic_definition(self):
        definitions = self.read("""
        <com.example.CustomParameterDefinition plugin="custom@1.0">
          <name>X</name>
          <description>Custom</description>
          <count>007</count>
          <limit>-3</limit>
          <enabled>true</enabled>
          <labels>
            <string>a</string>
            <string>b</string>
          </labels>
          <empty class="java.util.ArrayList"/>
        </com.example.CustomParameterDefinition>
        """)
        definition = definitions[0]
        self.assertIsInstance(definition,
                              hudson_model.GenericParameterDefinition)
        self.assertEqual('com.example.CustomParameterDefinition',
                         definition.java_class)
        self.assertEqual('X', definition.name)
        self.assertEqual('Custom', definition.description)
        self.assertEqual('007', definition.count)
        self.assertEqual(-3, definition.limit)
        self.assertIs(True, definition.enabled)
        self.assertEqual(['a', 'b'], definition.labels)
        self.assertEqual('java.util.ArrayList', definition.empty.java_class)
        self.assertEqual((), definition.descriptor.symbols)

    def test_known_plugin_symbol(self):
        java_class = ('hudson.plugins.validating_string_parameter.'
                      'ValidatingStringParameterDefinition')
        definitions = self.read(
            '<%s><name>V</name><regex>[a-z]+</regex></%s>' % (
                java_class, java_class))
        self.assertEqual(('validatingString',),
                         definitions[0].descriptor.symbols)

    def test_configured_symbols(self):
        reader = xml_config.ParameterDefinitionReader(
            {'com.example.CustomParameterDefinition': 'custom'})
        definitions = reader.read(PROPERTY % """
        <com.example.CustomParameterDefinition>
          <name>X</name>
        </com.example.CustomParameterDefinition>
        """)
        self.assertEqual(('custom',), definitions[0].descriptor.symbols)
        self.assertIn('org.biouno.unochoice.ChoiceParameter', reader.symbols)

    def test_missing_name(self):
        with ExpectedException(
                errors.MissingAttributeError,
                "Missing name from an instance of "
                "'hudson.model.StringParameterDefinition'"):
            self.read("""
            <hudson.model.StringParameterDefinition>
              <defaultValue>x</defaultValue>
            </hudson.model.StringParameterDefinition>
            """)


class TestXmlObject(base.BaseTestCase):

    def test_nested_object(self):
        element = XML.fromstring(
            '<script class="org.biouno.unochoice.model.GroovyScript">'
            '<secureScript><script>return 1</script>'
            '<sandbox>false</sandbox></secureScript></script>')
        value = xml_config.convert_value(element)
        self.assertEqual('org.biouno.unochoice.model.GroovyScript',
                         value.java_class)
        self.assertEqual('return 1', value.secureScript.script)
        self.assertIs(False, value.secureScript.sandbox)
        self.assertEqual(
            'GroovyScript [secureScript=secureScript [script=return 1, '
            'sandbox=False]]', str(value))

    def test_missing_field(self):
        value = xml_config.XmlObject('thing')
        self.assertRaises(AttributeError, getattr, value, 'missing')
        self.assertIsNone(getattr(value, 'missing', None))

    def test_string_array(self):
        element = XML.fromstring(
            '<choices class="java.util.Arrays$ArrayList">'
            '<a class="string-array"><string>x</string><string/></a>'
            '</choices>')
        self.assertEqual(['x', ''], xml_config.convert_value(element))
