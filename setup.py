# Copyright 2012 Hewlett-Packard Development Company, L.P.
#
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

import os

import setuptools

here = os.path.abspath(os.path.dirname(__file__))

version = {}
with open(os.path.join(here, 'jenkins_params', 'version.py')) as f:
    exec(f.read(), version)

requires = [
    'python-jenkins>=1.0.0',
    'PyYAML>=5.1',
    'stevedore>=3.0.0',
]

test_requires = [
    'fixtures>=3.0.0',
    'testscenarios>=0.4',
    'testtools>=2.4.0',
    'pytest',
]


setuptools.setup(
    name='jenkins-params-export',
    version=version['__version__'],
    author='Hewlett-Packard Development Company, L.P.',
    author_email='openstack@lists.launchpad.net',
    description='Export Jenkins job parameters as a pipeline '
                'parameters block',
    license='Apache License, Version 2.0',
    packages=setuptools.find_packages(exclude=['tests', 'tests.*']),
    include_package_data=True,
    install_requires=requires,
    extras_require={'test': test_requires},
    python_requires='>=3.6',
    zip_safe=False,
    classifiers=[
        'Environment :: Console',
        'Intended Audience :: Developers',
        'Intended Audience :: Information Technology',
        'License :: OSI Approved :: Apache Software License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
    ],
    entry_points={
        'console_scripts': [
            'jenkins-params=jenkins_params.cli.entry:main',
        ],
        'jenkins_params.cli.subcommands': [
            'generate=jenkins_params.cli.subcommand.generate:'
            'GenerateSubCommand',
            'list=jenkins_params.cli.subcommand.list:ListSubCommand',
        ],
        # third party formatters register here, named by parameter kind:
        # 'org.example.FooParameterDefinition=foo_plugin.module:foo_param'
        'jenkins_params.formatters': [],
    }
)
