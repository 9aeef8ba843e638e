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


def parse_requirements(filename):
    path = os.path.join(os.path.dirname(os.path.abspath(__file__)), filename)
    with open(path) as f:
        return [line.strip() for line in f
                if line.strip() and not line.startswith('#')]


project = 'keystone-admin-client'


setuptools.setup(
    name=project,
    version='2013.1',
    description="Client library for the OpenStack Identity admin API",
    license='Apache License (2.0)',
    author='OpenStack, LLC.',
    author_email='openstack@lists.launchpad.net',
    url='http://www.openstack.org',
    packages=setuptools.find_packages(include=['keystoneadmin',
                                               'keystoneadmin.*']),
    include_package_data=True,
    zip_safe=False,
    python_requires='>=3.8',
    install_requires=parse_requirements('requirements.txt'),
    extras_require={
        'test': parse_requirements('test-requirements.txt'),
    },
    entry_points={
        'oslo.config.opts': [
            'keystoneadmin = keystoneadmin.conf.opts:list_opts',
        ],
    },
    classifiers=[
        'Environment :: OpenStack',
        'Intended Audience :: Information Technology',
        'Intended Audience :: System Administrators',
        'License :: OSI Approved :: Apache Software License',
        'Operating System :: POSIX :: Linux',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
    ],
)
