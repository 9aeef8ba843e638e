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

"""Value objects built from identity service payloads.

Identifiers are always assigned by the server; none of these objects is ever
modified after it has been read from a response.

"""

import collections

from oslo_utils import strutils


def _enabled(value):
    # older servers send booleans as strings
    if isinstance(value, bool):
        return value
    return strutils.bool_from_string(value)


class CatalogEntry(collections.namedtuple('CatalogEntry',
                                          'name, type, endpoints')):
    """A service from the catalog with its per-interface URLs.

    ``endpoints`` is a tuple of ``{interface name: URL}`` dicts in the order
    the server listed them.

    """

    __slots__ = ()

    @classmethod
    def from_dict(cls, ref):
        """Build an entry, raising KeyError/TypeError on malformed data."""
        endpoints = ref['endpoints']
        if not isinstance(endpoints, list):
            raise TypeError('endpoints must be a list')
        for endpoint in endpoints:
            if not isinstance(endpoint, dict):
                raise TypeError('endpoint must be a mapping')
        return cls(name=ref['name'], type=ref['type'],
                   endpoints=tuple(dict(e) for e in endpoints))


class Tenant(collections.namedtuple('Tenant',
                                    'id, name, description, enabled')):
    __slots__ = ()

    @classmethod
    def from_dict(cls, ref):
        return cls(id=ref['id'], name=ref.get('name'),
                   description=ref.get('description'),
                   enabled=_enabled(ref.get('enabled', False)))


class User(collections.namedtuple('User', 'id, name, email, enabled')):
    __slots__ = ()

    @classmethod
    def from_dict(cls, ref):
        return cls(id=ref['id'], name=ref.get('name'),
                   email=ref.get('email'),
                   enabled=_enabled(ref.get('enabled', False)))


class Ec2Credential(collections.namedtuple('Ec2Credential',
                                           'access, secret')):
    __slots__ = ()

    @classmethod
    def from_dict(cls, ref):
        return cls(access=ref['access'], secret=ref['secret'])
