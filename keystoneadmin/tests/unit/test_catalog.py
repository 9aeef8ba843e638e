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

from keystoneadmin import catalog
from keystoneadmin import exception
from keystoneadmin import models
from keystoneadmin.tests.unit import core


NOVA_ADMIN = 'http://nova.mycloud.com:8774/v2/xpto'


class InterfaceAliasTestCase(core.BaseTestCase):

    def test_v2_to_v3(self):
        self.assertEqual('admin', catalog.interface_alias('adminURL'))
        self.assertEqual('public', catalog.interface_alias('publicURL'))
        self.assertEqual('internal', catalog.interface_alias('internalURL'))

    def test_v3_to_v2(self):
        self.assertEqual('adminURL', catalog.interface_alias('admin'))
        self.assertEqual('publicURL', catalog.interface_alias('public'))


class ParseCatalogTestCase(core.BaseTestCase):

    def test_parse(self):
        entries = catalog.parse_catalog(core.TOKEN_RESPONSE['access'])
        self.assertEqual(len(core.SERVICE_CATALOG), len(entries))
        self.assertEqual([s['type'] for s in core.SERVICE_CATALOG],
                         [e.type for e in entries])

    def test_missing_key(self):
        self.assertRaises(exception.ParseFailure,
                          catalog.parse_catalog, {'token': {'id': 'x'}})

    def test_entry_without_name(self):
        access = {'serviceCatalog': [{'type': 'compute', 'endpoints': []}]}
        self.assertRaises(exception.ParseFailure,
                          catalog.parse_catalog, access)

    def test_entry_is_not_a_mapping(self):
        access = {'serviceCatalog': ['compute']}
        self.assertRaises(exception.ParseFailure,
                          catalog.parse_catalog, access)


class FindEndpointTestCase(core.BaseTestCase):

    def setUp(self):
        super(FindEndpointTestCase, self).setUp()
        self.catalog = catalog.parse_catalog(core.TOKEN_RESPONSE['access'])

    def test_exact_interface(self):
        self.assertEqual(NOVA_ADMIN, catalog.find_endpoint(
            self.catalog, 'compute', 'adminURL'))

    def test_admin_alias(self):
        self.assertEqual(
            catalog.find_endpoint(self.catalog, 'compute', 'adminURL'),
            catalog.find_endpoint(self.catalog, 'compute', 'admin'))

    def test_public_alias(self):
        self.assertEqual('http://swift.mycloud.com:8080/v1/AUTH_xpto',
                         catalog.find_endpoint(self.catalog, 'object-store',
                                               'public'))

    def test_v3_catalog_with_v2_interface_name(self):
        entries = (models.CatalogEntry(
            name='nova', type='compute',
            endpoints=({'admin': NOVA_ADMIN},)),)
        self.assertEqual(NOVA_ADMIN, catalog.find_endpoint(
            entries, 'compute', 'adminURL'))

    def test_first_matching_type_wins(self):
        self.assertEqual(NOVA_ADMIN, catalog.find_endpoint(
            self.catalog, 'compute', 'admin'))

    def test_first_matching_type_wins_even_without_interface(self):
        entries = (
            models.CatalogEntry(name='a', type='compute',
                                endpoints=({'publicURL': 'http://a'},)),
            models.CatalogEntry(name='b', type='compute',
                                endpoints=({'adminURL': 'http://b'},)),
        )
        self.assertEqual('', catalog.find_endpoint(entries, 'compute',
                                                   'admin'))

    def test_later_endpoint_of_the_entry(self):
        entries = (models.CatalogEntry(
            name='nova', type='compute',
            endpoints=({'publicURL': 'http://one'},
                       {'adminURL': 'http://two'})),)
        self.assertEqual('http://two', catalog.find_endpoint(
            entries, 'compute', 'admin'))

    def test_unknown_service_type(self):
        self.assertEqual('', catalog.find_endpoint(
            self.catalog, 'sempute', 'admin'))

    def test_unknown_interface(self):
        self.assertEqual('', catalog.find_endpoint(
            self.catalog, 'compute', 'private'))

    def test_empty_catalog(self):
        self.assertEqual('', catalog.find_endpoint((), 'compute', 'admin'))


class SessionEndpointTestCase(core.ClientTestCase):

    def test_endpoint(self):
        c = self.authenticate()
        self.assertEqual(NOVA_ADMIN, c.endpoint('compute', 'admin'))
        self.assertEqual(NOVA_ADMIN, c.endpoint('compute', 'adminURL'))
        self.assertEqual('', c.endpoint('sempute', 'admin'))
