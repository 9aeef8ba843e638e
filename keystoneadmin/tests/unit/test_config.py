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

import fixtures
from oslo_config import cfg

import keystoneadmin.conf
from keystoneadmin.conf import opts
from keystoneadmin.conf import utils
from keystoneadmin.tests.unit import core


CONF = keystoneadmin.conf.CONF


class ConfigTestCase(core.BaseTestCase):

    def test_defaults(self):
        self.assertEqual(30.0, CONF.client.timeout)
        self.assertFalse(CONF.client.insecure)
        self.assertFalse(CONF.client.admin_endpoint_from_catalog)
        self.assertEqual('identity', CONF.client.identity_service_type)

    def test_list_opts(self):
        groups = dict(opts.list_opts())
        self.assertEqual(['client'], list(groups))
        names = [o.name for o in groups['client']]
        self.assertIn('timeout', names)
        self.assertIn('admin_endpoint_from_catalog', names)

    def test_fmt(self):
        self.assertEqual('Line one line two.',
                         utils.fmt('\nLine one\nline two.\n'))


class LoggingSetupTestCase(core.BaseTestCase):

    def setUp(self):
        super(LoggingSetupTestCase, self).setUp()
        self.log_setup = self.useFixture(
            fixtures.MockPatch('oslo_log.log.setup')).mock
        self.capture_warnings = self.useFixture(
            fixtures.MockPatch('logging.captureWarnings')).mock

    def test_setup_logging_after_parsing(self):
        conf = cfg.ConfigOpts()
        keystoneadmin.conf.configure(conf)
        conf([], project='keystoneadmin', default_config_files=[])

        keystoneadmin.conf.setup_logging(conf)

        self.log_setup.assert_called_once_with(conf, 'keystoneadmin')
        self.assertFalse(self.capture_warnings.called)
        self.assertFalse(conf.debug)
        self.assertEqual(30.0, conf.client.timeout)
