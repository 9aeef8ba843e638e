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

from oslo_config import cfg
from oslo_log import log

from keystoneadmin.conf import client


CONF = cfg.CONF


conf_modules = [
    client,
]


def _register_opts(conf):
    for module in conf_modules:
        module.register_opts(conf)


def configure(conf=None):
    """Register the keystoneadmin and oslo.log options.

    oslo.log options are command line options, so this has to run before
    the configuration is parsed.

    """
    if conf is None:
        conf = CONF

    log.register_options(conf)
    _register_opts(conf)


def setup_logging(conf=None):
    """Set up oslo.log output for applications embedding keystoneadmin.

    The library never configures logging on import. Call :func:`configure`
    before parsing the configuration and this afterwards.

    """
    if conf is None:
        conf = CONF
    log.setup(conf, 'keystoneadmin')


# options read by the library are always available on the global config
_register_opts(CONF)
