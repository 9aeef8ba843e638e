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

from keystoneadmin.conf import utils


timeout = cfg.FloatOpt(
    'timeout',
    default=30.0,
    min=0,
    help=utils.fmt("""
Timeout (in seconds) applied to every HTTP request sent to the identity
service. The library never retries a request that timed out.
"""))

insecure = cfg.BoolOpt(
    'insecure',
    default=False,
    help=utils.fmt("""
Skip verification of the identity service TLS certificate. This should only
be enabled in test deployments.
"""))

cafile = cfg.StrOpt(
    'cafile',
    help=utils.fmt("""
Absolute path to a PEM encoded certificate authority bundle used to verify
the identity service certificate. If unset, the system bundle is used.
"""))

certfile = cfg.StrOpt(
    'certfile',
    help=utils.fmt("""
Absolute path to a PEM encoded client certificate presented to the identity
service.
"""))

keyfile = cfg.StrOpt(
    'keyfile',
    help=utils.fmt("""
Absolute path to the private key matching `[client] certfile`.
"""))

user_agent = cfg.StrOpt(
    'user_agent',
    default='keystoneadmin',
    help=utils.fmt("""
Value of the User-Agent header sent with every request.
"""))

admin_endpoint_from_catalog = cfg.BoolOpt(
    'admin_endpoint_from_catalog',
    default=False,
    help=utils.fmt("""
Send tenant, user, credential and role requests to the `adminURL` of the
identity service found in the service catalog instead of the URL used to
authenticate. The authentication URL is still used when the catalog has no
such endpoint.
"""))

identity_service_type = cfg.StrOpt(
    'identity_service_type',
    default='identity',
    help=utils.fmt("""
Service type looked up in the service catalog when
`[client] admin_endpoint_from_catalog` is enabled.
"""))


GROUP_NAME = __name__.split('.')[-1]
ALL_OPTS = [
    timeout,
    insecure,
    cafile,
    certfile,
    keyfile,
    user_agent,
    admin_endpoint_from_catalog,
    identity_service_type,
]


def register_opts(conf):
    conf.register_opts(ALL_OPTS, group=GROUP_NAME)


def list_opts():
    return {GROUP_NAME: ALL_OPTS}
