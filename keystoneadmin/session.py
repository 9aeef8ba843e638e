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

"""Authentication against the identity service."""

from oslo_log import log

from keystoneadmin import catalog as ks_catalog
from keystoneadmin import exception
from keystoneadmin import transport as ks_transport


LOG = log.getLogger(__name__)


def _error_payload(response):
    """Return the ``error`` document of a failed response, if any."""
    try:
        error = response.json()['error']
    except (ValueError, KeyError, TypeError):
        return None
    if not isinstance(error, dict):
        return None
    return error


class Session(object):
    """An authenticated session: a token plus the catalog it came with.

    Sessions are created by :meth:`authenticate` and never change after
    that, so one can be shared by several threads as long as its transport
    can.

    """

    def __init__(self, token, auth_url, catalog, transport):
        self._token = token
        self._auth_url = auth_url
        self._catalog = tuple(catalog)
        self._transport = transport

    @property
    def token(self):
        return self._token

    @property
    def auth_url(self):
        return self._auth_url

    @property
    def catalog(self):
        return self._catalog

    @property
    def transport(self):
        return self._transport

    @classmethod
    def authenticate(cls, username, password, tenant_name, auth_url,
                     transport=None):
        """Request a token for a user scoped to a tenant.

        :param username: name of the user to authenticate
        :param password: the user's password
        :param tenant_name: name of the tenant the token is scoped to
        :param auth_url: base URL of the identity API, e.g.
                         ``http://keystone:35357/v2.0``
        :param transport: a :class:`keystoneadmin.transport.Transport`,
                          defaults to a new ``HttpTransport``
        :raises keystoneadmin.exception.AuthFailure: credentials rejected
        :raises keystoneadmin.exception.ParseFailure: the token response
                does not contain a usable token or service catalog
        :raises keystoneadmin.exception.RequestFailure: any other failure
                status

        """
        if transport is None:
            transport = ks_transport.HttpTransport()

        body = {
            'auth': {
                'passwordCredentials': {
                    'username': username,
                    'password': password,
                },
                'tenantName': tenant_name,
            },
        }
        url = '%s/tokens' % auth_url.rstrip('/')
        response = transport.post(url, body=body)

        if not response.ok:
            error = _error_payload(response)
            if response.status_code == 401 or error:
                error = error or {}
                message = error.get('title') or error.get('message')
                LOG.warning('Authentication of user %(user)s on tenant '
                            '%(tenant)s failed: %(status)s',
                            {'user': username, 'tenant': tenant_name,
                             'status': response.status_code})
                raise exception.AuthFailure(
                    message, status_code=response.status_code)
            raise exception.RequestFailure(status_code=response.status_code,
                                           body=response.text)

        try:
            access = response.json()['access']
        except (ValueError, KeyError, TypeError):
            raise exception.ParseFailure(key=ks_catalog.CATALOG_KEY)

        catalog = ks_catalog.parse_catalog(access)
        try:
            token = access['token']['id']
        except (KeyError, TypeError):
            raise exception.ParseFailure(key='token')

        LOG.debug('Authenticated user %(user)s on tenant %(tenant)s, '
                  '%(count)d catalog entries',
                  {'user': username, 'tenant': tenant_name,
                   'count': len(catalog)})
        return cls(token, auth_url, catalog, transport)

    def endpoint(self, service_type, interface):
        """Return the catalog URL of a service interface, or ''."""
        return ks_catalog.find_endpoint(self._catalog, service_type,
                                        interface)

    def request(self, method, url, body=None):
        """Send an authenticated request and check its status.

        :returns: :class:`keystoneadmin.transport.Response`
        :raises keystoneadmin.exception.RequestFailure: non-2xx status

        """
        headers = {'X-Auth-Token': self._token}
        response = self._transport.request(method, url, headers=headers,
                                           body=body)
        if not response.ok:
            LOG.warning('%(method)s %(url)s returned %(status)s',
                        {'method': method, 'url': url,
                         'status': response.status_code})
            raise exception.RequestFailure(status_code=response.status_code,
                                           body=response.text)
        return response
