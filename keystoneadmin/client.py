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

"""Administrative operations on tenants, users, credentials and roles.

Every call maps to a single request against the Keystone v2.0 admin API,
except :meth:`Client.create_user` and :meth:`Client.remove_user`, which run
a short sequence of independent requests in a fixed order.

"""

from urllib import parse

from oslo_log import log

import keystoneadmin.conf
from keystoneadmin import exception
from keystoneadmin import models
from keystoneadmin import session


CONF = keystoneadmin.conf.CONF
LOG = log.getLogger(__name__)

ROLE_PATH = ('/tenants/%(tenant_id)s/users/%(user_id)s'
             '/roles/OS-KSADM/%(role_id)s')
EC2_PATH = '/users/%(user_id)s/credentials/OS-EC2'


def _unwrap(response, key, model):
    try:
        return model.from_dict(response.json()[key])
    except (ValueError, KeyError, TypeError):
        raise exception.ParseFailure(key=key)


class Client(session.Session):
    """Keystone v2.0 admin API client.

    Obtain one with :func:`authenticate`; the token it carries is sent as
    ``X-Auth-Token`` with every call.

    """

    @property
    def admin_url(self):
        """Base URL of the admin API."""
        if CONF.client.admin_endpoint_from_catalog:
            url = self.endpoint(CONF.client.identity_service_type, 'adminURL')
            if url:
                return url.rstrip('/')
        return self.auth_url.rstrip('/')

    def _url(self, path, **kwargs):
        quoted = {k: parse.quote(str(v), safe='') for k, v in kwargs.items()}
        return self.admin_url + path % quoted

    def create_tenant(self, name, description, enabled=True):
        """Create a tenant.

        :returns: the :class:`keystoneadmin.models.Tenant` sent back by the
                  server

        """
        body = {'tenant': {'name': name,
                           'description': description,
                           'enabled': enabled}}
        response = self.request('POST', self._url('/tenants'), body=body)
        tenant = _unwrap(response, 'tenant', models.Tenant)
        LOG.debug('Created tenant %(name)s (%(id)s)',
                  {'name': tenant.name, 'id': tenant.id})
        return tenant

    def remove_tenant(self, tenant_id):
        self.request('DELETE', self._url('/tenants/%(id)s', id=tenant_id))

    def create_user(self, name, password, email, tenant_id, role_id,
                    enabled=True):
        """Create a user and grant it a role on a tenant.

        The two steps are not atomic. When ``role_id`` is empty only the user
        is created. If granting the role fails, or the request cannot reach
        the server, the user is left in place and
        :class:`keystoneadmin.exception.RoleAssignmentFailure` is raised with
        the created user on its ``user`` attribute.

        """
        body = {'user': {'name': name,
                         'password': password,
                         'tenantId': tenant_id,
                         'email': email,
                         'enabled': enabled}}
        response = self.request('POST', self._url('/users'), body=body)
        user = _unwrap(response, 'user', models.User)
        LOG.debug('Created user %(name)s (%(id)s)',
                  {'name': user.name, 'id': user.id})

        if role_id:
            try:
                self.add_role_to_user(tenant_id, user.id, role_id)
            except exception.RequestFailure as e:
                raise exception.RoleAssignmentFailure(
                    user=user, status_code=e.status_code, body=e.body)
            except exception.ConnectionFailure as e:
                raise exception.RoleAssignmentFailure(str(e), user=user)
        return user

    def remove_user(self, user_id, tenant_id=None, role_id=None):
        """Delete a user, optionally removing one of its roles first.

        When both ``tenant_id`` and ``role_id`` are given the role is removed
        before the user. A failure at that point stops the sequence and the
        user is not deleted.

        """
        if tenant_id and role_id:
            self.remove_role_from_user(tenant_id, user_id, role_id)
        self.request('DELETE', self._url('/users/%(id)s', id=user_id))

    def create_ec2_credential(self, user_id, tenant_id):
        """Issue an EC2 access/secret pair for a user on a tenant."""
        response = self.request('POST',
                                self._url(EC2_PATH, user_id=user_id),
                                body={'tenant_id': tenant_id})
        return _unwrap(response, 'credential', models.Ec2Credential)

    def remove_ec2_credential(self, user_id, access_key):
        url = self._url(EC2_PATH + '/%(access)s', user_id=user_id,
                        access=access_key)
        self.request('DELETE', url)

    def add_role_to_user(self, tenant_id, user_id, role_id):
        url = self._url(ROLE_PATH, tenant_id=tenant_id, user_id=user_id,
                        role_id=role_id)
        self.request('PUT', url)

    def remove_role_from_user(self, tenant_id, user_id, role_id):
        url = self._url(ROLE_PATH, tenant_id=tenant_id, user_id=user_id,
                        role_id=role_id)
        self.request('DELETE', url)


def authenticate(username, password, tenant_name, auth_url, transport=None):
    """Authenticate and return a :class:`Client` bound to the new token."""
    return Client.authenticate(username, password, tenant_name, auth_url,
                               transport=transport)
