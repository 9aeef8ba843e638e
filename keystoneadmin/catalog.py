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

"""Service catalog parsing and endpoint lookup."""

from oslo_log import log

from keystoneadmin import exception
from keystoneadmin import models


LOG = log.getLogger(__name__)

CATALOG_KEY = 'serviceCatalog'

# v2.0 catalogs name interfaces 'adminURL', 'publicURL' and 'internalURL',
# v3 calls the same ones 'admin', 'public' and 'internal'.
V2_INTERFACE_SUFFIX = 'URL'


def interface_alias(interface):
    """Return the other historical name of an endpoint interface."""
    if interface.endswith(V2_INTERFACE_SUFFIX):
        return interface[:-len(V2_INTERFACE_SUFFIX)]
    return interface + V2_INTERFACE_SUFFIX


def parse_catalog(access):
    """Build catalog entries from the ``access`` document of a token.

    :param access: the ``access`` mapping of an authentication response
    :returns: tuple of :class:`keystoneadmin.models.CatalogEntry`, in the
              order the server listed them
    :raises keystoneadmin.exception.ParseFailure: if the catalog is missing
            or any entry lacks ``name``, ``type`` or ``endpoints``

    """
    try:
        services = access[CATALOG_KEY]
        if not isinstance(services, list):
            raise TypeError('%s must be a list' % CATALOG_KEY)
        return tuple(models.CatalogEntry.from_dict(s) for s in services)
    except (KeyError, TypeError) as e:
        LOG.warning('Malformed service catalog in token response: %s', e)
        raise exception.ParseFailure(key=CATALOG_KEY)


def find_endpoint(catalog, service_type, interface):
    """Find the URL of ``interface`` for the first service of a type.

    Only the first entry whose type matches is considered. The interface is
    looked up under its own name first, then under its alias (``admin`` for
    ``adminURL`` and the other way around).

    :returns: the URL, or an empty string when nothing matches

    """
    for entry in catalog:
        if entry.type != service_type:
            continue
        for name in (interface, interface_alias(interface)):
            for endpoint in entry.endpoints:
                url = endpoint.get(name)
                if url:
                    return url
        return ''
    return ''
