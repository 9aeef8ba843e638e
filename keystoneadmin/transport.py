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

"""HTTP transports used to talk to the identity service.

A transport only knows how to send one request and hand back the response.
Status interpretation lives with the callers in :mod:`keystoneadmin.session`
and :mod:`keystoneadmin.client`, which makes it trivial to swap the real
HTTP implementation for a canned one in tests.

"""

from oslo_log import log
from oslo_serialization import jsonutils
from oslo_utils import strutils
import requests

import keystoneadmin.conf
from keystoneadmin import exception


CONF = keystoneadmin.conf.CONF
LOG = log.getLogger(__name__)

JSON_HEADERS = {
    'Accept': 'application/json',
    'Content-Type': 'application/json',
}


class Response(object):
    """Minimal, transport independent view of an HTTP response."""

    def __init__(self, status_code, text='', headers=None):
        self.status_code = int(status_code)
        self.text = text or ''
        self.headers = dict(headers or {})

    @property
    def ok(self):
        return 200 <= self.status_code < 300

    def json(self):
        """Decode the body.

        :raises ValueError: if the body is not valid JSON

        """
        return jsonutils.loads(self.text)

    def __repr__(self):
        return '<Response [%d]>' % self.status_code


class Transport(object):
    """Send a request, receive a response."""

    def request(self, method, url, headers=None, body=None):
        """Perform an HTTP request.

        :param method: HTTP verb (e.g. GET, POST, etc.)
        :param url: absolute URL of the resource
        :param headers: dictionary of HTTP headers
        :param body: a dict serialized as JSON, or an already encoded string
        :returns: :class:`Response`

        """
        raise NotImplementedError()

    def get(self, url, headers=None):
        return self.request('GET', url, headers=headers)

    def post(self, url, headers=None, body=None):
        return self.request('POST', url, headers=headers, body=body)

    def put(self, url, headers=None, body=None):
        return self.request('PUT', url, headers=headers, body=body)

    def delete(self, url, headers=None):
        return self.request('DELETE', url, headers=headers)

    @staticmethod
    def _encode_body(body):
        if isinstance(body, dict):
            return jsonutils.dumps(body)
        return body

    @staticmethod
    def _build_headers(headers=None):
        result = dict(JSON_HEADERS)
        if headers:
            result.update(headers)
        return result


class HttpTransport(Transport):
    """Transport backed by a :class:`requests.Session`.

    TLS and timeout settings default to the ``[client]`` options.

    """

    def __init__(self, timeout=None, insecure=None, cafile=None,
                 certfile=None, keyfile=None, user_agent=None, session=None):
        self.timeout = timeout if timeout is not None else CONF.client.timeout
        if insecure is None:
            insecure = CONF.client.insecure
        cafile = cafile or CONF.client.cafile
        certfile = certfile or CONF.client.certfile
        keyfile = keyfile or CONF.client.keyfile

        if insecure:
            self.verify = False
        else:
            self.verify = cafile or True

        if certfile and keyfile:
            self.cert = (certfile, keyfile)
        else:
            self.cert = certfile

        self.user_agent = user_agent or CONF.client.user_agent
        self.session = session or requests.Session()

    def request(self, method, url, headers=None, body=None):
        headers = self._build_headers(headers)
        headers.setdefault('User-Agent', self.user_agent)
        data = self._encode_body(body)

        LOG.debug('REQ: %(method)s %(url)s %(body)s',
                  {'method': method, 'url': url,
                   'body': strutils.mask_password(data or '')})
        try:
            resp = self.session.request(method, url, headers=headers,
                                        data=data, timeout=self.timeout,
                                        verify=self.verify, cert=self.cert)
        except requests.exceptions.RequestException as e:
            LOG.warning('Request to %(url)s failed: %(error)s',
                        {'url': url, 'error': e})
            raise exception.ConnectionFailure(url=url, reason=e)

        LOG.debug('RESP: [%(status)s] %(method)s %(url)s',
                  {'status': resp.status_code, 'method': method, 'url': url})
        return Response(resp.status_code, resp.text, resp.headers)
