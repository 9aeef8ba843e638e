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

import http.client

from oslo_log import log

from keystoneadmin.i18n import _


LOG = log.getLogger(__name__)

# Tests use this to make exception message format errors fatal
_FATAL_EXCEPTION_FORMAT_ERRORS = False


class Error(Exception):
    """Base error class.

    Child classes should define a message_format; the keyword arguments
    given to the constructor are interpolated into it.

    """

    message_format = None

    def __init__(self, message=None, **kwargs):
        try:
            message = self._build_message(message, **kwargs)
        except KeyError:
            if _FATAL_EXCEPTION_FORMAT_ERRORS:
                raise
            else:
                LOG.warning('missing exception kwargs (programmer error)')
                message = self.message_format

        super(Error, self).__init__(message)

    def _build_message(self, message, **kwargs):
        """Build and returns an exception message.

        :raises KeyError: given insufficient kwargs

        """
        if message:
            return message
        return self.message_format % kwargs


class AuthFailure(Error):
    """The identity service rejected the supplied credentials.

    The message is the ``title`` (or ``message``) of the error document
    returned by the server.

    """

    message_format = _("Authentication failed: %(status_code)s")

    def __init__(self, message=None, status_code=None, **kwargs):
        self.status_code = status_code
        super(AuthFailure, self).__init__(message, status_code=status_code,
                                          **kwargs)


class ParseFailure(Error):
    """A successful response did not have the expected structure."""

    message_format = _("Error while accessing %(key)s key in returned json")


class ConnectionFailure(Error):
    message_format = _("Unable to establish connection to %(url)s: "
                       "%(reason)s")


class RequestFailure(Error):
    """The identity service answered with a non-2xx status.

    The response body, when there is one, is appended verbatim so that the
    message always ends with what the server said.

    """

    message_format = _("Error while performing request: %(status_code)s "
                       "%(reason)s")

    def __init__(self, message=None, status_code=None, body=None, **kwargs):
        self.status_code = status_code
        self.body = body
        kwargs.setdefault(
            'reason', http.client.responses.get(status_code, ''))
        super(RequestFailure, self).__init__(
            message, status_code=status_code, **kwargs)

    def _build_message(self, message, **kwargs):
        message = super(RequestFailure, self)._build_message(
            message, **kwargs).rstrip()
        if self.body:
            message = '%s: %s' % (message, self.body)
        return message


class RoleAssignmentFailure(RequestFailure):
    """A user was created but the role could not be granted to it.

    ``user`` holds the :class:`keystoneadmin.models.User` created by the
    first step; nothing is rolled back. When the grant never reached the
    server, ``status_code`` is None and the message is the connection error.

    """

    def __init__(self, message=None, user=None, **kwargs):
        self.user = user
        super(RoleAssignmentFailure, self).__init__(message, **kwargs)
