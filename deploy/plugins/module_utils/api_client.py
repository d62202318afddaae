from __future__ import (absolute_import, division, print_function)
__metaclass__ = type

import json
from ansible.errors import AnsibleError
from ansible.module_utils.urls import open_url, ConnectionError, SSLValidationError
from ansible.module_utils._text import to_native
from ansible.module_utils.six.moves.urllib.error import HTTPError, URLError

from .deployment import Deployment
from .display import Display
from .errors import ApiError, NotFound

display = Display()

NETLIFY_API_ENDPOINT = 'https://api.netlify.com/api/v1'


class ApiClient:

    def __init__(self, token, endpoint=NETLIFY_API_ENDPOINT, options=None) -> None:
        self.options = dict(options or {})

        if 'headers' not in self.options:
            self.options['headers'] = {}
        elif not isinstance(self.options['headers'], dict):
            raise AnsibleError("Expecting client headers to be dictionary.")

        self.options['headers'] = dict(self.options['headers'])
        self.options['headers']['Accept'] = 'application/json'
        self.options['headers']['Authorization'] = "Bearer %s" % token
        self.options['endpoint'] = (endpoint or NETLIFY_API_ENDPOINT).rstrip('/')

    def site_deploys_url(self, site_id):
        return "%s/sites/%s/deploys" % (self.options['endpoint'], site_id)

    def site_deploy_url(self, site_id, deploy_id):
        return "%s/%s" % (self.site_deploys_url(site_id), deploy_id)

    def deploys(self, site_id):
        """List a site's deploys, newest first.

        Returns None when the API gives back no collection at all, so callers
        can tell an empty body apart from an empty list.
        """
        result = self.get(self.site_deploys_url(site_id))
        if result is None:
            return None
        return [Deployment.from_dict(d) for d in result]

    def deploy(self, site_id, deploy_id):
        result = self.get(self.site_deploy_url(site_id, deploy_id))
        if result is None:
            raise NotFound("Failed to get deploy %s for site %s" % (deploy_id, site_id))
        return Deployment.from_dict(result)

    def get(self, url):
        display.v("API call: GET %s" % url)
        try:
            response = open_url(url, method='GET',
                                validate_certs=self.options.get('validate_certs', True),
                                headers=self.options.get('headers', {}),
                                timeout=self.options.get('timeout', 30))
        except HTTPError as e:
            raise ApiError(
                "Received HTTP error: %s" % (to_native(e)))
        except URLError as e:
            raise ApiError(
                "Failed lookup url: %s" % (to_native(e)))
        except SSLValidationError as e:
            raise ApiError(
                "Error validating the server's certificate: %s" % (to_native(e)))
        except ConnectionError as e:
            raise ApiError("Error connecting: %s" % (to_native(e)))

        body = response.read()
        if not body:
            return None
        try:
            result = json.loads(body)
        except ValueError as e:
            raise ApiError("Unable to decode API response: %s" % (to_native(e)))
        display.vvv('API call result: %s' % result)
        return result
