# -*- coding: utf-8 -*-

# Options for authenticating with the Netlify API.

from __future__ import (absolute_import, division, print_function)
__metaclass__ = type


class ModuleDocFragment(object):

    DOCUMENTATION = r'''
options:
  netlify_api_endpoint:
    description:
    - Base URL of the Netlify API.
    type: str
    default: https://api.netlify.com/api/v1
  netlify_token:
    description:
    - Personal access token used to authenticate with the API.
    - Falls back to the C(NETLIFY_TOKEN) environment variable.
    type: str
'''
