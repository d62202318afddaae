#!/usr/bin/python
# -*- coding: utf-8 -*-

DOCUMENTATION = r'''
module: wait_for_deploy
short_description: Wait for a Netlify deployment of a commit
description:
    - Waits for Netlify to create a deployment for a commit, for that
      deployment to become ready, and for the deployed site to answer
      with a 2xx, 3xx or 401 status.
    - When Netlify cancelled the build because nothing changed, the
      previous deployment of the branch is checked once instead. If it is
      not available the task succeeds with C(nopreview) set.
extends_documentation_fragment:
    - netlify.deploy.auth_options
options:
  site_id:
    description:
      - The Netlify site ID.
    required: true
    type: str
  commit:
    description:
      - The commit SHA to wait for.
      - Defaults to the pull request head SHA or C(GITHUB_SHA) when running
        in GitHub Actions.
    type: str
  max_timeout:
    description:
      - Seconds to wait for the deployed site to answer.
    type: int
    default: 60
  headers:
    description:
      - Extra headers sent to the Netlify API.
    type: dict
'''

EXAMPLES = r'''
- name: Wait for the preview of the current commit
  netlify.deploy.wait_for_deploy:
    site_id: 7a4f0b2e-1c9d-4e55-9b0a-3f2d1e6c8a90
    max_timeout: 120
  register: preview

- debug:
    msg: "Preview available at {{ preview.url }}"
  when: preview.nopreview is not defined
'''

RETURN = r'''
deploy_id:
  description: The ID of the Netlify deployment.
  returned: when a deployment is available
  type: str
url:
  description: The URL the deployment is served from.
  returned: when a deployment is available
  type: str
nopreview:
  description: Set to 1 when the build was skipped and no previous deployment is available.
  returned: when no deployment is available
  type: int
outcome:
  description: One of C(ready), C(previous_deploy_live), C(no_preview) or C(unreachable).
  returned: when the wait ran to completion
  type: str
'''
