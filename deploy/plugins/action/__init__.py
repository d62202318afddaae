from __future__ import annotations

import os

from ..module_utils.api_client import NETLIFY_API_ENDPOINT, ApiClient
from ..module_utils.errors import ConfigurationMissing
from ansible.plugins.action import ActionBase


class NetlifyActionBase(ActionBase):

  def run(self, tmp=None, task_vars=None):
    if task_vars is None:
      task_vars = dict()

    result = super(NetlifyActionBase, self).run(tmp, task_vars)
    del tmp

    self._display.v("Task args: %s" % self._task.args)
    return result

  def createClient(self, task_vars):
    token = task_vars.get('netlify_token') or os.environ.get('NETLIFY_TOKEN')
    if not token:
      raise ConfigurationMissing(
        "Please set NETLIFY_TOKEN env variable to your Netlify Personal Access Token secret")

    endpoint = task_vars.get('netlify_api_endpoint') or NETLIFY_API_ENDPOINT

    self.client = ApiClient(
      self._templar.template(token).strip(),
      self._templar.template(endpoint).strip(),
      {'headers': self._task.args.get('headers', {})}
    )
