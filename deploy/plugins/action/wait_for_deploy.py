from __future__ import annotations

import math

from . import NetlifyActionBase
from ..module_utils.errors import ConfigurationMissing
from ..module_utils.github_context import commit_sha_from_env
from ..module_utils.orchestrator import MAX_READY_TIMEOUT, DeployWaiter
from ..module_utils.outputs import ResultSink
from ansible.errors import AnsibleError


class ActionModule(NetlifyActionBase):

  def run(self, tmp=None, task_vars=None):
    if task_vars is None:
      task_vars = dict()

    result = super(ActionModule, self).run(tmp, task_vars)
    del tmp  # tmp no longer has any effect

    result['changed'] = False
    sink = ResultSink()

    try:
      self.createClient(task_vars)

      siteId = self._task.args.get('site_id')
      if not siteId:
        raise ConfigurationMissing("Required field `site_id` was not provided")

      commitSha = self._task.args.get('commit') or commit_sha_from_env()
      if not commitSha:
        raise ConfigurationMissing("Could not determine GitHub commit")

      waiter = DeployWaiter(
        self.client,
        siteId,
        commitSha,
        sink,
        ready_timeout=readyTimeout(self._task.args.get('max_timeout')),
      )
      result['outcome'] = waiter.run().value
    except AnsibleError as e:
      result['failed'] = True
      result['msg'] = e.message
    finally:
      result.update(sink.outputs)
      if sink.notices:
        result['notices'] = sink.notices

    if sink.failed:
      result['failed'] = True
      result['msg'] = sink.failure

    return result


def readyTimeout(value) -> int:
  try:
    timeout = float(value)
  except (TypeError, ValueError):
    return MAX_READY_TIMEOUT
  if not timeout or math.isnan(timeout):
    return MAX_READY_TIMEOUT
  return timeout
