from __future__ import annotations

import enum
import time

from .api_client import ApiClient
from .deployment import Deployment
from .display import Display
from .errors import DeploymentError, NotFound
from .outputs import ResultSink
from .probe import ProbeResult, fetch_url, wait_for_url
from .waiters import wait_for_deploy_creation, wait_for_readiness
from typing import Callable, Optional

MAX_CREATE_TIMEOUT = 60 * 5
MAX_WAIT_TIMEOUT = 60 * 15
MAX_READY_TIMEOUT = 60
# A previous deploy for the branch should already be up, so one look is enough.
FALLBACK_PROBE_TIMEOUT = 3


class State(enum.Enum):
    AWAITING_CREATION = 'awaiting_creation'
    CREATED_OK = 'created_ok'
    CREATED_ERROR = 'created_error'
    AWAITING_READINESS = 'awaiting_readiness'
    AWAITING_REACHABLE = 'awaiting_reachable'
    DONE = 'done'


class Outcome(enum.Enum):
    READY = 'ready'
    PREVIOUS_DEPLOY_LIVE = 'previous_deploy_live'
    NO_PREVIEW = 'no_preview'
    UNREACHABLE = 'unreachable'


class DeployWaiter(Display):
    """Waits for Netlify to build `commit_sha` on `site_id` and for the
    resulting site to answer.

    Errors that end the wait are raised; a site that never answers is
    reported to the sink with set_failed and returned as UNREACHABLE.
    """

    state: State = State.AWAITING_CREATION
    deployment: Optional[Deployment] = None
    url: Optional[str] = None

    def __init__(self, client: ApiClient, site_id: str, commit_sha: str,
                 sink: ResultSink,
                 create_timeout: int = MAX_CREATE_TIMEOUT,
                 wait_timeout: int = MAX_WAIT_TIMEOUT,
                 ready_timeout: int = MAX_READY_TIMEOUT,
                 sleep: Callable[[float], None] = time.sleep,
                 fetch: Callable[[str], int] = fetch_url) -> None:
        super().__init__()
        self.client = client
        self.site_id = site_id
        self.commit_sha = commit_sha
        self.sink = sink
        self.create_timeout = create_timeout
        self.wait_timeout = wait_timeout
        self.ready_timeout = ready_timeout
        self.sleep = sleep
        self.fetch = fetch

    def run(self) -> Outcome:
        self.info(f"Waiting for Netlify to create a deployment for git SHA {self.commit_sha}")
        self.state = State.AWAITING_CREATION
        self.deployment = wait_for_deploy_creation(
            lambda: self.client.deploys(self.site_id),
            self.commit_sha,
            self.create_timeout,
            sleep=self.sleep)
        self.url = self.deployment.deploy_url

        if self.deployment.is_error:
            self.state = State.CREATED_ERROR
            return self.handle_error_deploy()

        self.state = State.CREATED_OK
        self.publish()

        self.info(f"Waiting for Netlify deployment {self.deployment.id} in site "
                  f"{self.deployment.name} to be ready")
        self.state = State.AWAITING_READINESS
        wait_for_readiness(
            lambda: self.client.deploy(self.site_id, self.deployment.id),
            self.wait_timeout,
            sleep=self.sleep)

        self.info(f"Waiting for a 200 or 401 from: {self.url}")
        self.state = State.AWAITING_REACHABLE
        result = wait_for_url(self.url, self.ready_timeout,
                              fetch=self.fetch, sleep=self.sleep)
        self.state = State.DONE

        if result is ProbeResult.EXHAUSTED_RETRIES:
            self.sink.set_failed(f"Timeout reached: Unable to connect to {self.url}")
            return Outcome.UNREACHABLE
        return Outcome.READY

    def handle_error_deploy(self) -> Outcome:
        """Netlify cancels builds with no content change and keeps the previous
        deploy live; anything else is a failed build."""
        if not self.deployment.is_no_content_change():
            raise DeploymentError(self.deployment.error_message)

        self.url = self.deployment.deploy_ssl_url
        if not self.url:
            return self.skip()
        try:
            wait_for_url(self.url, FALLBACK_PROBE_TIMEOUT, check_only_once=True,
                         fetch=self.fetch, sleep=self.sleep)
        except NotFound:
            return self.skip()

        self.state = State.DONE
        self.publish()
        return Outcome.PREVIOUS_DEPLOY_LIVE

    def skip(self) -> Outcome:
        self.state = State.DONE
        self.sink.notice("Skipping: no deployment available for this branch")
        self.sink.info(f"No deployment available: {self.deployment.error_message}")
        self.sink.set_output('nopreview', 1)
        return Outcome.NO_PREVIEW

    def publish(self):
        self.sink.set_output('deploy_id', self.deployment.id)
        self.sink.set_output('url', self.url)
